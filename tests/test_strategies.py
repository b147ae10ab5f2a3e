from decimal import Decimal

import pytest

from seller_report.models import LineItem, Product, SellerStats
from seller_report.money import round_money, to_decimal
from seller_report.strategies import bonus_rate, calculate_bonus_by_profit, calculate_simple_revenue


def line(quantity, sale_price, discount="0"):
    return LineItem(sku="A", quantity=quantity, sale_price=Decimal(sale_price), discount=Decimal(discount))


PRODUCT = Product(sku="A", purchase_price=Decimal("5"))


class TestSimpleRevenue:
    def test_no_discount(self):
        assert calculate_simple_revenue(line(2, "10"), PRODUCT) == Decimal("20")

    def test_discount_percent(self):
        assert calculate_simple_revenue(line(4, "25", "20"), PRODUCT) == Decimal("80")

    def test_discount_defaults_to_zero(self):
        item = LineItem(sku="A", quantity=1, sale_price=Decimal("9.99"))
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("9.99")

    def test_null_discount_read_as_zero(self):
        item = LineItem(sku="A", quantity=3, sale_price=Decimal("4"), discount=None)
        assert item.discount == Decimal("0")
        assert calculate_simple_revenue(item, PRODUCT) == Decimal("12")

    def test_result_not_rounded(self):
        assert calculate_simple_revenue(line(1, "10.005", "10"), PRODUCT) == Decimal("9.0045")


class TestBonus:
    @pytest.mark.parametrize("index, total, expected", [
        (0, 1, "0.15"),   # top wins over last
        (0, 5, "0.15"),
        (1, 5, "0.10"),
        (2, 5, "0.10"),
        (3, 5, "0.05"),
        (4, 5, "0.00"),
        (1, 2, "0.10"),   # 2nd place wins over last
        (2, 3, "0.10"),
        (3, 4, "0.00"),
    ])
    def test_rate_by_rank(self, index, total, expected):
        assert bonus_rate(index, total) == Decimal(expected)

    def test_bonus_is_an_amount(self):
        seller = SellerStats(seller_id="S-1", name="Anna", profit=Decimal("1000"))
        assert calculate_bonus_by_profit(0, 3, seller) == Decimal("150")


class TestMoney:
    @pytest.mark.parametrize("value, expected", [
        (Decimal("2.675"), "2.68"),
        (Decimal("-2.675"), "-2.68"),
        (Decimal("2.674"), "2.67"),
        (10, "10.00"),
        (0.1 + 0.2, "0.30"),
    ])
    def test_round_money(self, value, expected):
        assert round_money(value) == Decimal(expected)

    def test_float_converted_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_non_number_rejected(self):
        with pytest.raises(TypeError):
            to_decimal("12.5")
