"""
Reference revenue and bonus calculators.

The engine never hardcodes a formula: callers pass these (or their own)
functions in ``AnalysisOptions``. Both return unrounded amounts; rounding
happens when the report rows are built.
"""

from decimal import Decimal
from typing import Callable, Optional

from pydantic import BaseModel

from seller_report.models import LineItem, Product, SellerStats

RevenueFn = Callable[[LineItem, Product], Decimal | float | int]
BonusFn = Callable[[int, int, SellerStats], Decimal | float | int]

TOP_BONUS_RATE       = Decimal("0.15")  # 1st place
RUNNER_UP_BONUS_RATE = Decimal("0.10")  # 2nd / 3rd place
LAST_BONUS_RATE      = Decimal("0.00")  # last place
DEFAULT_BONUS_RATE   = Decimal("0.05")  # everyone else


def calculate_simple_revenue(item: LineItem, product: Product) -> Decimal:
    discount_factor = 1 - item.discount / Decimal("100")
    return item.sale_price * item.quantity * discount_factor


def bonus_rate(index: int, total: int) -> Decimal:
    # order matters: with a single seller index 0 is also the last place
    if index == 0:
        return TOP_BONUS_RATE
    if index in (1, 2):
        return RUNNER_UP_BONUS_RATE
    if index == total - 1:
        return LAST_BONUS_RATE
    return DEFAULT_BONUS_RATE


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStats) -> Decimal:
    """Return the bonus *amount* (profit × tier rate), not the rate."""
    return seller.profit * bonus_rate(index, total)


class AnalysisOptions(BaseModel):
    calculate_revenue: Optional[RevenueFn] = None
    calculate_bonus: Optional[BonusFn] = None


DEFAULT_OPTIONS = AnalysisOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)
