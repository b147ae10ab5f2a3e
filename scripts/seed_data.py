"""
Deterministic test-data generator.

Produces:
  - 5 sellers   (3 with a display name, 2 with first/last name only)
  - 30 products (purchase price 40–70 % of the sale price)
  - 200 purchase records spread over Jan 2026, 1–5 line items each
    - ~30 % of line items discounted (5 / 10 / 15 %)
  - 1 record for a seller that does not exist (skipped by the report)
  - 1 line item with a sku missing from the catalogue (zero cost)
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from seller_report.models import LineItem, Product, PurchaseRecord, Seller
from seller_report.store import DataStore

SEED = 42
START = date(2026, 1, 1)
N_PRODUCTS = 30
N_RECORDS = 200


def _money(rng: random.Random, lo: float, hi: float) -> Decimal:
    return Decimal(str(round(rng.uniform(lo, hi), 2)))


def seed(store: DataStore) -> None:
    rng = random.Random(SEED)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [
        Seller(id="seller_1", name="Alexey Petrov"),
        Seller(id="seller_2", name="Ivan Smirnov"),
        Seller(id="seller_3", first_name="Maria", last_name="Kuznetsova"),
        Seller(id="seller_4", name="Elena Sokolova"),
        Seller(id="seller_5", first_name="Dmitry", last_name="Volkov"),
    ]
    for s in sellers:
        store.add_seller(s)

    # ── products ─────────────────────────────────────────────────────────────
    for n in range(1, N_PRODUCTS + 1):
        sale_price = _money(rng, 50, 3_000)
        margin = Decimal(str(round(rng.uniform(0.40, 0.70), 2)))
        store.add_product(Product(
            sku=f"SKU_{n:03d}",
            name=f"Product {n:03d}",
            sale_price=sale_price,
            purchase_price=(sale_price * margin).quantize(Decimal("0.01")),
        ))

    catalogue = store.list_products()
    seller_ids = [s.id for s in sellers]
    # uneven weights so the ranking is not a coin toss
    weights = [30, 25, 20, 15, 10]

    # ── purchase records ─────────────────────────────────────────────────────
    for n in range(1, N_RECORDS + 1):
        seller_id = rng.choices(seller_ids, weights=weights)[0]
        items = []
        for product in rng.sample(catalogue, rng.randint(1, 5)):
            discount = rng.choice([5, 10, 15]) if rng.random() < 0.30 else 0
            items.append(LineItem(
                sku=product.sku,
                quantity=rng.randint(1, 10),
                sale_price=product.sale_price,
                discount=Decimal(discount),
            ))
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n:04d}",
            date=str(START + timedelta(days=rng.randint(0, 30))),
            seller_id=seller_id,
            items=items,
        ))

    # unknown seller: must be ignored by the report
    store.add_purchase_record(PurchaseRecord(
        receipt_id=f"receipt_{N_RECORDS + 1:04d}",
        seller_id="seller_999",
        items=[LineItem(sku="SKU_001", quantity=1, sale_price=Decimal("100.00"))],
    ))

    # sku missing from the catalogue: counted with zero cost
    store.add_purchase_record(PurchaseRecord(
        receipt_id=f"receipt_{N_RECORDS + 2:04d}",
        seller_id="seller_1",
        items=[LineItem(sku="SKU_DISCONTINUED", quantity=2, sale_price=Decimal("250.00"))],
    ))
