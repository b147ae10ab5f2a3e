import logging
from collections.abc import Mapping
from decimal import Decimal

from pydantic import ValidationError

from seller_report.errors import InvalidInput, MissingStrategy
from seller_report.models import (
    Product,
    PurchaseRecord,
    SalesData,
    Seller,
    SellerReportRow,
    SellerStats,
    TopProduct,
)
from seller_report.money import round_money, to_decimal
from seller_report.strategies import AnalysisOptions, BonusFn, RevenueFn

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10
_COLLECTIONS = ("sellers", "products", "purchase_records")


# ── 1. Validation ────────────────────────────────────────────────────────────

def _validate_data(data) -> SalesData:
    if data is None:
        raise InvalidInput("Sales data is missing")
    if isinstance(data, SalesData):
        raw = {name: getattr(data, name) for name in _COLLECTIONS}
    elif isinstance(data, Mapping):
        raw = data
    else:
        raise InvalidInput(f"Sales data must be a mapping, got {type(data).__name__}")

    for name in _COLLECTIONS:
        value = raw.get(name)
        if not isinstance(value, (list, tuple)) or len(value) == 0:
            raise InvalidInput(f"'{name}' must be a non-empty list")

    if isinstance(data, SalesData):
        return data
    try:
        return SalesData.model_validate(data)
    except ValidationError as exc:
        raise InvalidInput(f"Malformed sales data: {exc.error_count()} error(s)\n{exc}") from exc


def _validate_options(options) -> AnalysisOptions:
    if options is None:
        raise MissingStrategy("Revenue and bonus calculation functions are required")
    if not isinstance(options, AnalysisOptions):
        try:
            options = AnalysisOptions.model_validate(options)
        except ValidationError as exc:
            raise MissingStrategy(f"Invalid calculation functions: {exc}") from exc

    missing = [
        name for name in ("calculate_revenue", "calculate_bonus")
        if getattr(options, name) is None
    ]
    if missing:
        raise MissingStrategy(f"Missing calculation function(s): {', '.join(missing)}")
    return options


def validate(data, options) -> tuple[SalesData, AnalysisOptions]:
    """Check preconditions; raise InvalidInput / MissingStrategy on failure."""
    return _validate_data(data), _validate_options(options)


# ── 2. Indexes ───────────────────────────────────────────────────────────────

def build_product_index(products: list[Product]) -> dict[str, Product]:
    # a later product with the same sku replaces the earlier one
    return {p.sku: p for p in products}


def init_seller_accumulators(sellers: list[Seller]) -> dict[str, SellerStats]:
    stats: dict[str, SellerStats] = {}
    for s in sellers:
        stats[s.id] = SellerStats(seller_id=s.id, name=s.display_name)
    return stats


# ── 3. Aggregation ───────────────────────────────────────────────────────────

def accumulate(
    records: list[PurchaseRecord],
    product_index: dict[str, Product],
    accumulators: dict[str, SellerStats],
    calculate_revenue: RevenueFn,
) -> None:
    """Fold every purchase record into its seller's running totals, in place."""
    for record in records:
        stats = accumulators.get(record.seller_id)
        if stats is None:
            logger.debug("Skipping record for unknown seller %r", record.seller_id)
            continue

        # one per receipt, not per unit
        stats.sales_count += 1

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                logger.debug("Unknown sku %r on record for seller %r, cost taken as 0",
                             item.sku, record.seller_id)
                product = Product(sku=item.sku, purchase_price=Decimal("0"))

            item_cost = product.purchase_price * item.quantity
            item_revenue = to_decimal(calculate_revenue(item, product))

            stats.revenue += item_revenue
            stats.cost += item_cost
            stats.products_sold[item.sku] = stats.products_sold.get(item.sku, 0) + item.quantity


# ── 4. Ranking & report ──────────────────────────────────────────────────────

def _top_products(products_sold: dict[str, int], limit: int) -> list[TopProduct]:
    # stable sort: equal quantities keep the order the skus were first sold in
    ranked = sorted(products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def rank(
    accumulators: dict[str, SellerStats],
    calculate_bonus: BonusFn,
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> list[SellerReportRow]:
    for stats in accumulators.values():
        stats.profit = stats.revenue - stats.cost

    # stable sort: equal profits keep the input order of sellers
    ranked = sorted(accumulators.values(), key=lambda s: s.profit, reverse=True)
    total = len(ranked)

    rows: list[SellerReportRow] = []
    for idx, stats in enumerate(ranked):
        bonus = calculate_bonus(idx, total, stats)
        rows.append(
            SellerReportRow(
                seller_id=stats.seller_id,
                name=stats.name,
                revenue=round_money(stats.revenue),
                profit=round_money(stats.profit),
                sales_count=stats.sales_count,
                top_products=_top_products(stats.products_sold, top_products_limit),
                bonus=round_money(bonus),
            )
        )
    return rows


def analyze_sales_data(
    data,
    options,
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> list[SellerReportRow]:
    """Build the seller performance report, best profit first.

    ``data`` is a ``SalesData`` or an equivalent mapping; ``options`` an
    ``AnalysisOptions`` or a mapping with ``calculate_revenue`` and
    ``calculate_bonus``. Raises ``InvalidInput`` / ``MissingStrategy`` before
    any aggregation happens.
    """
    sales, opts = validate(data, options)

    products = build_product_index(sales.products)
    accumulators = init_seller_accumulators(sales.sellers)
    accumulate(sales.purchase_records, products, accumulators, opts.calculate_revenue)
    rows = rank(accumulators, opts.calculate_bonus, top_products_limit)

    logger.info(
        "Seller report built: %d sellers, %d purchase records",
        len(rows), len(sales.purchase_records),
    )
    return rows
