from pydantic import BaseModel, ConfigDict, Field, field_validator
from decimal import Decimal
from typing import Optional


class Seller(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


class Product(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    sku: str
    purchase_price: Decimal = Decimal("0")
    sale_price: Optional[Decimal] = None
    name: Optional[str] = None


class LineItem(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    sku: str
    quantity: int
    sale_price: Decimal
    discount: Optional[Decimal] = Decimal("0")  # percent, e.g. Decimal("10") for 10 %

    @field_validator("discount", mode="after")
    @classmethod
    def _no_discount_is_zero(cls, value: Optional[Decimal]) -> Decimal:
        return Decimal("0") if value is None else value


class PurchaseRecord(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    seller_id: str
    items: list[LineItem] = Field(default_factory=list)
    receipt_id: Optional[str] = None


class SalesData(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Aggregation ──────────────────────────────────────────────────────────────

class SellerStats(BaseModel):
    """Running totals for one seller, mutated while records are folded in."""

    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")
    sales_count: int = 0
    # sku → units, insertion order = first time the sku was sold
    products_sold: dict[str, int] = Field(default_factory=dict)
    profit: Decimal = Decimal("0")


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int


class SellerReportRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
