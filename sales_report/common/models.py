"""Shared Pydantic data models for the sales report.

Input records describe one sales snapshot (sellers, products, purchase
records). Output records are the report contract consumed by the CLI,
the exporter, and any presentation layer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_INPUT_CONFIG = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)
_OUTPUT_CONFIG = ConfigDict(frozen=True)


# === Input Models ===

class Seller(BaseModel):
    """Party whose sales performance is measured."""
    model_config = _INPUT_CONFIG

    id: str = Field(min_length=1)
    first_name: str
    last_name: str
    name: str | None = None
    position: str = ""

    @property
    def display_name(self) -> str:
        """Explicit name when provided, else first and last name."""
        if self.name:
            return self.name
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    """Catalog item identified by SKU."""
    model_config = _INPUT_CONFIG

    sku: str = Field(min_length=1)
    name: str
    purchase_price: float = Field(ge=0, description="Cost price per unit")
    sale_price: float | None = Field(default=None, ge=0, description="List price")
    category: str | None = None
    vendor: str | None = None


class LineItem(BaseModel):
    """A single product line within a purchase record."""
    model_config = _INPUT_CONFIG

    sku: str
    quantity: int = Field(gt=0)
    sale_price: float = Field(ge=0, description="Unit sale price")
    discount: float = Field(default=0.0, ge=0, le=100, description="Discount percent")


class PurchaseRecord(BaseModel):
    """One completed transaction by a seller.

    receipt_id, date, customer_id and the totals are informational;
    revenue is always summed from the line items.
    """
    model_config = _INPUT_CONFIG

    seller_id: str
    items: list[LineItem] = []
    receipt_id: str | None = None
    date: str | None = None
    customer_id: str | None = None
    total_amount: float | None = None
    total_discount: float | None = None


class SalesSnapshot(BaseModel):
    """Complete input bundle for one analysis run."""
    model_config = _INPUT_CONFIG

    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]
    customers: list[dict] = []


# === Report Contract ===

class TopProduct(BaseModel):
    """One entry of a seller's best-selling products."""
    model_config = _OUTPUT_CONFIG

    sku: str
    name: str
    quantity: int
    revenue: float


class ReportEntry(BaseModel):
    """Externally visible result for a single seller, in rank order."""
    model_config = _OUTPUT_CONFIG

    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: list[TopProduct] = []
    bonus: float


class ReportSummary(BaseModel):
    """Totals across a whole report."""
    model_config = _OUTPUT_CONFIG

    seller_count: int
    sales_count: int
    revenue: float
    profit: float
    bonus: float
