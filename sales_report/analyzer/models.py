"""Working-state models for one analysis run.

All models use @dataclass with to_dict() for debugging output,
matching the rest of the analyzer. None of these leave the pipeline;
the public result is built from them by explicit projection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..common.models import Seller, TopProduct


@dataclass
class SoldProduct:
    """Running quantity and revenue for one SKU sold by one seller."""

    quantity: int = 0
    revenue: float = 0.0

    def to_dict(self) -> dict:
        return {"quantity": self.quantity, "revenue": self.revenue}


@dataclass
class SellerAccumulator:
    """Mutable per-seller totals, filled by the aggregator and ranker."""

    seller_id: str
    name: str
    sales_count: int = 0
    revenue: float = 0.0
    cost: float = 0.0
    profit: float = 0.0
    # Insertion order is first-encountered SKU order
    products_sold: dict[str, SoldProduct] = field(default_factory=dict)
    bonus: float = 0.0
    top_products: list[TopProduct] = field(default_factory=list)

    @classmethod
    def from_seller(cls, seller: Seller) -> SellerAccumulator:
        return cls(seller_id=seller.id, name=seller.display_name)

    def add_sale(self, sku: str, quantity: int, revenue: float, cost: float) -> None:
        """Add one resolved line item to the running totals."""
        self.revenue += revenue
        self.cost += cost
        self.profit += revenue - cost

        sold = self.products_sold.get(sku)
        if sold is None:
            sold = SoldProduct()
            self.products_sold[sku] = sold
        sold.quantity += quantity
        sold.revenue += revenue

    def to_dict(self) -> dict:
        return {
            "seller_id": self.seller_id,
            "name": self.name,
            "sales_count": self.sales_count,
            "revenue": self.revenue,
            "cost": self.cost,
            "profit": self.profit,
            "products_sold": {sku: s.to_dict() for sku, s in self.products_sold.items()},
            "bonus": self.bonus,
            "top_products": [p.model_dump() for p in self.top_products],
        }


@dataclass
class AggregationStats:
    """Counts of what the aggregator consumed and skipped."""

    records_processed: int = 0
    records_skipped: int = 0
    items_processed: int = 0
    items_skipped: int = 0

    @property
    def records_total(self) -> int:
        return self.records_processed + self.records_skipped

    def to_dict(self) -> dict:
        return {
            "records_processed": self.records_processed,
            "records_skipped": self.records_skipped,
            "items_processed": self.items_processed,
            "items_skipped": self.items_skipped,
        }
