"""Rank sellers, assign bonuses and project the public report.

Steps:
1. Sort accumulators by profit, highest first (stable on ties)
2. Ask the bonus strategy for each seller's bonus amount by rank
3. Pick each seller's best-selling products by quantity
4. Project each accumulator into an immutable ReportEntry
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..common.models import Product, ReportEntry, TopProduct
from .indexer import lookup_product
from .models import SellerAccumulator
from .strategies import BonusStrategy

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10
DECIMAL_PLACES = 2
UNKNOWN_PRODUCT = "unknown product"


def rank_sellers(accumulators: Iterable[SellerAccumulator]) -> list[SellerAccumulator]:
    """Return accumulators ordered by profit, highest first."""
    return sorted(accumulators, key=lambda s: s.profit, reverse=True)


def assign_bonuses(
    ranked: list[SellerAccumulator], calculate_bonus: BonusStrategy
) -> None:
    """Store calculate_bonus(index, total, seller) on every ranked seller."""
    total = len(ranked)
    for index, seller in enumerate(ranked):
        seller.bonus = calculate_bonus(index, total, seller)
        logger.debug("Rank %d/%d: %s", index + 1, total, seller.to_dict())


def top_products(
    seller: SellerAccumulator,
    product_index: dict[str, Product],
    limit: int = TOP_PRODUCTS_LIMIT,
    decimal_places: int = DECIMAL_PLACES,
    unknown_name: str = UNKNOWN_PRODUCT,
) -> list[TopProduct]:
    """Best-selling products of one seller by quantity.

    Ties keep first-sold order. A SKU missing from product_index is
    named unknown_name.
    """
    ordered = sorted(
        seller.products_sold.items(),
        key=lambda entry: entry[1].quantity,
        reverse=True,
    )
    result: list[TopProduct] = []
    for sku, sold in ordered[:limit]:
        product = lookup_product(product_index, sku)
        result.append(TopProduct(
            sku=sku,
            name=product.name if product is not None else unknown_name,
            quantity=sold.quantity,
            revenue=round(sold.revenue, decimal_places),
        ))
    return result


def project(seller: SellerAccumulator, decimal_places: int = DECIMAL_PLACES) -> ReportEntry:
    """Build the public entry for one seller; cost and products_sold stay behind."""
    return ReportEntry(
        seller_id=seller.seller_id,
        name=seller.name,
        revenue=round(seller.revenue, decimal_places),
        profit=round(seller.profit, decimal_places),
        sales_count=seller.sales_count,
        top_products=list(seller.top_products),
        bonus=round(seller.bonus, decimal_places),
    )


def build_report(
    accumulators: Iterable[SellerAccumulator],
    product_index: dict[str, Product],
    calculate_bonus: BonusStrategy,
    limit: int = TOP_PRODUCTS_LIMIT,
    decimal_places: int = DECIMAL_PLACES,
    unknown_name: str = UNKNOWN_PRODUCT,
) -> list[ReportEntry]:
    """Rank, reward and project accumulators into the report, in rank order."""
    ranked = rank_sellers(accumulators)
    assign_bonuses(ranked, calculate_bonus)

    for seller in ranked:
        seller.top_products = top_products(
            seller, product_index, limit, decimal_places, unknown_name
        )

    report = [project(seller, decimal_places) for seller in ranked]

    if report:
        logger.info(
            "Ranked %d sellers: top=%s (profit=%s, bonus=%s)",
            len(report),
            report[0].seller_id,
            f"{report[0].profit:,.2f}",
            f"{report[0].bonus:,.2f}",
        )
    return report
