"""Fold purchase records into per-seller running totals.

Records are consumed once, in order. A record whose seller is unknown is
skipped whole; a line item whose SKU is unknown is skipped alone and the
rest of its record still counts. Neither case raises.

Per resolved line item:
    cost    = product.purchase_price * item.quantity
    revenue = calculate_revenue(item, product)
    profit  = revenue - cost
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..common.models import Product, PurchaseRecord
from .indexer import lookup_product, lookup_seller
from .models import AggregationStats, SellerAccumulator
from .strategies import RevenueStrategy

logger = logging.getLogger(__name__)


def aggregate(
    records: Iterable[PurchaseRecord],
    seller_index: dict[str, SellerAccumulator],
    product_index: dict[str, Product],
    calculate_revenue: RevenueStrategy,
) -> AggregationStats:
    """Accumulate every record into the accumulators held by seller_index.

    Args:
        records: Purchase records in input order.
        seller_index: Seller id → accumulator (mutated in place).
        product_index: SKU → catalog product.
        calculate_revenue: Revenue strategy for one line item.

    Returns:
        AggregationStats with processed/skipped counts.
    """
    stats = AggregationStats()

    for record in records:
        seller = lookup_seller(seller_index, record.seller_id)
        if seller is None:
            stats.records_skipped += 1
            logger.debug(
                "Skipping record %s: unknown seller %s",
                record.receipt_id or "-", record.seller_id,
            )
            continue

        stats.records_processed += 1
        seller.sales_count += 1

        for item in record.items:
            product = lookup_product(product_index, item.sku)
            if product is None:
                stats.items_skipped += 1
                logger.debug(
                    "Skipping item in record %s: unknown SKU %s",
                    record.receipt_id or "-", item.sku,
                )
                continue

            cost = product.purchase_price * item.quantity
            revenue = calculate_revenue(item, product)
            seller.add_sale(item.sku, item.quantity, revenue, cost)
            stats.items_processed += 1

    logger.info(
        "Aggregated %d/%d records (%d items, %d unknown-SKU items skipped)",
        stats.records_processed,
        stats.records_total,
        stats.items_processed,
        stats.items_skipped,
    )
    return stats
