"""Seller sales performance pipeline.

    options → validate
    data    → validate → parse → index → aggregate → rank/bonus → report

Every call allocates its own indexes and accumulators. A call either
returns the full report or raises before any of it is built.

Usage:
    from sales_report.analyzer import AnalysisOptions, analyze

    report = analyze(data, AnalysisOptions.defaults())
    for entry in report:
        print(entry.seller_id, entry.profit, entry.bonus)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..common.config import ReportSettings
from ..common.models import ReportEntry, ReportSummary, SalesSnapshot
from .aggregator import aggregate
from .indexer import build_product_index, build_seller_index
from .ranker import build_report
from .strategies import AnalysisOptions
from .validator import parse_snapshot, resolve_options

logger = logging.getLogger(__name__)


def analyze(
    data: Mapping | SalesSnapshot,
    options: Mapping | AnalysisOptions,
    report_settings: ReportSettings | None = None,
) -> list[ReportEntry]:
    """Compute the ranked per-seller report for one sales snapshot.

    Args:
        data: Mapping with sellers, products and purchase_records, or a
            SalesSnapshot.
        options: Mapping or AnalysisOptions with calculate_revenue and
            calculate_bonus.
        report_settings: Top-products limit, rounding and unknown-product
            name. Defaults to ReportSettings().

    Returns:
        ReportEntry list ordered by profit, highest first.

    Raises:
        InvalidOptions: If the strategies are missing or not callable.
        InvalidInput: If the data bundle or any record is malformed.
    """
    resolved = resolve_options(options)
    snapshot = parse_snapshot(data)
    report_settings = report_settings or ReportSettings()

    seller_index = build_seller_index(snapshot.sellers)
    product_index = build_product_index(snapshot.products)
    logger.info(
        "Indexed %d sellers and %d products",
        len(seller_index), len(product_index),
    )

    stats = aggregate(
        snapshot.purchase_records,
        seller_index,
        product_index,
        resolved.calculate_revenue,
    )
    logger.debug("Aggregation stats: %s", stats.to_dict())

    return build_report(
        seller_index.values(),
        product_index,
        resolved.calculate_bonus,
        limit=report_settings.top_products_limit,
        decimal_places=report_settings.decimal_places,
        unknown_name=report_settings.unknown_product_name,
    )


analyze_sales_data = analyze


def summarize(report: list[ReportEntry], decimal_places: int = 2) -> ReportSummary:
    """Totals across all sellers of a finished report."""
    return ReportSummary(
        seller_count=len(report),
        sales_count=sum(entry.sales_count for entry in report),
        revenue=round(sum(entry.revenue for entry in report), decimal_places),
        profit=round(sum(entry.profit for entry in report), decimal_places),
        bonus=round(sum(entry.bonus for entry in report), decimal_places),
    )
