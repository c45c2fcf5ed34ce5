"""CLI entry point for the sales analyzer.

Usage:
    python -m sales_report.analyzer.main --data data/snapshot.json
    python -m sales_report.analyzer.main --data data/snapshot.json --bonus none
    python -m sales_report.analyzer.main --data data/snapshot.json --seller seller_1
    python -m sales_report.analyzer.main --data data/snapshot.json \\
        --output data/exports/report.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from ..common.config import Settings
from ..common.logging import setup_logging
from .exceptions import AnalysisError
from .exporter import export_report, load_snapshot
from .pipeline import analyze
from .strategies import BONUS_STRATEGIES, REVENUE_STRATEGIES, AnalysisOptions, make_bonus_by_profit

logger = logging.getLogger("sales_report.analyzer.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seller sales performance report")
    parser.add_argument(
        "--data",
        type=str,
        required=True,
        help="Sales snapshot JSON (sellers, products, purchase_records)",
    )
    parser.add_argument(
        "--revenue",
        type=str,
        choices=sorted(REVENUE_STRATEGIES),
        help="Revenue strategy (default from settings)",
    )
    parser.add_argument(
        "--bonus",
        type=str,
        choices=sorted(BONUS_STRATEGIES),
        help="Bonus strategy (default from settings)",
    )
    parser.add_argument(
        "--seller",
        type=str,
        help="Print the full report entry of one seller id",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output JSON file path",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log skipped records and duplicate keys",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.load(args.config)
    except ValidationError as exc:
        parser.error(f"Invalid settings: {exc}")
    setup_logging(logging.DEBUG if args.verbose else settings.log_level_value)

    revenue_name = args.revenue or settings.strategies.revenue
    bonus_name = args.bonus or settings.strategies.bonus
    bonus = settings.bonus

    try:
        options = AnalysisOptions.from_names(
            revenue_name,
            bonus_name,
            bonus_factory=lambda: make_bonus_by_profit(
                bonus.first_percent,
                bonus.runner_up_percent,
                bonus.default_percent,
                bonus.last_percent,
            ),
        )
        data = load_snapshot(args.data)
        report = analyze(data, options, settings.report)
    except (AnalysisError, FileNotFoundError) as exc:
        logger.error("Analysis failed: %s", exc)
        return 1

    if args.seller:
        entry = next((e for e in report if e.seller_id == args.seller), None)
        if entry is None:
            parser.error(f"Seller {args.seller!r} not found in report")
        print(f"=== Seller {entry.seller_id} (rank {report.index(entry) + 1}) ===")
        print(json.dumps(entry.model_dump(), ensure_ascii=False, indent=2))
    else:
        print(f"=== Sales report: {len(report)} sellers ===")
        for rank, entry in enumerate(report, start=1):
            print(
                f"  #{rank} {entry.name} ({entry.seller_id}): "
                f"revenue={entry.revenue:,.2f}, profit={entry.profit:,.2f}, "
                f"sales={entry.sales_count}, bonus={entry.bonus:,.2f}"
            )

    export = export_report(
        report,
        args.output,
        revenue_strategy=revenue_name,
        bonus_strategy=bonus_name,
    )
    summary = export["summary"]
    print(
        f"Totals: revenue={summary['revenue']:,.2f}, "
        f"profit={summary['profit']:,.2f}, bonus={summary['bonus']:,.2f}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
