"""End-to-end tests for the analysis pipeline."""

from __future__ import annotations

import copy
import logging

import pytest

from sales_report.analyzer import (
    AnalysisOptions,
    InvalidInput,
    InvalidOptions,
    analyze,
    analyze_sales_data,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
    summarize,
)
from sales_report.common.config import ReportSettings
from sales_report.common.models import SalesSnapshot


class TestAnalyze:
    def test_single_seller_scenario(self, single_seller_data, default_options):
        report = analyze(single_seller_data, default_options)

        assert len(report) == 1
        entry = report[0]
        assert entry.seller_id == "S1"
        assert entry.name == "Solo Seller"
        assert entry.revenue == 40.00
        assert entry.profit == 20.00
        assert entry.sales_count == 1
        # index 0 is also the last index; the first-rank tier wins
        assert entry.bonus == 3.00
        assert [(p.sku, p.name, p.quantity, p.revenue) for p in entry.top_products] == [
            ("P1", "Widget", 2, 40.0),
        ]

    def test_sample_report(self, sample_data, default_options):
        report = analyze(sample_data, default_options)

        assert [e.seller_id for e in report] == ["seller_1", "seller_2", "seller_3"]
        first, second, third = report

        assert first.revenue == 75.0
        assert first.profit == 39.0
        assert first.sales_count == 2
        assert first.bonus == pytest.approx(5.85)
        assert [p.sku for p in first.top_products] == ["SKU_002", "SKU_001"]

        assert second.name == "Boris V."
        assert second.revenue == 33.5
        assert second.profit == 13.5
        assert second.bonus == pytest.approx(1.35)
        assert [p.sku for p in second.top_products] == ["SKU_003", "SKU_001"]

        assert third.sales_count == 0
        assert third.top_products == []
        assert third.bonus == 0

    def test_one_entry_per_distinct_seller(self, sample_data, default_options):
        sample_data["sellers"].append(dict(sample_data["sellers"][0]))
        report = analyze(sample_data, default_options)
        assert len(report) == 3

    def test_sales_count_matches_known_seller_records(self, sample_data, default_options):
        report = analyze(sample_data, default_options)
        known = {s["id"] for s in sample_data["sellers"]}
        expected = sum(1 for r in sample_data["purchase_records"] if r["seller_id"] in known)
        assert sum(e.sales_count for e in report) == expected == 4

    def test_profit_non_increasing(self, sample_data, default_options):
        report = analyze(sample_data, default_options)
        for current, following in zip(report, report[1:]):
            assert current.profit >= following.profit

    def test_last_rank_gets_no_bonus(self, sample_data, default_options):
        sample_data["sellers"].append(
            {"id": "seller_4", "first_name": "Dmitry", "last_name": "Popov", "position": "Intern"}
        )
        report = analyze(sample_data, default_options)
        assert report[0].bonus == pytest.approx(report[0].profit * 0.15)
        assert report[-1].bonus == 0

    def test_idempotent(self, sample_data, default_options):
        assert analyze(sample_data, default_options) == analyze(sample_data, default_options)

    def test_input_not_mutated(self, sample_data, default_options):
        before = copy.deepcopy(sample_data)
        analyze(sample_data, default_options)
        assert sample_data == before

    def test_mapping_options(self, single_seller_data):
        report = analyze(single_seller_data, {
            "calculate_revenue": calculate_simple_revenue,
            "calculate_bonus": calculate_bonus_by_profit,
        })
        assert report[0].bonus == 3.0

    def test_accepts_snapshot(self, sample_data, default_options):
        snapshot = SalesSnapshot.model_validate(sample_data)
        assert analyze(snapshot, default_options) == analyze(sample_data, default_options)

    def test_long_name_alias(self, single_seller_data, default_options):
        assert analyze_sales_data(single_seller_data, default_options) == analyze(
            single_seller_data, default_options
        )

    def test_report_settings_limit(self, sample_data, default_options):
        report = analyze(sample_data, default_options, ReportSettings(top_products_limit=1))
        assert all(len(e.top_products) <= 1 for e in report)

    def test_numeric_ids(self, default_options):
        data = {
            "sellers": [{"id": 1, "first_name": "A", "last_name": "B"}],
            "products": [{"sku": 100, "name": "N", "purchase_price": 1}],
            "purchase_records": [
                {"seller_id": 1, "items": [{"sku": 100, "quantity": 1, "sale_price": 3}]},
            ],
        }
        report = analyze(data, default_options)
        assert report[0].seller_id == "1"
        assert report[0].profit == 2.0
        assert report[0].top_products[0].sku == "100"


class TestDirtyData:
    def test_unknown_seller_ignored(self, single_seller_data, default_options):
        clean = analyze(single_seller_data, default_options)
        single_seller_data["purchase_records"].append(
            {"seller_id": "ghost", "items": [{"sku": "P1", "quantity": 9, "sale_price": 99}]}
        )
        assert analyze(single_seller_data, default_options) == clean

    def test_unknown_sku_ignored(self, single_seller_data, default_options):
        single_seller_data["purchase_records"][0]["items"].append(
            {"sku": "P404", "quantity": 9, "sale_price": 99, "discount": 0}
        )
        entry = analyze(single_seller_data, default_options)[0]
        assert entry.revenue == 40.0
        assert entry.profit == 20.0
        assert [p.sku for p in entry.top_products] == ["P1"]

    def test_no_records(self, single_seller_data, default_options):
        single_seller_data["purchase_records"] = []
        single_seller_data["products"] = []
        entry = analyze(single_seller_data, default_options)[0]
        assert entry.sales_count == 0
        assert entry.revenue == 0
        assert entry.bonus == 0

    def test_skip_counts_logged_at_debug(self, sample_data, default_options, caplog):
        caplog.set_level(logging.DEBUG, logger="sales_report.analyzer.pipeline")
        analyze(sample_data, default_options)

        messages = [
            r.getMessage() for r in caplog.records
            if r.name == "sales_report.analyzer.pipeline"
        ]
        stats_line = next(m for m in messages if m.startswith("Aggregation stats: "))
        assert "'records_skipped': 1" in stats_line
        assert "'items_skipped': 1" in stats_line


class TestFailures:
    def test_missing_bonus_option(self, sample_data):
        before = copy.deepcopy(sample_data)
        with pytest.raises(InvalidOptions):
            analyze(sample_data, {"calculate_revenue": calculate_simple_revenue})
        assert sample_data == before

    def test_options_checked_before_input(self):
        with pytest.raises(InvalidOptions):
            analyze(None, None)

    def test_empty_sellers(self, sample_data, default_options):
        sample_data["sellers"] = []
        with pytest.raises(InvalidInput):
            analyze(sample_data, default_options)

    def test_missing_data(self, default_options):
        with pytest.raises(InvalidInput):
            analyze(None, default_options)

    def test_strategy_errors_propagate(self, sample_data):
        def broken_bonus(index, total, seller):
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError):
            analyze(sample_data, AnalysisOptions(calculate_simple_revenue, broken_bonus))


class TestSummarize:
    def test_totals(self, sample_data, default_options):
        summary = summarize(analyze(sample_data, default_options))
        assert summary.seller_count == 3
        assert summary.sales_count == 4
        assert summary.revenue == 108.5
        assert summary.profit == 52.5
        assert summary.bonus == pytest.approx(7.2)

    def test_empty_report(self):
        summary = summarize([])
        assert summary.seller_count == 0
        assert summary.revenue == 0
