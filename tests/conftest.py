"""Shared test fixtures for the sales report."""

import copy
import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installation
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from sales_report.analyzer.strategies import AnalysisOptions


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return PROJECT_ROOT / "tests" / "fixtures"


@pytest.fixture
def sample_data() -> dict:
    """Three sellers, three products, five purchase records.

    Expected totals with the default strategies:
        seller_1: revenue 75.0, cost 36.0, profit 39.0, 2 sales
        seller_2: revenue 33.5, cost 20.0, profit 13.5, 2 sales
        seller_3: nothing sold
    seller_unknown's record and the SKU_999 item are dropped.
    """
    data = {
        "sellers": [
            {"id": "seller_1", "first_name": "Anna", "last_name": "Smirnova", "position": "Senior"},
            {"id": "seller_2", "first_name": "Boris", "last_name": "Volkov", "name": "Boris V.", "position": "Junior"},
            {"id": "seller_3", "first_name": "Clara", "last_name": "Orlova", "position": "Junior"},
        ],
        "products": [
            {"sku": "SKU_001", "name": "Coffee beans", "purchase_price": 10},
            {"sku": "SKU_002", "name": "Green tea", "purchase_price": 4},
            {"sku": "SKU_003", "name": "Mug", "purchase_price": 2.5},
        ],
        "purchase_records": [
            {
                "receipt_id": "r1",
                "seller_id": "seller_1",
                "items": [
                    {"sku": "SKU_001", "quantity": 2, "sale_price": 20, "discount": 0},
                    {"sku": "SKU_002", "quantity": 1, "sale_price": 10, "discount": 50},
                ],
            },
            {
                "receipt_id": "r2",
                "seller_id": "seller_2",
                "items": [
                    {"sku": "SKU_003", "quantity": 4, "sale_price": 5, "discount": 0},
                ],
            },
            {
                "receipt_id": "r3",
                "seller_id": "seller_1",
                "items": [
                    {"sku": "SKU_002", "quantity": 3, "sale_price": 10, "discount": 0},
                    {"sku": "SKU_999", "quantity": 1, "sale_price": 100, "discount": 0},
                ],
            },
            {
                "receipt_id": "r4",
                "seller_id": "seller_unknown",
                "items": [
                    {"sku": "SKU_001", "quantity": 10, "sale_price": 20, "discount": 0},
                ],
            },
            {
                "receipt_id": "r5",
                "seller_id": "seller_2",
                "items": [
                    {"sku": "SKU_001", "quantity": 1, "sale_price": 15, "discount": 10},
                ],
            },
        ],
    }
    return copy.deepcopy(data)


@pytest.fixture
def single_seller_data() -> dict:
    """One seller, one product (purchase_price 10), one sale of 2 x 20."""
    return {
        "sellers": [{"id": "S1", "first_name": "Solo", "last_name": "Seller", "position": "Lead"}],
        "products": [{"sku": "P1", "name": "Widget", "purchase_price": 10}],
        "purchase_records": [
            {"seller_id": "S1", "items": [{"sku": "P1", "quantity": 2, "sale_price": 20, "discount": 0}]},
        ],
    }


@pytest.fixture
def default_options() -> AnalysisOptions:
    return AnalysisOptions.defaults()
