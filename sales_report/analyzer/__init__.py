"""Sales Analyzer Module - Seller ranking, bonuses and top products."""

from .exceptions import AnalysisError, InvalidInput, InvalidOptions
from .pipeline import analyze, analyze_sales_data, summarize
from .strategies import (
    BONUS_STRATEGIES,
    REVENUE_STRATEGIES,
    AnalysisOptions,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
    make_bonus_by_profit,
)

__all__ = [
    "AnalysisError",
    "InvalidInput",
    "InvalidOptions",
    "analyze",
    "analyze_sales_data",
    "summarize",
    "AnalysisOptions",
    "BONUS_STRATEGIES",
    "REVENUE_STRATEGIES",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "make_bonus_by_profit",
]
