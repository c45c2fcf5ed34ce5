"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .logging import resolve_level

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"


class ReportSettings(BaseModel):
    """Shape of the projected report."""
    top_products_limit: int = Field(default=10, gt=0)
    decimal_places: int = Field(default=2, ge=0)
    unknown_product_name: str = "unknown product"


class BonusSettings(BaseModel):
    """Percent of profit paid per rank tier."""
    first_percent: float = 15.0
    runner_up_percent: float = 10.0
    default_percent: float = 5.0
    last_percent: float = 0.0


class StrategySettings(BaseModel):
    """Named strategies used by the CLI when none are given."""
    revenue: str = "simple"
    bonus: str = "by_profit"


class Settings(BaseModel):
    """Top-level application settings."""
    report: ReportSettings = Field(default_factory=ReportSettings)
    bonus: BonusSettings = Field(default_factory=BonusSettings)
    strategies: StrategySettings = Field(default_factory=StrategySettings)
    log_level: str = "INFO"

    @classmethod
    def load(cls, path: str | Path | None = None) -> Settings:
        """Load settings from a YAML file, falling back to defaults.

        Environment variables override file values and are validated the
        same way: SALES_REPORT_TOP_PRODUCTS_LIMIT,
        SALES_REPORT_REVENUE_STRATEGY, SALES_REPORT_BONUS_STRATEGY,
        SALES_REPORT_LOG_LEVEL.

        Raises:
            pydantic.ValidationError: If a file or env value is out of range.
        """
        load_dotenv(PROJECT_ROOT / ".env")

        settings_path = Path(path) if path else CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        _apply_env_overrides(data)
        return cls(**data)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, INFO when the name is unknown."""
        return resolve_level(self.log_level)


def _section(data: dict, name: str) -> dict:
    if not isinstance(data.get(name), dict):
        data[name] = {}
    return data[name]


def _apply_env_overrides(data: dict) -> None:
    """Merge SALES_REPORT_* env values into raw settings data."""
    if limit := os.getenv("SALES_REPORT_TOP_PRODUCTS_LIMIT"):
        _section(data, "report")["top_products_limit"] = limit
    if revenue := os.getenv("SALES_REPORT_REVENUE_STRATEGY"):
        _section(data, "strategies")["revenue"] = revenue
    if bonus := os.getenv("SALES_REPORT_BONUS_STRATEGY"):
        _section(data, "strategies")["bonus"] = bonus
    if level := os.getenv("SALES_REPORT_LOG_LEVEL"):
        data["log_level"] = level.upper()
