"""Snapshot loading and report export.

Reads one sales snapshot from JSON and writes a finished report back
out as JSON for whatever presentation layer consumes it.

Output schema:
- generated_at, revenue_strategy, bonus_strategy
- summary (ReportSummary)
- sellers (ReportEntry list, rank order)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from ..common.models import ReportEntry
from .exceptions import InvalidInput
from .pipeline import summarize

logger = logging.getLogger(__name__)


def load_snapshot(path: str | Path) -> dict:
    """Load a sales snapshot JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidInput: If the body is not valid JSON or not an object.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidInput("Snapshot is not valid JSON", f"{path}: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidInput(
            "Snapshot must be a JSON object",
            f"{path}: got {type(data).__name__}",
        )

    logger.info(
        "Loaded snapshot %s: %d sellers, %d products, %d purchase records",
        path,
        len(data.get("sellers") or []),
        len(data.get("products") or []),
        len(data.get("purchase_records") or []),
    )
    return data


def export_report(
    report: list[ReportEntry],
    output_path: str | Path | None = None,
    revenue_strategy: str = "",
    bonus_strategy: str = "",
) -> dict:
    """Build the export dict and optionally write it to output_path.

    Args:
        report: Ranked report entries.
        output_path: JSON file to write; nothing is written when None.
        revenue_strategy: Name recorded in the export header.
        bonus_strategy: Name recorded in the export header.

    Returns:
        The export dict.
    """
    export = {
        "generated_at": datetime.now().isoformat(),
        "revenue_strategy": revenue_strategy,
        "bonus_strategy": bonus_strategy,
        "summary": summarize(report).model_dump(),
        "sellers": [entry.model_dump() for entry in report],
    }

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(export, f, ensure_ascii=False, indent=2, default=str)

        logger.info("Exported report (%d sellers) -> %s", len(report), output_path)

    return export
