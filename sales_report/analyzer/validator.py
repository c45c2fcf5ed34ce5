"""Precondition checks for one analysis run.

Checks run before any indexing, in this order:
1. Options: a bundle holding callable calculate_revenue and calculate_bonus
2. Input shape: a bundle holding sellers (non-empty), products and
   purchase_records sequences
3. Records: every seller, product and purchase record parses into its
   typed model

All validators raise InvalidOptions or InvalidInput and never touch the
objects they are given.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from ..common.models import SalesSnapshot
from .exceptions import InvalidInput, InvalidOptions
from .strategies import AnalysisOptions

logger = logging.getLogger(__name__)

REQUIRED_OPTIONS = ("calculate_revenue", "calculate_bonus")

# (collection name, must be non-empty)
REQUIRED_COLLECTIONS = (
    ("sellers", True),
    ("products", False),
    ("purchase_records", False),
)


def validate_options(options: object) -> None:
    """Check that options carries both strategies and both are callable.

    Raises:
        InvalidOptions: If options is None, not a mapping or
            AnalysisOptions, misses a strategy, or holds a non-callable.
    """
    if options is None:
        raise InvalidOptions("Options are required")

    if isinstance(options, AnalysisOptions):
        values = {name: getattr(options, name) for name in REQUIRED_OPTIONS}
    elif isinstance(options, Mapping):
        values = options
    else:
        raise InvalidOptions(
            "Options must be a mapping or AnalysisOptions",
            f"got {type(options).__name__}",
        )

    for name in REQUIRED_OPTIONS:
        value = values.get(name)
        if value is None:
            raise InvalidOptions("Missing required option", name, option=name)
        if not callable(value):
            raise InvalidOptions(
                "Option must be callable",
                f"{name} is {type(value).__name__}",
                option=name,
            )


def resolve_options(options: object) -> AnalysisOptions:
    """Validate options and return them as AnalysisOptions."""
    validate_options(options)
    if isinstance(options, AnalysisOptions):
        return options
    return AnalysisOptions(
        calculate_revenue=options["calculate_revenue"],
        calculate_bonus=options["calculate_bonus"],
    )


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def validate_input(data: object) -> None:
    """Check the shape of the data bundle.

    Raises:
        InvalidInput: If data is None or not a mapping, or a required
            collection is missing, not a sequence, or (sellers) empty.
    """
    if isinstance(data, SalesSnapshot):
        if not data.sellers:
            raise InvalidInput("Sellers must not be empty", field="sellers")
        return

    if data is None:
        raise InvalidInput("Input data is required")

    if not isinstance(data, Mapping):
        raise InvalidInput(
            "Input data must be a mapping",
            f"got {type(data).__name__}",
        )

    for name, non_empty in REQUIRED_COLLECTIONS:
        if name not in data or data[name] is None:
            raise InvalidInput("Missing required collection", name, field=name)
        value = data[name]
        if not _is_sequence(value):
            raise InvalidInput(
                "Collection must be a sequence",
                f"{name} is {type(value).__name__}",
                field=name,
            )
        if non_empty and len(value) == 0:
            raise InvalidInput("Collection must not be empty", name, field=name)


def _describe_error(exc: ValidationError) -> tuple[str, str]:
    """Return (field path, message) for the first pydantic error."""
    first = exc.errors()[0]
    path = ".".join(str(part) for part in first.get("loc", ()))
    return path, first.get("msg", str(exc))


def parse_snapshot(data: Mapping | SalesSnapshot) -> SalesSnapshot:
    """Validate the bundle and parse every record into its typed model.

    Args:
        data: Raw mapping (e.g. loaded from JSON) or an already-built snapshot.

    Returns:
        Parsed SalesSnapshot.

    Raises:
        InvalidInput: On any shape or field-level failure.
    """
    validate_input(data)
    if isinstance(data, SalesSnapshot):
        return data

    try:
        snapshot = SalesSnapshot.model_validate(
            {name: data[name] for name, _ in REQUIRED_COLLECTIONS}
        )
    except ValidationError as exc:
        path, message = _describe_error(exc)
        logger.debug("Snapshot rejected: %d error(s), first at %s", exc.error_count(), path)
        raise InvalidInput("Invalid record", f"{path}: {message}", field=path) from exc

    logger.debug(
        "Parsed snapshot: %d sellers, %d products, %d purchase records",
        len(snapshot.sellers),
        len(snapshot.products),
        len(snapshot.purchase_records),
    )
    return snapshot
