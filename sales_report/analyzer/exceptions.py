"""
Exception hierarchy for the sales analyzer.

Exception Hierarchy:
    AnalysisError (base)
    ├── InvalidInput    - data bundle or one of its collections is malformed
    └── InvalidOptions  - strategy bundle is missing or not callable

Both are raised before any indexing or aggregation happens.
"""

from __future__ import annotations


class AnalysisError(ValueError):
    """Base exception for all analyzer errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidInput(AnalysisError):
    """
    The data bundle failed a shape or content check.

    `field` names the offending collection or record path when known.
    """

    def __init__(self, message: str, details: str | None = None, field: str | None = None):
        super().__init__(message, details)
        self.field = field


class InvalidOptions(AnalysisError):
    """
    The options bundle is missing, malformed, or holds non-callable strategies.
    """

    def __init__(self, message: str, details: str | None = None, option: str | None = None):
        super().__init__(message, details)
        self.option = option
