"""
Sales Report: seller performance analysis

Modules:
- common: Settings, logging setup, and the input/report data models
- analyzer: Validation, indexing, aggregation, ranking, export and CLI
"""

__version__ = "0.1.0"
