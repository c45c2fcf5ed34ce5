# Common utilities and shared modules
"""
Shared components used by the analyzer:
- Data models (Pydantic schemas)
- Logging configuration
- Project configuration
"""

from .config import PROJECT_ROOT, CONFIG_DIR, Settings
from .logging import setup_logging

__all__ = [
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "Settings",
    "setup_logging",
]
