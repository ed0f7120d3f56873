"""Utility modules for loxscan.

Provides:
- logger: get_logger for logging
"""

from loxscan.utils.logger import get_logger

__all__ = ["get_logger"]
