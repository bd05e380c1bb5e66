"""
Shared infrastructure components for Graph Schema Designer.
"""

from .monitoring.logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
