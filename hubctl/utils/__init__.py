"""Utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .get_package_version import get_package_version
from .human_size import human_size
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "get_package_version",
    "human_size",
]
