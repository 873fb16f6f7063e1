"""Utility functions for bsptree.

This module provides utility functions including:

- Logging setup and configuration
- Tree statistics reporting
"""

from bsptree.utils.logging import (
    TreeLogger,
    TreeStats,
    configure_logging,
)

__all__ = [
    "TreeLogger",
    "TreeStats",
    "configure_logging",
]
