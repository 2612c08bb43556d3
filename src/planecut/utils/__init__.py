"""Utility functions for planecut.

This module provides utility functions including:

- Logging setup and configuration
- Approximate float comparison under the active geometry tolerances
"""

from planecut.utils.fuzzy import approx_eq, approx_zero
from planecut.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "approx_eq",
    "approx_zero",
    "configure_logging",
]
