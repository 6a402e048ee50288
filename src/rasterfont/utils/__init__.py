"""Utility functions for rasterfont.

This module provides utility functions including:

- Logging setup and configuration
- Extraction statistics and diagnostics
"""

from rasterfont.utils.logging import (
    ExtractionLogger,
    ExtractionStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "ExtractionLogger",
    "ExtractionStats",
    "configure_logging",
    "get_logger",
]
