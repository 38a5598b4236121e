"""
Shared utilities for structured logging.

This module provides reusable utilities that can be used across the codebase
to ensure consistent log output.
"""

from src.core.utils.logging import configure_logging, log_operation

__all__ = [
    "configure_logging",
    "log_operation",
]
