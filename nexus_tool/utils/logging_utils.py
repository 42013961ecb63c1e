"""
Logging utilities for consistent operation logging.

This module provides small formatting helpers shared by the commands and
the transfer reports.
"""

import logging
from typing import Optional

from .constants import SEPARATOR_WIDTH

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def _format_details(details: dict) -> str:
    return ", ".join(f"{k}={v}" for k, v in details.items())


def log_operation_start(operation: str, **details) -> None:
    """
    Log the start of an operation with standardized format.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        logging.info("Starting %s (%s)", operation, _format_details(details))
    else:
        logging.info("Starting %s", operation)


def log_operation_complete(operation: str, **details) -> None:
    """
    Log the completion of an operation with standardized format.

    Args:
        operation: Description of the operation
        **details: Additional details to log as key=value pairs
    """
    if details:
        logging.info("Completed %s (%s)", operation, _format_details(details))
    else:
        logging.info("Completed %s", operation)


def format_count_with_unit(count: int, unit: str, *, singular: Optional[str] = None) -> str:
    """
    Format a count with proper pluralization.

    Examples:
        >>> format_count_with_unit(1, "file")
        '1 file'
        >>> format_count_with_unit(5, "file")
        '5 files'
        >>> format_count_with_unit(1, "directories", singular="directory")
        '1 directory'
    """
    if count == 1:
        return f"{count} {singular or unit}"
    plural = unit if unit.endswith("s") else f"{unit}s"
    return f"{count} {plural}"


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count with a binary unit.

    Examples:
        >>> format_file_size(0)
        '0 B'
        >>> format_file_size(1536)
        '1.5 KB'
    """
    if size_bytes == 0:
        return "0 B"

    value = float(size_bytes)
    for unit in SIZE_UNITS[:-1]:
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024.0
    return f"{value:.1f} {SIZE_UNITS[-1]}"


def log_summary_separator(title: Optional[str] = None, width: int = SEPARATOR_WIDTH, level: int = logging.INFO) -> None:
    """
    Log a visual separator line with optional title.

    Args:
        title: Optional title to display in separator
        width: Width of separator line
        level: Logging level to use
    """
    logging.log(level, "=" * width)
    if title:
        logging.log(level, title)
        logging.log(level, "=" * width)


__all__ = [
    "log_operation_start",
    "log_operation_complete",
    "format_count_with_unit",
    "format_file_size",
    "log_summary_separator",
]
