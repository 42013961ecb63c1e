"""
Reporting for transfer operations.

The final summary line is logged at WARNING so it stays visible without
``--debug``; individual failures are logged at ERROR.
"""

import logging

from ..models.results import TransferSummary
from ..utils.logging_utils import format_count_with_unit, log_summary_separator


def _log_failures(summary: TransferSummary) -> None:
    for outcome in summary.failures:
        logging.error("  %s: %s", outcome.remote_path, outcome.error)
    for failure in summary.traversal_failures:
        logging.error("  %s (listing): %s", failure.path, failure.error)


def generate_transfer_report(summary: TransferSummary, operation: str) -> None:
    """
    Log the result of a bulk transfer.

    Args:
        summary: Aggregated transfer result
        operation: Name of the operation, e.g. "download" or "upload"
    """
    transferred = format_count_with_unit(summary.transferred_count, "file")
    if summary.has_failures:
        log_summary_separator(f"{operation.capitalize()} failures", level=logging.ERROR)
        _log_failures(summary)
        logging.warning(
            "%s complete: %s transferred, %s failed",
            operation.capitalize(),
            transferred,
            format_count_with_unit(summary.failure_count, "item"),
        )
    else:
        logging.warning("%s complete: %s transferred", operation.capitalize(), transferred)

    if summary.directories_created:
        logging.info(
            "%s created locally",
            format_count_with_unit(summary.directories_created, "directories", singular="directory"),
        )


__all__ = ["generate_transfer_report"]
