"""
Error handling utilities for standardized error logging and handling.

This module provides reusable error handling patterns used by the
command implementations.
"""

import logging
import traceback

from ..exceptions import LocalIOError, NexusError, RemoteError


def handle_remote_error(error: RemoteError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle remote errors with standardized logging.

    Args:
        error: The remote error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    status = error.status_code

    if status == 401:
        logging.error(
            "Authentication failed during %s: Invalid credentials. "
            "Please check username and password in the configuration file.",
            operation,
        )
    elif status == 403:
        logging.error(
            "Authentication failed during %s: You don't have permission to access this resource.",
            operation,
        )
    elif status == 404:
        logging.error("Resource not found during %s: %s", operation, error)
    elif status is not None and status >= 500:
        logging.error("Server error during %s: %s", operation, error)
    else:
        logging.error("Remote error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_local_error(error: LocalIOError, operation: str) -> None:
    """
    Handle local filesystem errors with standardized logging.

    Args:
        error: The local I/O error to handle
        operation: Description of the operation that failed
    """
    logging.error("Local I/O error during %s: %s", operation, error)
    logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def handle_error(error: Exception, operation: str) -> None:
    """Dispatch to the handler matching the error type."""
    if isinstance(error, RemoteError):
        handle_remote_error(error, operation)
    elif isinstance(error, LocalIOError):
        handle_local_error(error, operation)
    elif isinstance(error, NexusError):
        logging.error("Error during %s: %s", operation, error)
    else:
        handle_generic_error(error, operation)


__all__ = [
    "handle_remote_error",
    "handle_local_error",
    "handle_generic_error",
    "handle_error",
]
