"""
Logging configuration for nexus-tool.

Listing output goes to stdout, so every log record is sent to stderr; this
keeps ``nexus-tool ls ... | sort`` usable at any verbosity.
"""

import logging
import sys
import textwrap
from typing import Optional

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Third-party loggers that log every request at INFO
HTTP_LOGGERS = ("httpx", "httpcore")


class WrappingFormatter(logging.Formatter):
    """
    Formatter that wraps long log lines at a fixed width.

    Continuation lines are indented so wrapped records stay visually grouped.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted
        return "\n".join(
            textwrap.wrap(formatted, width=self.width, subsequent_indent="    ", break_on_hyphens=False)
        )


def verbosity_to_level(verbosity: int) -> int:
    """
    Map the ``-d`` count to a logging level.

    0 is WARNING, 1 is INFO, 2 and above is DEBUG.
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Configure root logging with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
        use_wrapping: If True, use WrappingFormatter for long messages

    Example:
        >>> from nexus_tool.utils.logger import setup_logging
        >>> setup_logging(1)  # INFO level
        >>> setup_logging(3)  # DEBUG level with HTTP logs
    """
    level = verbosity_to_level(verbosity)

    if use_wrapping:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT, width=DEFAULT_LOG_WIDTH))
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    # httpx logs each request at INFO; only show it at -ddd
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


__all__ = ["WrappingFormatter", "setup_logging", "verbosity_to_level"]
