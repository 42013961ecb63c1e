"""
Utility modules for nexus-tool.
"""

from .logger import setup_logging, WrappingFormatter
from .session import create_async_session_with_retry
from .config_manager import ConfigManager
from .formatting import format_entry, format_json

from . import error_handling
from . import logging_utils
from . import constants
from . import formatting

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "create_async_session_with_retry",
    "ConfigManager",
    "format_entry",
    "format_json",
    "error_handling",
    "logging_utils",
    "constants",
    "formatting",
]
