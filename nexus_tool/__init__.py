"""
Nexus Tool - A Python client for Nexus repository content.

This package lists, downloads and uploads content of Nexus repositories,
walking remote directory trees concurrently.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .api import NexusClient
from .exceptions import InvalidRemoteUriError, LocalIOError, NexusError, RemoteError
from .models import DirectoryEntry, RemoteUri, TransferSummary
from .transfer import download_tree, upload_tree
from .traversal import CollectingSink, TreeTraversal
from .utils import setup_logging
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "NexusClient",
    "NexusError",
    "RemoteError",
    "LocalIOError",
    "InvalidRemoteUriError",
    "DirectoryEntry",
    "RemoteUri",
    "TransferSummary",
    "TreeTraversal",
    "CollectingSink",
    "download_tree",
    "upload_tree",
    "setup_logging",
    "cli_main",
    "cli_group",
]
