"""
Pydantic models for nexus-tool.

This package contains all Pydantic models used in the application:
- entries: Directory listing payloads from the Nexus API
- uri: Remote URI parsing
- base, results, context: Domain models
"""

from .base import NexusApiModel, NexusBaseModel
from .context import ListContext, OutputFormat, TransferContext
from .entries import DIRECTORY_SIZE, DirectoryEntry, DirectoryListingResponse
from .results import TransferOutcome, TransferSummary, TraversalFailure, TraversalStats
from .uri import RemoteUri, strip_staging_prefix

__all__ = [
    "NexusApiModel",
    "NexusBaseModel",
    "ListContext",
    "OutputFormat",
    "TransferContext",
    "DIRECTORY_SIZE",
    "DirectoryEntry",
    "DirectoryListingResponse",
    "TransferOutcome",
    "TransferSummary",
    "TraversalFailure",
    "TraversalStats",
    "RemoteUri",
    "strip_staging_prefix",
]
