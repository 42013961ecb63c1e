"""Context models for nexus-tool commands."""

from typing import Literal, Optional

from pydantic import Field

from .base import NexusBaseModel
from .uri import RemoteUri

OutputFormat = Literal["short", "long", "json"]


class ListContext(NexusBaseModel):
    """
    Context information for listing operations.

    Attributes:
        remote: Remote directory to list
        recursive: Whether to descend into subdirectories
        output_format: Output format (short, long, json)
        config: Optional path to config file
        debug: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
    """

    remote: RemoteUri
    recursive: bool = False
    output_format: OutputFormat = "short"
    config: Optional[str] = None
    debug: int = 0


class TransferContext(NexusBaseModel):
    """
    Context information for download and upload operations.

    Attributes:
        local_path: Local file or directory
        remote: Remote file or directory
        config: Optional path to config file
        debug: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
        max_workers: Maximum number of concurrent downloads
    """

    local_path: str
    remote: RemoteUri
    config: Optional[str] = None
    debug: int = 0
    max_workers: int = Field(default=4, ge=1, le=100)


__all__ = ["OutputFormat", "ListContext", "TransferContext"]
