"""
Directory listing models.

The Nexus content listing API returns one directory level per request,
wrapped in a ``{"data": [...]}`` envelope. Each item becomes a
DirectoryEntry; the trailing ``/`` the server puts on directory paths is
stripped here so that directory-ness is carried by ``is_leaf`` alone.
"""

from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import NexusApiModel

# Size reported by the server for directories
DIRECTORY_SIZE = -1


class DirectoryEntry(NexusApiModel):
    """
    One child of a remote directory.

    Attributes:
        name: Leaf file or subdirectory name, unique within its parent
        relative_path: Absolute path from the repository root, without a trailing separator
        is_leaf: True for files, False for directories
        size: Byte length for files, DIRECTORY_SIZE for directories
        last_modified: Timestamp string as sent by the server
        resource_uri: Absolute URL of the entry, when the server provides it
    """

    name: str = Field(alias="text")
    relative_path: str = Field(alias="relativePath")
    is_leaf: bool = Field(alias="leaf")
    size: int = Field(default=DIRECTORY_SIZE, alias="sizeOnDisk")
    last_modified: str = Field(default="", alias="lastModified")
    resource_uri: Optional[str] = Field(default=None, alias="resourceURI")

    @field_validator("relative_path")
    @classmethod
    def normalize_relative_path(cls, v: str) -> str:
        """Make the path absolute and drop the directory marker."""
        if not v.startswith("/"):
            v = "/" + v
        if len(v) > 1:
            v = v.rstrip("/")
        return v

    @property
    def is_directory(self) -> bool:
        """True when the entry must be re-listed to discover children."""
        return not self.is_leaf

    @property
    def size_or_none(self) -> Optional[int]:
        """File size, or None when the size does not apply."""
        if self.is_leaf and self.size != DIRECTORY_SIZE:
            return self.size
        return None

    def to_wire(self) -> dict[str, Any]:
        """Serialize back to the server's field names (directories regain their trailing /)."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        if self.is_directory and not data["relativePath"].endswith("/"):
            data["relativePath"] += "/"
        return data


class DirectoryListingResponse(NexusApiModel):
    """Envelope returned by the content listing endpoint."""

    data: List[DirectoryEntry] = Field(default_factory=list)


__all__ = ["DIRECTORY_SIZE", "DirectoryEntry", "DirectoryListingResponse"]
