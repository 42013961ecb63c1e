"""
Output formatting for directory entries.

Formats:
    short: ``name`` for files and ``name/`` for directories; recursive listings
           print the path relative to the start directory instead of the name
    long:  ``<last modified>\\t<size or />\\t<path without leading slash>``
    json:  wire representation of the entries, as one JSON array
"""

import json
from typing import Iterable, Optional

from ..models.entries import DirectoryEntry
from .constants import SIZE_COLUMN_WIDTH

DIRECTORY_MARKER = "/"


def relative_to(path: str, start_dir: str) -> str:
    """
    Return ``path`` relative to ``start_dir`` (both absolute remote paths).

    Example:
        >>> relative_to("/org/example/a.jar", "/org/")
        'example/a.jar'
    """
    prefix = start_dir.rstrip("/") + "/"
    if path.startswith(prefix):
        return path[len(prefix) :]
    return path.lstrip("/")


def format_short(entry: DirectoryEntry, start_dir: Optional[str] = None) -> str:
    """Format an entry for the short listing."""
    text = relative_to(entry.relative_path, start_dir) if start_dir is not None else entry.name
    if entry.is_directory:
        text += DIRECTORY_MARKER
    return text


def format_long(entry: DirectoryEntry) -> str:
    """Format an entry for the long listing."""
    size = DIRECTORY_MARKER if entry.size_or_none is None else str(entry.size)
    path = entry.relative_path[1:]
    if entry.is_directory:
        path += DIRECTORY_MARKER
    return f"{entry.last_modified}\t{size:>{SIZE_COLUMN_WIDTH}}\t{path}"


def format_entry(entry: DirectoryEntry, output_format: str, start_dir: Optional[str] = None) -> str:
    """
    Format one entry as a single output line.

    Args:
        entry: Entry to format
        output_format: "short" or "long"
        start_dir: Start directory of a recursive listing, None for a flat one

    Raises:
        ValueError: For an unknown or non line-based format
    """
    if output_format == "short":
        return format_short(entry, start_dir)
    if output_format == "long":
        return format_long(entry)
    raise ValueError(f"Unknown format: {output_format}")


def format_json(entries: Iterable[DirectoryEntry]) -> str:
    """Format entries as an indented JSON array using the server's field names."""
    return json.dumps([entry.to_wire() for entry in entries], indent=2)


__all__ = ["DIRECTORY_MARKER", "relative_to", "format_short", "format_long", "format_entry", "format_json"]
