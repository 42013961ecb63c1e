"""
Entry partition and ordering.

Names are unique within one directory, so sorting by name alone gives a
total order; no secondary key is needed.
"""

from typing import Iterable, List, Tuple

from ..models.entries import DirectoryEntry


def by_name(entry: DirectoryEntry) -> str:
    """Sort key: plain codepoint comparison of the entry name."""
    return entry.name


def order(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    """Return entries sorted by name."""
    return sorted(entries, key=by_name)


def partition(entries: Iterable[DirectoryEntry]) -> Tuple[List[DirectoryEntry], List[DirectoryEntry]]:
    """
    Split entries into files and subdirectories in a single pass.

    Relative order is preserved, so partitioning ordered entries yields two
    ordered lists.

    Returns:
        Tuple of (files, subdirectories)
    """
    files: List[DirectoryEntry] = []
    subdirs: List[DirectoryEntry] = []
    for entry in entries:
        if entry.is_leaf:
            files.append(entry)
        else:
            subdirs.append(entry)
    return files, subdirs


def ordered_partition(entries: Iterable[DirectoryEntry]) -> Tuple[List[DirectoryEntry], List[DirectoryEntry]]:
    """Order then partition; both returned lists are sorted by name."""
    return partition(order(entries))


__all__ = ["by_name", "order", "partition", "ordered_partition"]
