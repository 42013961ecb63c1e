"""
Sinks receiving the entries produced by a traversal.

A sink gets each directory before its contents, and the files of one
directory in name order. Nothing else about global order is guaranteed.
"""

from typing import Callable, List, Protocol

from ..models.entries import DirectoryEntry


class EntrySink(Protocol):
    """Receiver of traversal output."""

    def emit(self, entry: DirectoryEntry) -> None:
        """Accept one entry (file or directory)."""
        ...


class CollectingSink:
    """Sink that keeps every emitted entry in a list."""

    def __init__(self) -> None:
        self.entries: List[DirectoryEntry] = []

    def emit(self, entry: DirectoryEntry) -> None:
        self.entries.append(entry)

    @property
    def files(self) -> List[DirectoryEntry]:
        return [entry for entry in self.entries if entry.is_leaf]

    @property
    def directories(self) -> List[DirectoryEntry]:
        return [entry for entry in self.entries if entry.is_directory]


class CallbackSink:
    """Sink forwarding each entry to a plain callable, e.g. a line printer."""

    def __init__(self, callback: Callable[[DirectoryEntry], None]) -> None:
        self.callback = callback

    def emit(self, entry: DirectoryEntry) -> None:
        self.callback(entry)


__all__ = ["EntrySink", "CollectingSink", "CallbackSink"]
