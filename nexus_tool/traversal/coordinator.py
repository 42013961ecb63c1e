"""
Concurrent remote-tree traversal.

The remote API lists one directory level per request, so the shape of the
tree is only discovered while walking it. TreeTraversal expands every
subdirectory in its own asyncio task and funnels the results back through a
single queue, consumed by one coordinator loop:

    pending = 1 (the start directory)
    loop:
        chunk = await queue.get()
        emit chunk.container, then the chunk's files in name order
        spawn one expansion task per subdirectory, pending += 1 each
        pending -= 1
        stop when pending == 0

Every spawned task puts exactly one chunk on the queue, even when its
listing fails (the chunk then carries the error and no entries). Only the
coordinator touches ``pending``, so it needs no lock, and ``pending == 0``
means no producer is left.

Limitations:
    There is no cancellation token; once spawned, listing tasks run to
    completion unless the coordinator itself fails.
"""

import asyncio
import logging
import traceback
from typing import List, Optional, Set

from pydantic import Field

from ..exceptions import NexusError
from ..models.base import NexusBaseModel
from ..models.entries import DirectoryEntry
from ..models.results import TraversalFailure, TraversalStats
from ..protocols import RemoteRepositoryProtocol
from ..utils.constants import DEFAULT_QUEUE_SIZE
from .ordering import ordered_partition
from .sink import EntrySink


class TraversalChunk(NexusBaseModel):
    """
    One message on the traversal queue.

    Attributes:
        container: Directory that was expanded, None for the start directory
        entries: Its immediate children, as fetched
        error: Listing error; set only when entries could not be fetched
    """

    container: Optional[DirectoryEntry] = None
    entries: List[DirectoryEntry] = Field(default_factory=list)
    error: Optional[str] = None


class TreeTraversal:
    """
    Walks a remote directory tree and feeds a sink.

    Example:
        >>> traversal = TreeTraversal(client, "releases")
        >>> sink = CollectingSink()
        >>> stats = await traversal.walk("/org/example/", sink)
    """

    def __init__(
        self, remote: RemoteRepositoryProtocol, repo_id: str, *, queue_size: int = DEFAULT_QUEUE_SIZE
    ) -> None:
        """
        Args:
            remote: Provider of the one-level listing capability
            repo_id: Repository to walk
            queue_size: Capacity of the result queue; 0 for unbounded
        """
        if queue_size < 0:
            raise ValueError(f"queue_size must be >= 0, got {queue_size}")
        self.remote = remote
        self.repo_id = repo_id
        self.queue_size = queue_size

    async def walk(self, start_dir: str, sink: EntrySink, *, recursive: bool = True) -> TraversalStats:
        """
        Traverse the tree rooted at ``start_dir``.

        Args:
            start_dir: Absolute remote directory path
            sink: Receiver of directories and files
            recursive: Descend into subdirectories

        Returns:
            TraversalStats with counters and the subtrees that failed to list

        Raises:
            RemoteError: If the start directory itself cannot be listed
        """
        if recursive:
            return await self._walk_tree(start_dir, sink)
        return await self._walk_flat(start_dir, sink)

    async def _walk_flat(self, start_dir: str, sink: EntrySink) -> TraversalStats:
        """Single listing: subdirectories first, then files."""
        entries = await self.remote.fetch_directory(self.repo_id, start_dir)
        files, subdirs = ordered_partition(entries)
        for entry in subdirs:
            sink.emit(entry)
        for entry in files:
            sink.emit(entry)
        return TraversalStats(directories=1, files=len(files))

    async def _walk_tree(self, start_dir: str, sink: EntrySink) -> TraversalStats:
        queue: asyncio.Queue[TraversalChunk] = asyncio.Queue(maxsize=self.queue_size)
        tasks: Set[asyncio.Task] = set()
        stats = TraversalStats()

        root_entries = await self.remote.fetch_directory(self.repo_id, start_dir)
        await queue.put(TraversalChunk(entries=root_entries))
        pending = 1

        try:
            while pending > 0:
                chunk = await queue.get()
                subdirs = self._process_chunk(chunk, sink, stats)
                for subdir in subdirs:
                    self._spawn(subdir, queue, tasks)
                pending += len(subdirs)
                pending -= 1
                logging.debug("Processed %d chunk(s), %d pending", stats.directories, pending)
        finally:
            # After a normal exit every task has already put its chunk
            for task in tasks:
                if not task.done():
                    task.cancel()
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)

        logging.info(
            "Traversal of %s complete: %d directories, %d files, %d failed",
            start_dir,
            stats.directories,
            stats.files,
            len(stats.failures),
        )
        return stats

    def _process_chunk(self, chunk: TraversalChunk, sink: EntrySink, stats: TraversalStats) -> List[DirectoryEntry]:
        """Emit the chunk's container and files; return the subdirectories to expand."""
        if chunk.container is not None:
            sink.emit(chunk.container)
            if chunk.error is not None:
                stats.failures.append(TraversalFailure(path=chunk.container.relative_path, error=chunk.error))

        files, subdirs = ordered_partition(chunk.entries)
        for entry in files:
            sink.emit(entry)

        stats.directories += 1
        stats.files += len(files)
        return subdirs

    def _spawn(self, subdir: DirectoryEntry, queue: asyncio.Queue, tasks: Set[asyncio.Task]) -> None:
        task = asyncio.create_task(self._expand(subdir, queue), name=f"expand {subdir.relative_path}")
        tasks.add(task)
        task.add_done_callback(tasks.discard)

    async def _expand(self, subdir: DirectoryEntry, queue: asyncio.Queue) -> None:
        """Fetch one subdirectory and report it; always puts exactly one chunk."""
        try:
            entries = await self.remote.fetch_directory(self.repo_id, subdir.relative_path)
        except NexusError as e:
            logging.warning("Cannot list %s: %s", subdir.relative_path, e)
            chunk = TraversalChunk(container=subdir, error=str(e))
        except Exception as e:
            logging.error("Unexpected error listing %s: %s", subdir.relative_path, e)
            logging.debug("Traceback: %s", traceback.format_exc())
            chunk = TraversalChunk(container=subdir, error=str(e) or type(e).__name__)
        else:
            chunk = TraversalChunk(container=subdir, entries=entries)
        await queue.put(chunk)


__all__ = ["TraversalChunk", "TreeTraversal"]
