"""
Download operations mirroring remote content onto local storage.

A tree download walks the remote directory with TreeTraversal and a
MirrorSink: every directory is created locally when the traversal emits it,
which is before any of its children are fetched, and every file is
downloaded by its own task. Failures are recorded per file; one failing
download never cancels its siblings.
"""

import asyncio
import logging
import traceback
from pathlib import Path
from typing import List, Optional

from ..exceptions import LocalIOError, NexusError
from ..models.entries import DirectoryEntry
from ..models.results import TransferOutcome, TransferSummary
from ..protocols import RemoteRepositoryProtocol
from ..traversal import TreeTraversal
from ..utils.constants import DEFAULT_MAX_WORKERS, DEFAULT_QUEUE_SIZE
from ..utils.logging_utils import format_file_size, log_operation_complete, log_operation_start
from .mirror import ensure_local_directory, mirror_path


class MirrorSink:
    """
    Traversal sink that mirrors the remote tree into a local directory.

    Downloads start as soon as their file is emitted and are limited to
    ``max_workers`` at a time by a semaphore.
    """

    def __init__(
        self,
        remote: RemoteRepositoryProtocol,
        repo_id: str,
        start_dir: str,
        local_root: Path,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self.remote = remote
        self.repo_id = repo_id
        self.start_dir = start_dir
        self.local_root = Path(local_root)
        self.directories_created = 0
        self.directory_failures: List[TransferOutcome] = []
        self._semaphore = asyncio.Semaphore(max_workers)
        self._downloads: List[asyncio.Task] = []

    def emit(self, entry: DirectoryEntry) -> None:
        if entry.is_directory:
            self._create_directory(entry)
        else:
            task = asyncio.create_task(self._download(entry), name=f"download {entry.relative_path}")
            self._downloads.append(task)

    def _create_directory(self, entry: DirectoryEntry) -> None:
        try:
            local_dir = mirror_path(self.local_root, self.start_dir, entry.relative_path)
            ensure_local_directory(local_dir)
            self.directories_created += 1
        except LocalIOError as e:
            logging.error("Failed to create local directory for %s: %s", entry.relative_path, e)
            self.directory_failures.append(
                TransferOutcome(remote_path=entry.relative_path, local_path=e.path or "", error=str(e))
            )

    async def _download(self, entry: DirectoryEntry) -> TransferOutcome:
        try:
            local_path = mirror_path(self.local_root, self.start_dir, entry.relative_path)
        except LocalIOError as e:
            logging.error("Failed to download %s: %s", entry.relative_path, e)
            return TransferOutcome(remote_path=entry.relative_path, local_path="", error=str(e))

        async with self._semaphore:
            try:
                await self.remote.download_file(self.repo_id, local_path, entry.relative_path)
            except NexusError as e:
                logging.error("Failed to download %s: %s", entry.relative_path, e)
                logging.debug("Traceback: %s", traceback.format_exc())
                return TransferOutcome(remote_path=entry.relative_path, local_path=str(local_path), error=str(e))

        size = entry.size_or_none
        logging.info(
            "Downloaded %s -> %s (%s)",
            entry.relative_path,
            local_path,
            "size unknown" if size is None else format_file_size(size),
        )
        return TransferOutcome(remote_path=entry.relative_path, local_path=str(local_path))

    @property
    def download_count(self) -> int:
        """Number of downloads started so far."""
        return len(self._downloads)

    async def wait(self) -> List[TransferOutcome]:
        """
        Wait for every started download and return one outcome per file.

        Unexpected exceptions are turned into failed outcomes rather than
        aborting the join, so no result is lost.
        """
        results = await asyncio.gather(*self._downloads, return_exceptions=True)
        outcomes: List[TransferOutcome] = []
        for task, result in zip(self._downloads, results):
            if isinstance(result, BaseException):
                remote_path = task.get_name().removeprefix("download ")
                logging.error("Unexpected error downloading %s: %s", remote_path, result)
                outcomes.append(
                    TransferOutcome(remote_path=remote_path, local_path="", error=str(result) or type(result).__name__)
                )
            else:
                outcomes.append(result)
        return outcomes

    async def abort(self) -> None:
        """Cancel downloads that have not finished and wait for them to unwind."""
        for task in self._downloads:
            if not task.done():
                task.cancel()
        await asyncio.gather(*self._downloads, return_exceptions=True)


async def download_tree(
    remote: RemoteRepositoryProtocol,
    repo_id: str,
    start_dir: str,
    local_root: Path,
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
    queue_size: int = DEFAULT_QUEUE_SIZE,
) -> TransferSummary:
    """
    Download a whole remote directory tree into ``local_root``.

    Args:
        remote: Remote repository capabilities
        repo_id: Repository to download from
        start_dir: Absolute remote directory path
        local_root: Local directory receiving the mirror; created when missing
        max_workers: Maximum number of concurrent downloads
        queue_size: Capacity of the traversal queue

    Returns:
        TransferSummary with one outcome per file and any unlisted subtrees

    Raises:
        RemoteError: If ``start_dir`` itself cannot be listed
        LocalIOError: If ``local_root`` cannot be created
    """
    local_root = ensure_local_directory(Path(local_root))
    log_operation_start("tree download", source=f"{repo_id}:{start_dir}", target=local_root, workers=max_workers)

    sink = MirrorSink(remote, repo_id, start_dir, local_root, max_workers=max_workers)
    traversal = TreeTraversal(remote, repo_id, queue_size=queue_size)
    try:
        stats = await traversal.walk(start_dir, sink)
    except BaseException:
        await sink.abort()
        raise

    logging.debug("Traversal found %d files, waiting for %d downloads", stats.files, sink.download_count)
    outcomes = await sink.wait()

    summary = TransferSummary(directories_created=sink.directories_created, traversal_failures=stats.failures)
    for outcome in sink.directory_failures:
        summary.add(outcome)
    for outcome in outcomes:
        summary.add(outcome)

    log_operation_complete(
        "tree download", transferred=summary.transferred_count, failed=summary.failure_count
    )
    return summary


async def download_single(
    remote: RemoteRepositoryProtocol, repo_id: str, remote_path: str, local_path: Path
) -> TransferSummary:
    """
    Download one remote file.

    When ``local_path`` is an existing directory the file keeps its remote name.
    """
    local_path = Path(local_path)
    if local_path.is_dir():
        local_path = local_path / remote_path.rstrip("/").rsplit("/", 1)[-1]

    summary = TransferSummary()
    outcome: Optional[TransferOutcome] = None
    try:
        url = await remote.download_file(repo_id, local_path, remote_path)
        logging.info("File %s downloaded from %s", local_path, url)
        outcome = TransferOutcome(remote_path=remote_path, local_path=str(local_path))
    except NexusError as e:
        logging.error("Failed to download %s: %s", remote_path, e)
        outcome = TransferOutcome(remote_path=remote_path, local_path=str(local_path), error=str(e))
    summary.add(outcome)
    return summary


__all__ = ["MirrorSink", "download_tree", "download_single"]
