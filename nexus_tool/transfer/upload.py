"""
Upload operations for local files and directory trees.

Uploads are sequential. A failed file is recorded and the remaining files
are still uploaded.
"""

import logging
import traceback
from pathlib import Path
from typing import List

from ..exceptions import LocalIOError, NexusError
from ..models.results import TransferOutcome, TransferSummary
from ..protocols import RemoteRepositoryProtocol
from ..utils.logging_utils import format_count_with_unit, log_operation_complete, log_operation_start


def iter_local_files(root: Path) -> List[Path]:
    """
    Return every regular file below ``root`` in a stable order.

    Raises:
        LocalIOError: If ``root`` is not a directory
    """
    root = Path(root)
    if not root.is_dir():
        raise LocalIOError(f"Not a directory: {root}", path=str(root))
    return sorted(p for p in root.rglob("*") if p.is_file())


def remote_path_for(local_file: Path, local_root: Path, remote_root: str) -> str:
    """
    Map a local file below ``local_root`` to its remote path below ``remote_root``.

    Example:
        >>> remote_path_for(Path("/tmp/out/a/b.jar"), Path("/tmp/out"), "/org/")
        '/org/a/b.jar'
    """
    relative = Path(local_file).relative_to(local_root).as_posix()
    return remote_root.rstrip("/") + "/" + relative


async def _upload_one(
    remote: RemoteRepositoryProtocol, repo_id: str, local_file: Path, remote_path: str
) -> TransferOutcome:
    try:
        url = await remote.upload_file(repo_id, local_file, remote_path)
    except NexusError as e:
        logging.error("Failed to upload %s: %s", local_file, e)
        logging.debug("Traceback: %s", traceback.format_exc())
        return TransferOutcome(remote_path=remote_path, local_path=str(local_file), error=str(e))
    logging.info("Uploaded %s -> %s", local_file, url)
    return TransferOutcome(remote_path=remote_path, local_path=str(local_file))


async def upload_tree(
    remote: RemoteRepositoryProtocol, repo_id: str, local_root: Path, remote_root: str
) -> TransferSummary:
    """
    Upload every file below ``local_root`` to ``remote_root``.

    Args:
        remote: Remote repository capabilities
        repo_id: Target repository, possibly with the staging prefix
        local_root: Local directory to upload
        remote_root: Absolute remote directory path

    Returns:
        TransferSummary with one outcome per local file

    Raises:
        LocalIOError: If ``local_root`` is not a directory
    """
    local_root = Path(local_root)
    files = iter_local_files(local_root)
    log_operation_start(
        "tree upload", source=local_root, target=f"{repo_id}:{remote_root}", files=len(files)
    )

    summary = TransferSummary()
    for local_file in files:
        remote_path = remote_path_for(local_file, local_root, remote_root)
        summary.add(await _upload_one(remote, repo_id, local_file, remote_path))

    log_operation_complete(
        "tree upload", transferred=summary.transferred_count, failed=summary.failure_count
    )
    logging.debug("Upload of %s finished", format_count_with_unit(len(files), "file"))
    return summary


async def upload_single(
    remote: RemoteRepositoryProtocol, repo_id: str, local_file: Path, remote_path: str
) -> TransferSummary:
    """
    Upload one local file.

    A remote path ending in ``/`` names a directory; the file keeps its local name.
    """
    local_file = Path(local_file)
    if remote_path.endswith("/"):
        remote_path = remote_path + local_file.name

    summary = TransferSummary()
    summary.add(await _upload_one(remote, repo_id, local_file, remote_path))
    return summary


__all__ = ["iter_local_files", "remote_path_for", "upload_tree", "upload_single"]
