"""
Remote repository protocol for type safety.

The traversal and transfer engine only needs these three capabilities; the
HTTP client implements them, and tests substitute in-memory fakes.
"""

from pathlib import Path
from typing import List, Protocol

from ..models.entries import DirectoryEntry


class RemoteRepositoryProtocol(Protocol):
    """
    Protocol defining the remote repository capabilities used by the core.

    All methods are safe to call concurrently.
    """

    async def fetch_directory(self, repo_id: str, path: str) -> List[DirectoryEntry]:
        """
        List the immediate entries of one remote directory.

        Args:
            repo_id: Repository identifier
            path: Absolute remote directory path

        Returns:
            Entries of the directory, in server order

        Raises:
            RemoteError: If the listing cannot be obtained or decoded
        """
        ...

    async def download_file(self, repo_id: str, local_path: Path, remote_path: str) -> str:
        """
        Download one remote file to a local path.

        Returns:
            URL the file was downloaded from
        """
        ...

    async def upload_file(self, repo_id: str, local_path: Path, remote_path: str) -> str:
        """
        Upload one local file to a remote path.

        Returns:
            URL the file was uploaded to
        """
        ...


__all__ = ["RemoteRepositoryProtocol"]
