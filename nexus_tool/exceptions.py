"""
Exception types for nexus-tool.

Remote failures (listing, download, upload) raise RemoteError. Local
filesystem failures during transfers raise LocalIOError. Both derive from
NexusError so command handlers can catch the whole family at once.
"""

from typing import Optional


class NexusError(Exception):
    """Base class for all nexus-tool errors."""


class RemoteError(NexusError):
    """A request to the remote repository failed or returned an unusable body."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class LocalIOError(NexusError):
    """Creating a local directory or writing a local file failed."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidRemoteUriError(NexusError, ValueError):
    """A remote URI did not follow the ``::/<REPO_ID>/<PATH>`` syntax."""


__all__ = ["NexusError", "RemoteError", "LocalIOError", "InvalidRemoteUriError"]
