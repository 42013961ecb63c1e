"""
Remote URI model.

Syntax: ``::/<REPO_ID>/<REMOTE_PATH>``

- REPO_ID runs up to the next slash and must not be empty
- REMOTE_PATH is absolute; a trailing slash marks a directory
- double slashes are rejected, they usually come from broken string interpolation
"""

from pydantic import field_validator

from ..exceptions import InvalidRemoteUriError
from .base import NexusBaseModel

REMOTE_URI_PREFIX = "::/"

# Repository ids carrying this prefix address a staging repository
STAGING_PREFIX = "@staging:"


class RemoteUri(NexusBaseModel):
    """
    Parsed remote location.

    Attributes:
        repo_id: Repository identifier (may carry the staging prefix)
        repo_path: Absolute path inside the repository, as typed by the user
    """

    repo_id: str
    repo_path: str

    @field_validator("repo_path")
    @classmethod
    def validate_repo_path(cls, v: str) -> str:
        """Ensure the remote path is absolute."""
        if not v.startswith("/"):
            raise ValueError(f"Remote path must always be absolute and therefore start with slash: '{v}'")
        return v

    @classmethod
    def parse(cls, text: str) -> "RemoteUri":
        """
        Parse a remote URI string.

        Args:
            text: URI such as ``::/releases/org/example/``

        Returns:
            RemoteUri instance

        Raises:
            InvalidRemoteUriError: If the text does not follow the URI syntax
        """
        if not text.startswith(REMOTE_URI_PREFIX):
            raise InvalidRemoteUriError(f"Nexus remote URI must start with '{REMOTE_URI_PREFIX}': {text}")
        if "//" in text[len(REMOTE_URI_PREFIX) :]:
            raise InvalidRemoteUriError(f"Double-slash is prohibited in remote URI: {text}")

        rest = text[len(REMOTE_URI_PREFIX) :]
        index = rest.find("/")
        if index < 0:
            raise InvalidRemoteUriError(f"Missing separator '/' in remote path specification: {text}")

        repo_id = rest[:index].strip()
        if not repo_id:
            raise InvalidRemoteUriError(f"Repository ID must be specified: {text}")

        return cls(repo_id=repo_id, repo_path=rest[index:])

    @property
    def is_directory(self) -> bool:
        """True when the path ends with the directory marker."""
        return self.repo_path.endswith("/")

    @property
    def is_staging(self) -> bool:
        """True when the repository id addresses a staging repository."""
        return self.repo_id.startswith(STAGING_PREFIX)

    def __str__(self) -> str:
        return f"{REMOTE_URI_PREFIX}{self.repo_id}{self.repo_path}"


def strip_staging_prefix(repo_id: str) -> str:
    """Return the bare repository id without the staging prefix."""
    if repo_id.startswith(STAGING_PREFIX):
        return repo_id[len(STAGING_PREFIX) :]
    return repo_id


__all__ = ["REMOTE_URI_PREFIX", "STAGING_PREFIX", "RemoteUri", "strip_staging_prefix"]
