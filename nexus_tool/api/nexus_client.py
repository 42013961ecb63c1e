"""
Nexus API client for listing, downloading and uploading repository content.

The client implements RemoteRepositoryProtocol on top of one shared
httpx.AsyncClient, so a single instance can serve every concurrent task of
a traversal.

Endpoints:
    - GET  /service/local/repositories/<repo>/content<dir>/   one-level listing (JSON)
    - GET  /service/local/repositories/<repo>/content<file>   file download
    - PUT  /service/local/repositories/<repo>/content<file>   file upload
    - PUT  /service/local/staging/deployByRepositoryId/<repo><file>   upload to a staging repository
    - DELETE /service/local/repositories/<repo>/content<path>   remove a file or directory

API documentation:
    https://oss.sonatype.org/nexus-staging-plugin/default/docs/index.html
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

# Third-party imports
import httpx
from pydantic import ValidationError

# Local imports
from ..exceptions import LocalIOError, RemoteError
from ..models.entries import DirectoryEntry, DirectoryListingResponse
from ..models.uri import STAGING_PREFIX, strip_staging_prefix
from ..utils.config_manager import ConfigManager
from ..utils.constants import (
    APPLICATION_JSON,
    CONTENT_PATH_TEMPLATE,
    DEFAULT_TIMEOUT,
    DOWNLOAD_TIMEOUT,
    MAX_CHUNK_SIZE,
    MIN_CHUNK_SIZE,
    STAGING_DEPLOY_PATH_TEMPLATE,
)
from ..utils.session import create_async_session_with_retry

# Longest response body quoted in an error message
MAX_ERROR_BODY = 500

# Suffix of the temporary file a download streams into
PART_SUFFIX = ".part"


def readonly_repo_path(repo_id: str) -> str:
    """
    Path prefix for reading a repository.

    Staging repositories are readable through the regular content endpoint.
    """
    return CONTENT_PATH_TEMPLATE.format(repo_id=strip_staging_prefix(repo_id))


def readwrite_repo_path(repo_id: str) -> str:
    """Path prefix for writing to a repository."""
    if repo_id.startswith(STAGING_PREFIX):
        return STAGING_DEPLOY_PATH_TEMPLATE.format(repo_id=strip_staging_prefix(repo_id))
    return CONTENT_PATH_TEMPLATE.format(repo_id=repo_id)


def _as_directory(path: str) -> str:
    """Add the trailing separator the listing endpoint expects."""
    if not path.startswith("/"):
        path = "/" + path
    return path if path.endswith("/") else path + "/"


def _chunk_size(content_length: Optional[str]) -> int:
    """Use larger chunks for bigger files, within fixed bounds."""
    if not content_length or not content_length.isdigit():
        return MIN_CHUNK_SIZE
    return min(max(MIN_CHUNK_SIZE, int(content_length) // 100), MAX_CHUNK_SIZE)


class NexusClient:
    """
    Async client for Nexus repository content.

    Use as an async context manager so the connection pool is released:

        async with NexusClient.create_from_config_file() as client:
            entries = await client.fetch_directory("releases", "/org/")
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """Initialize the client.

        Args:
            config: Server settings with ``base_url`` and optional ``username``,
                ``password`` and ``timeout``
        """
        self.config = config
        self.base_url = str(config["base_url"]).rstrip("/")
        self.timeout = float(config.get("timeout", DEFAULT_TIMEOUT))
        self.session = create_async_session_with_retry(auth=self.auth, timeout=self.timeout)
        logging.debug(
            "NexusClient initialized for %s (%s)", self.base_url, "authenticated" if self.auth else "anonymous"
        )

    @classmethod
    def create_from_config_file(cls, path: Optional[str] = None) -> "NexusClient":
        """
        Create a client from the TOML configuration file.

        A missing default file yields an anonymous client for the server
        named by NEXUS_URL (or the public default).
        """
        manager = ConfigManager(path)
        manager.load_optional()
        return cls(manager.server_settings())

    @property
    def auth(self) -> Optional[httpx.Auth]:
        """Basic auth when credentials are configured, None for anonymous access."""
        username = self.config.get("username")
        password = self.config.get("password")
        if username and password is not None:
            return httpx.BasicAuth(str(username), str(password))
        return None

    def _url(self, prefix: str, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{prefix}{path}"

    async def aclose(self) -> None:
        """Close the session and release all connections."""
        if not self.session.is_closed:
            await self.session.aclose()
            logging.debug("NexusClient session closed and connections released")

    async def __aenter__(self) -> "NexusClient":
        return self

    async def __aexit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        await self.aclose()

    # ============================================================================
    # Response checking
    # ============================================================================

    @staticmethod
    def _error_message(response: httpx.Response, operation: str) -> str:
        reason = response.reason_phrase or ""
        content_type = response.headers.get("content-type", "")
        body = response.text
        if len(body) > MAX_ERROR_BODY:
            body = body[:MAX_ERROR_BODY] + "..."
        if content_type.startswith(APPLICATION_JSON):
            return f"Failed to {operation}: HTTP {response.status_code} {reason}: with this JSON info: {body}"
        return f"Failed to {operation}: HTTP {response.status_code} {reason}: {body}"

    def _check_response(self, response: httpx.Response, operation: str) -> None:
        """Raise RemoteError unless the response is a 2xx."""
        if response.is_success:
            return
        if response.status_code >= 500:
            logging.error("Server error during %s: %s %s", operation, response.status_code, response.url)
        else:
            logging.debug("Client error during %s: %s - %s", operation, response.status_code, response.text)
        raise RemoteError(
            self._error_message(response, operation), status_code=response.status_code, url=str(response.url)
        )

    # ============================================================================
    # RemoteRepositoryProtocol
    # ============================================================================

    async def fetch_directory(self, repo_id: str, path: str) -> List[DirectoryEntry]:
        """
        List the immediate entries of a remote directory.

        Args:
            repo_id: Repository identifier
            path: Absolute remote directory path

        Returns:
            Entries in server order

        Raises:
            RemoteError: On transport failure, non-2xx status or undecodable body
        """
        url = self._url(readonly_repo_path(repo_id), _as_directory(path))
        logging.debug("requesting: GET %s", url)
        try:
            response = await self.session.get(url, headers={"Accept": APPLICATION_JSON})
        except httpx.HTTPError as e:
            raise RemoteError(f"Failed to list {path}: {e}", url=url) from e

        self._check_response(response, f"list {path}")
        try:
            listing = DirectoryListingResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise RemoteError(f"Unexpected listing response for {path}: {e}", url=url) from e

        logging.debug("- received %d entries for %s", len(listing.data), path)
        return listing.data

    async def download_file(self, repo_id: str, local_path: Path, remote_path: str) -> str:
        """
        Download one remote file, streaming it to disk.

        The parent directory of ``local_path`` must already exist.

        Returns:
            URL the file was downloaded from

        Raises:
            LocalIOError: If the parent directory is missing or the file cannot be written
            RemoteError: On transport failure or non-2xx status
        """
        local_path = Path(local_path)
        parent = local_path.parent
        if not parent.is_dir():
            raise LocalIOError(f"Directory does not exist: {parent}", path=str(parent))

        url = self._url(readonly_repo_path(repo_id), remote_path)
        logging.debug("downloading(GET) from: %s", url)
        # Content lands in a sibling .part file, renamed only once complete
        part_path = local_path.with_name(local_path.name + PART_SUFFIX)
        try:
            async with self.session.stream(
                "GET", url, timeout=max(self.timeout, DOWNLOAD_TIMEOUT)
            ) as response:
                if not response.is_success:
                    await response.aread()
                self._check_response(response, f"download {remote_path}")
                chunk_size = _chunk_size(response.headers.get("content-length"))
                try:
                    with open(part_path, "wb") as f:
                        async for chunk in response.aiter_bytes(chunk_size=chunk_size):
                            f.write(chunk)
                    part_path.replace(local_path)
                except OSError as e:
                    raise LocalIOError(f"Cannot write {local_path}: {e}", path=str(local_path)) from e
        except httpx.HTTPError as e:
            part_path.unlink(missing_ok=True)
            raise RemoteError(f"Failed to download {remote_path}: {e}", url=url) from e
        except BaseException:
            part_path.unlink(missing_ok=True)
            raise

        return url

    async def delete_path(self, repo_id: str, remote_path: str) -> str:
        """
        Delete a remote file or directory with a DELETE request.

        Deleting a directory removes everything below it.

        Returns:
            URL that was deleted

        Raises:
            RemoteError: On transport failure or non-2xx status
        """
        url = self._url(readwrite_repo_path(repo_id), remote_path)
        logging.debug("deleting(DELETE): %s", url)
        try:
            response = await self.session.delete(url)
        except httpx.HTTPError as e:
            raise RemoteError(f"Failed to delete {remote_path}: {e}", url=url) from e

        self._check_response(response, f"delete {remote_path}")
        logging.warning("Removed %s from repository %s", remote_path, repo_id)
        return url

    async def upload_file(self, repo_id: str, local_path: Path, remote_path: str) -> str:
        """
        Upload one local file with a PUT request.

        Missing remote directories are created by the server.

        Returns:
            URL the file was uploaded to

        Raises:
            LocalIOError: If the local file cannot be read
            RemoteError: On transport failure or non-2xx status
        """
        local_path = Path(local_path)
        try:
            content = local_path.read_bytes()
        except OSError as e:
            raise LocalIOError(f"Cannot read {local_path}: {e}", path=str(local_path)) from e

        url = self._url(readwrite_repo_path(repo_id), remote_path)
        logging.debug("uploading(PUT) to: %s", url)
        try:
            response = await self.session.put(url, content=content, headers={"Content-Length": str(len(content))})
        except httpx.HTTPError as e:
            raise RemoteError(f"Failed to upload {remote_path}: {e}", url=url) from e

        self._check_response(response, f"upload {remote_path}")
        return url


__all__ = ["NexusClient", "readonly_repo_path", "readwrite_repo_path"]
