"""
Test fixtures and fakes for nexus-tool tests.

This module provides common fixtures, an in-memory remote repository
implementing RemoteRepositoryProtocol, and helpers for building
directory entries.
"""

import asyncio
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pytest
import respx

from nexus_tool.exceptions import LocalIOError, RemoteError
from nexus_tool.models.entries import DirectoryEntry

BASE_URL = "https://nexus.example.com"


def make_entry(path: str, leaf: bool = True, size: int = 10, last_modified: str = "2024-01-01 10:00:00.0 UTC") -> DirectoryEntry:
    """Build a DirectoryEntry for an absolute remote path."""
    name = path.rstrip("/").rsplit("/", 1)[-1]
    return DirectoryEntry(
        name=name,
        relative_path=path,
        is_leaf=leaf,
        size=size if leaf else -1,
        last_modified=last_modified,
    )


def _parts(path: str) -> List[str]:
    return [part for part in path.split("/") if part]


class FakeRemote:
    """
    In-memory remote repository.

    The tree is a nested dict: dict values are directories, bytes values are
    files. Children are listed in dict insertion order, so tests can feed
    entries in a non-sorted server order.
    """

    def __init__(
        self,
        tree: Dict[str, Any],
        *,
        failing_listings: Iterable[str] = (),
        failing_downloads: Iterable[str] = (),
        failing_uploads: Iterable[str] = (),
        listing_delays: Optional[Dict[str, float]] = None,
        download_delay: float = 0.0,
    ) -> None:
        self.tree = tree
        self.failing_listings = {p.rstrip("/") or "/" for p in failing_listings}
        self.failing_downloads = set(failing_downloads)
        self.failing_uploads = set(failing_uploads)
        self.listing_delays = {k.rstrip("/") or "/": v for k, v in (listing_delays or {}).items()}
        self.download_delay = download_delay
        self.listed: List[str] = []
        self.downloaded: List[str] = []
        self.uploaded: Dict[str, bytes] = {}
        self.upload_repos: List[str] = []
        self.downloads_in_flight = 0
        self.max_downloads_in_flight = 0
        self.closed = False

    async def __aenter__(self) -> "FakeRemote":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.closed = True

    def _node(self, path: str) -> Any:
        node: Any = self.tree
        for part in _parts(path):
            if not isinstance(node, dict) or part not in node:
                raise RemoteError(f"Not found: {path}", status_code=404)
            node = node[part]
        return node

    async def fetch_directory(self, repo_id: str, path: str) -> List[DirectoryEntry]:
        key = "/" + "/".join(_parts(path))
        self.listed.append(key)
        await asyncio.sleep(self.listing_delays.get(key, 0))
        if key in self.failing_listings:
            raise RemoteError(f"Failed to list {key}: HTTP 500", status_code=500)

        node = self._node(path)
        if not isinstance(node, dict):
            raise RemoteError(f"Not a directory: {path}", status_code=400)

        prefix = key.rstrip("/")
        entries = []
        for name, child in node.items():
            if isinstance(child, dict):
                entries.append(make_entry(f"{prefix}/{name}/", leaf=False))
            else:
                entries.append(make_entry(f"{prefix}/{name}", size=len(child)))
        return entries

    async def download_file(self, repo_id: str, local_path: Path, remote_path: str) -> str:
        self.downloads_in_flight += 1
        self.max_downloads_in_flight = max(self.max_downloads_in_flight, self.downloads_in_flight)
        try:
            await asyncio.sleep(self.download_delay)
            if remote_path in self.failing_downloads:
                raise RemoteError(f"Failed to download {remote_path}: HTTP 503", status_code=503)
            local_path = Path(local_path)
            if not local_path.parent.is_dir():
                raise LocalIOError(f"Directory does not exist: {local_path.parent}", path=str(local_path.parent))
            local_path.write_bytes(self._node(remote_path))
            self.downloaded.append(remote_path)
        finally:
            self.downloads_in_flight -= 1
        return f"{BASE_URL}/content/{repo_id}{remote_path}"

    async def upload_file(self, repo_id: str, local_path: Path, remote_path: str) -> str:
        if remote_path in self.failing_uploads:
            raise RemoteError(f"Failed to upload {remote_path}: HTTP 401", status_code=401)
        self.uploaded[remote_path] = Path(local_path).read_bytes()
        self.upload_repos.append(repo_id)
        return f"{BASE_URL}/content/{repo_id}{remote_path}"


@pytest.fixture
def sample_tree() -> Dict[str, Any]:
    """
    A small repository tree.

        /org/
            zeta.txt
            example/
                b.jar
                a.jar
                nested/
                    deep.pom
            alpha.txt
            empty/
    """
    return {
        "org": {
            "zeta.txt": b"zeta",
            "example": {
                "b.jar": b"bbb",
                "a.jar": b"aa",
                "nested": {"deep.pom": b"<project/>"},
            },
            "alpha.txt": b"alpha",
            "empty": {},
        }
    }


@pytest.fixture
def fake_remote(sample_tree) -> FakeRemote:
    """FakeRemote serving sample_tree."""
    return FakeRemote(sample_tree)


@pytest.fixture
def mock_config() -> Dict[str, Any]:
    """Server settings for NexusClient."""
    return {
        "base_url": BASE_URL,
        "username": "deployer",
        "password": "secret",
        "timeout": 30,
    }


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock:
        yield respx


@pytest.fixture
def temp_config_file(tmp_path) -> str:
    """A TOML config file pointing at the test server."""
    config_path = tmp_path / "cli.toml"
    config_path.write_text(
        f"""[cli]
base_url = "{BASE_URL}/"
username = "deployer"
password = "secret"
timeout = 30
"""
    )
    return str(config_path)


@pytest.fixture
def remote_factory():
    """Build FakeRemote instances with custom trees or failures."""
    return FakeRemote


@pytest.fixture
def entry_factory():
    """Build DirectoryEntry instances from remote paths."""
    return make_entry
