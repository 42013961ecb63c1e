"""
Tests for nexus-tool Pydantic models.

Covers the directory listing payloads, remote URI parsing, and the
traversal and transfer result models.
"""

import json

import pytest
from pydantic import ValidationError

from nexus_tool.exceptions import InvalidRemoteUriError, NexusError
from nexus_tool.models import (
    DIRECTORY_SIZE,
    DirectoryEntry,
    DirectoryListingResponse,
    ListContext,
    RemoteUri,
    TransferContext,
    TransferOutcome,
    TransferSummary,
    TraversalFailure,
    TraversalStats,
    strip_staging_prefix,
)

LISTING_JSON = {
    "data": [
        {
            "resourceURI": "https://nexus.example.com/service/local/repositories/releases/content/org/example/",
            "relativePath": "/org/example/",
            "text": "example",
            "leaf": False,
            "lastModified": "2024-01-02 10:00:00.0 UTC",
            "sizeOnDisk": -1,
        },
        {
            "resourceURI": "https://nexus.example.com/service/local/repositories/releases/content/org/a.jar",
            "relativePath": "/org/a.jar",
            "text": "a.jar",
            "leaf": True,
            "lastModified": "2024-01-01 10:00:00.0 UTC",
            "sizeOnDisk": 1234,
        },
    ]
}


class TestDirectoryEntry:
    """Test DirectoryEntry model."""

    def test_parse_listing(self):
        """Test parsing a listing envelope with wire field names."""
        listing = DirectoryListingResponse.model_validate_json(json.dumps(LISTING_JSON))

        assert len(listing.data) == 2
        directory, file_entry = listing.data
        assert directory.name == "example"
        assert directory.relative_path == "/org/example"
        assert directory.is_directory
        assert not directory.is_leaf
        assert file_entry.name == "a.jar"
        assert file_entry.size == 1234
        assert file_entry.last_modified == "2024-01-01 10:00:00.0 UTC"
        assert file_entry.resource_uri.endswith("/org/a.jar")

    def test_extra_fields_ignored(self):
        """Test that unknown server fields do not break parsing."""
        entry = DirectoryEntry.model_validate(
            {"text": "a", "relativePath": "/a", "leaf": True, "sizeOnDisk": 1, "unknownField": "x"}
        )
        assert entry.name == "a"

    def test_missing_required_field(self):
        """Test that a missing leaf flag is rejected."""
        with pytest.raises(ValidationError):
            DirectoryEntry.model_validate({"text": "a", "relativePath": "/a"})

    def test_relative_path_made_absolute(self):
        """Test that relative paths get a leading slash."""
        entry = DirectoryEntry(name="a", relative_path="org/a", is_leaf=True)
        assert entry.relative_path == "/org/a"

    def test_root_path_kept(self):
        """Test that the repository root keeps its single slash."""
        entry = DirectoryEntry(name="", relative_path="/", is_leaf=False)
        assert entry.relative_path == "/"

    def test_size_or_none(self):
        """Test that directories and unknown sizes report None."""
        directory = DirectoryEntry(name="d", relative_path="/d/", is_leaf=False)
        unknown = DirectoryEntry(name="f", relative_path="/f", is_leaf=True)
        known = DirectoryEntry(name="g", relative_path="/g", is_leaf=True, size=0)

        assert directory.size == DIRECTORY_SIZE
        assert directory.size_or_none is None
        assert unknown.size_or_none is None
        assert known.size_or_none == 0

    def test_to_wire_restores_directory_marker(self):
        """Test serialization back to server field names."""
        directory = DirectoryEntry(name="d", relative_path="/org/d/", is_leaf=False)
        wire = directory.to_wire()

        assert wire["relativePath"] == "/org/d/"
        assert wire["text"] == "d"
        assert wire["leaf"] is False
        assert "resourceURI" not in wire

    def test_frozen(self):
        """Test that entries are immutable."""
        entry = DirectoryEntry(name="a", relative_path="/a", is_leaf=True)
        with pytest.raises(ValidationError):
            entry.name = "b"


class TestRemoteUri:
    """Test RemoteUri parsing."""

    def test_parse_directory(self):
        """Test parsing a directory URI."""
        uri = RemoteUri.parse("::/releases/org/example/")

        assert uri.repo_id == "releases"
        assert uri.repo_path == "/org/example/"
        assert uri.is_directory
        assert not uri.is_staging

    def test_parse_file(self):
        """Test parsing a file URI."""
        uri = RemoteUri.parse("::/releases/org/example/a.jar")

        assert uri.repo_path == "/org/example/a.jar"
        assert not uri.is_directory

    def test_parse_repository_root(self):
        """Test parsing the root of a repository."""
        uri = RemoteUri.parse("::/releases/")
        assert uri.repo_path == "/"
        assert uri.is_directory

    def test_parse_staging(self):
        """Test parsing a staging repository id."""
        uri = RemoteUri.parse("::/@staging:orgexample-1001/org/a.jar")

        assert uri.repo_id == "@staging:orgexample-1001"
        assert uri.is_staging
        assert strip_staging_prefix(uri.repo_id) == "orgexample-1001"

    def test_str_round_trip(self):
        """Test that str() gives back the parsed text."""
        text = "::/snapshots/org/example/1.0-SNAPSHOT/"
        assert str(RemoteUri.parse(text)) == text

    @pytest.mark.parametrize(
        "text",
        [
            "releases/org/",
            "::/releases//org/",
            "::/releases",
            "::/ /org/",
            "::/",
        ],
    )
    def test_parse_invalid(self, text):
        """Test that malformed URIs are rejected."""
        with pytest.raises(InvalidRemoteUriError):
            RemoteUri.parse(text)

    def test_invalid_uri_is_nexus_and_value_error(self):
        """Test the exception hierarchy of InvalidRemoteUriError."""
        with pytest.raises(NexusError):
            RemoteUri.parse("nope")
        with pytest.raises(ValueError):
            RemoteUri.parse("nope")

    def test_relative_path_rejected(self):
        """Test that direct construction requires an absolute path."""
        with pytest.raises(ValidationError):
            RemoteUri(repo_id="releases", repo_path="org/")


class TestResultModels:
    """Test traversal and transfer result models."""

    def test_traversal_stats_defaults(self):
        """Test empty traversal stats."""
        stats = TraversalStats()
        assert stats.directories == 0
        assert stats.files == 0
        assert not stats.has_failures

    def test_traversal_stats_with_failure(self):
        """Test traversal stats reporting a failed subtree."""
        stats = TraversalStats(failures=[TraversalFailure(path="/org/broken", error="HTTP 500")])
        assert stats.has_failures

    def test_transfer_outcome_succeeded(self):
        """Test outcome success flag."""
        assert TransferOutcome(remote_path="/a", local_path="a").succeeded
        assert not TransferOutcome(remote_path="/a", local_path="a", error="boom").succeeded

    def test_summary_counts(self):
        """Test counting of transferred and failed files."""
        summary = TransferSummary()
        summary.add(TransferOutcome(remote_path="/a", local_path="a"))
        summary.add(TransferOutcome(remote_path="/b", local_path="b", error="HTTP 503"))
        summary.add(TransferOutcome(remote_path="/c", local_path="c"))

        assert summary.transferred_count == 2
        assert summary.failure_count == 1
        assert summary.total_attempted == 3
        assert summary.has_failures
        assert summary.first_error == "/b: HTTP 503"

    def test_summary_first_error_is_first_observed(self):
        """Test that the first recorded failure is the representative one."""
        summary = TransferSummary()
        summary.add(TransferOutcome(remote_path="/x", local_path="x", error="first"))
        summary.add(TransferOutcome(remote_path="/y", local_path="y", error="second"))
        assert summary.first_error == "/x: first"

    def test_summary_traversal_failures(self):
        """Test that unlisted subtrees count as failures."""
        summary = TransferSummary(traversal_failures=[TraversalFailure(path="/org/broken", error="HTTP 500")])

        assert summary.failure_count == 1
        assert summary.has_failures
        assert summary.first_error == "/org/broken: HTTP 500"

    def test_summary_without_failures(self):
        """Test a clean summary."""
        summary = TransferSummary()
        assert not summary.has_failures
        assert summary.first_error is None


class TestContextModels:
    """Test command context models."""

    def test_list_context_defaults(self):
        """Test ListContext defaults."""
        ctx = ListContext(remote=RemoteUri.parse("::/releases/org/"))
        assert ctx.recursive is False
        assert ctx.output_format == "short"
        assert ctx.debug == 0

    def test_list_context_rejects_unknown_format(self):
        """Test ListContext format validation."""
        with pytest.raises(ValidationError):
            ListContext(remote=RemoteUri.parse("::/releases/org/"), output_format="xml")

    def test_transfer_context_max_workers_bounds(self):
        """Test TransferContext worker bounds."""
        remote = RemoteUri.parse("::/releases/org/")
        assert TransferContext(local_path="out", remote=remote).max_workers == 4
        with pytest.raises(ValidationError):
            TransferContext(local_path="out", remote=remote, max_workers=0)
        with pytest.raises(ValidationError):
            TransferContext(local_path="out", remote=remote, max_workers=101)

    def test_context_forbids_extra_fields(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            TransferContext(local_path="out", remote=RemoteUri.parse("::/r/"), unknown=1)
