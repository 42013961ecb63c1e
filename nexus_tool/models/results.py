"""Result models for traversal and transfer operations."""

from typing import List, Optional

from pydantic import Field

from .base import NexusBaseModel


class TraversalFailure(NexusBaseModel):
    """
    A subtree that could not be listed.

    Attributes:
        path: Remote directory whose listing failed
        error: Error message
    """

    path: str
    error: str


class TraversalStats(NexusBaseModel):
    """
    Counters collected by one traversal.

    Attributes:
        directories: Number of directory chunks processed (the start directory included)
        files: Number of file entries emitted
        failures: Subtrees whose listing failed
    """

    directories: int = Field(default=0, ge=0)
    files: int = Field(default=0, ge=0)
    failures: List[TraversalFailure] = Field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        """Check if any subtree failed to list."""
        return len(self.failures) > 0


class TransferOutcome(NexusBaseModel):
    """
    Outcome of transferring a single file.

    Attributes:
        remote_path: Path inside the remote repository
        local_path: Path on the local filesystem
        error: Error message, None on success
    """

    remote_path: str
    local_path: str
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """Check if the transfer succeeded."""
        return self.error is None


class TransferSummary(NexusBaseModel):
    """
    Aggregated result of a bulk transfer.

    Failures are kept in the order they were observed; the first one is
    the representative error shown to the user.

    Attributes:
        transferred: Successful outcomes
        failures: Failed outcomes
        directories_created: Local directories ensured during a tree download
        traversal_failures: Remote subtrees that could not be listed
    """

    transferred: List[TransferOutcome] = Field(default_factory=list)
    failures: List[TransferOutcome] = Field(default_factory=list)
    directories_created: int = Field(default=0, ge=0)
    traversal_failures: List[TraversalFailure] = Field(default_factory=list)

    def add(self, outcome: TransferOutcome) -> None:
        """Record one outcome."""
        if outcome.succeeded:
            self.transferred.append(outcome)
        else:
            self.failures.append(outcome)

    @property
    def transferred_count(self) -> int:
        """Number of files transferred successfully."""
        return len(self.transferred)

    @property
    def failure_count(self) -> int:
        """Number of failed files plus unlisted subtrees."""
        return len(self.failures) + len(self.traversal_failures)

    @property
    def total_attempted(self) -> int:
        """Total number of file transfers attempted."""
        return len(self.transferred) + len(self.failures)

    @property
    def has_failures(self) -> bool:
        """Check if there were any failures."""
        return self.failure_count > 0

    @property
    def first_error(self) -> Optional[str]:
        """The first observed error, formatted with the path it applies to."""
        if self.failures:
            first = self.failures[0]
            return f"{first.remote_path}: {first.error}"
        if self.traversal_failures:
            failure = self.traversal_failures[0]
            return f"{failure.path}: {failure.error}"
        return None


__all__ = ["TraversalFailure", "TraversalStats", "TransferOutcome", "TransferSummary"]
