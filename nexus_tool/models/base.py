"""Base models for nexus-tool."""

from pydantic import BaseModel, ConfigDict


class NexusBaseModel(BaseModel):
    """Base model for all nexus-tool domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


class NexusApiModel(BaseModel):
    """Base model for Nexus REST API payloads."""

    model_config = ConfigDict(
        extra="ignore",  # The server sends fields we do not use
        populate_by_name=True,
        frozen=True,
    )


__all__ = ["NexusBaseModel", "NexusApiModel"]
