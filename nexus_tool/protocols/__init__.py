"""
Protocols for type safety.

This package provides protocols that define interfaces for the
components the traversal engine depends on.
"""

from .remote_protocol import RemoteRepositoryProtocol

__all__ = ["RemoteRepositoryProtocol"]
