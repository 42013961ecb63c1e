"""
Nexus API client modules.

This package provides the async client used by the traversal and
transfer engine to list, download and upload repository content.
"""

from .nexus_client import NexusClient, readonly_repo_path, readwrite_repo_path

__all__ = ["NexusClient", "readonly_repo_path", "readwrite_repo_path"]
