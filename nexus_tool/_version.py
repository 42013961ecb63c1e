"""Version information for nexus-tool."""

__version__ = "0.3.0"
