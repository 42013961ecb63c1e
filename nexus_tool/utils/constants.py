"""
Central constants for nexus-tool.

This module consolidates the constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Configuration
# ============================================================================

# Default configuration file location
DEFAULT_CONFIG_PATH = "~/.config/nexus/cli.toml"

# Environment variable naming the server when no config file is used
NEXUS_URL_ENV = "NEXUS_URL"

# Server used when neither config nor environment names one
DEFAULT_NEXUS_URL = "https://oss.sonatype.org"

# ============================================================================
# API and Network Constants
# ============================================================================

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 120

# Downloads of large artifacts get a longer timeout (seconds)
DOWNLOAD_TIMEOUT = 300

USER_AGENT = "nexus-tool"

APPLICATION_JSON = "application/json"

# Read-only content endpoint; {repo_id} has the staging prefix stripped
CONTENT_PATH_TEMPLATE = "/service/local/repositories/{repo_id}/content"

# Write endpoint for staging repositories
STAGING_DEPLOY_PATH_TEMPLATE = "/service/local/staging/deployByRepositoryId/{repo_id}"

# Streaming chunk size bounds (bytes)
MIN_CHUNK_SIZE = 8192
MAX_CHUNK_SIZE = 65536

# ============================================================================
# Concurrency
# ============================================================================

# Default number of concurrent workers for parallel downloads
DEFAULT_MAX_WORKERS = 4

# Capacity of the traversal result queue; 0 means unbounded
DEFAULT_QUEUE_SIZE = 1024

# ============================================================================
# Display
# ============================================================================

# Width of the size column in the long listing format
SIZE_COLUMN_WIDTH = 10

# Width for separator lines in console output
SEPARATOR_WIDTH = 80

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "NEXUS_URL_ENV",
    "DEFAULT_NEXUS_URL",
    "DEFAULT_TIMEOUT",
    "DOWNLOAD_TIMEOUT",
    "USER_AGENT",
    "APPLICATION_JSON",
    "CONTENT_PATH_TEMPLATE",
    "STAGING_DEPLOY_PATH_TEMPLATE",
    "MIN_CHUNK_SIZE",
    "MAX_CHUNK_SIZE",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_QUEUE_SIZE",
    "SIZE_COLUMN_WIDTH",
    "SEPARATOR_WIDTH",
]
