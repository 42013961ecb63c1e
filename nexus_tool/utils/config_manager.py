"""
Configuration file handling for nexus-tool.

This module loads the TOML configuration file and resolves the server
settings the HTTP client needs.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_CONFIG_PATH, DEFAULT_NEXUS_URL, NEXUS_URL_ENV

# Section holding the server settings
CLI_SECTION = "cli"


class ConfigManager:
    """
    Reads the TOML configuration file and answers lookups into it.

    The file is read lazily on first access and cached for the lifetime of
    the manager.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.explicit = config_path is not None
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def load_optional(self) -> Dict[str, Any]:
        """
        Load the configuration, tolerating a missing default file.

        An explicitly requested file must exist; the default location is
        optional and yields an empty configuration when absent.
        """
        if not self.explicit and not self.config_path.exists():
            logging.debug("No configuration file at %s, using defaults", self.config_path)
            self._config = {}
            return self._config
        return self.load()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "cli.base_url").

        Example:
            >>> config = ConfigManager("~/.config/nexus/cli.toml")
            >>> config.get("cli.base_url")
            'https://nexus.example.com'
        """
        if self._config is None:
            self.load()

        value: Any = self._config
        for k in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
            if value is None:
                return default
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Return one top-level table of the configuration.

        Returns:
            Copy of the section, empty when the section is absent
        """
        if self._config is None:
            self.load()
        return dict((self._config or {}).get(section, {}))

    def server_settings(self) -> Dict[str, Any]:
        """
        Resolve the settings used to build the HTTP client.

        The base URL comes from the ``cli`` section, then the NEXUS_URL
        environment variable, then the public default server.

        Returns:
            Dictionary with base_url and, when configured, username, password and timeout
        """
        settings = self.get_section(CLI_SECTION)
        base_url = settings.get("base_url") or os.environ.get(NEXUS_URL_ENV) or DEFAULT_NEXUS_URL
        settings["base_url"] = str(base_url).rstrip("/")
        logging.debug("Nexus server: %s", settings["base_url"])
        return settings


__all__ = ["ConfigManager", "CLI_SECTION"]
