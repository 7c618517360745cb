"""
Loads and validates the INI configuration file.
"""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from magnet_fetch.core.config import FetchConfig
from magnet_fetch.exceptions import ConfigurationError

log = logging.getLogger(__name__)

SECTION: str = "magnet-fetch"


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "magnet-fetch"


def default_config_path() -> Path:
    return get_config_dir() / "config.ini"


class ConfigLoader:
    """Reads a :class:`FetchConfig` from an INI file.

    Args:
        config_file_path: Explicit file to read.  When ``None`` the
            per-user default is used, and a missing default file simply
            yields the built-in defaults.
    """

    def __init__(self, config_file_path: Path | None = None) -> None:
        self._explicit = config_file_path is not None
        self.config_file_path = config_file_path or default_config_path()
        self._parser = configparser.ConfigParser()

    def load_config(self, cli_options: dict[str, Any] | None = None) -> FetchConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        Args:
            cli_options: Options provided on the command line.  ``None``
                values are ignored.

        Raises:
            ConfigurationError: If an explicit file is missing, the file
            cannot be parsed, or validation fails.
        """
        settings: dict[str, Any] = {}
        if self.config_file_path.is_file():
            settings.update(self._read_file())
        elif self._explicit:
            raise ConfigurationError(
                f"Configuration file not found at '{self.config_file_path}'."
            )
        else:
            log.debug("No configuration file at %s, using defaults", self.config_file_path)

        if cli_options:
            settings.update({k: v for k, v in cli_options.items() if v is not None})

        try:
            return FetchConfig(**settings)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def _read_file(self) -> dict[str, str]:
        try:
            self._parser.read(self.config_file_path, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigurationError(f"Error parsing configuration file: {e}") from e

        section = (
            self._parser[SECTION]
            if self._parser.has_section(SECTION)
            else self._parser.defaults()
        )
        known = FetchConfig.get_ini_keys()
        unknown = sorted(set(section) - known)
        if unknown:
            log.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        log.debug("Loaded configuration from %s", self.config_file_path)
        return {key: section[key] for key in known if key in section}
