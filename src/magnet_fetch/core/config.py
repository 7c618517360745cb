"""Pydantic model for application configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


class FetchConfig(BaseModel):
    """A validated configuration model for magnet-fetch."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    strict_prefix: bool = False
    """Require ``xt`` values to start with ``urn:btih:``."""

    output_dir: Path = Path(".")
    """Directory that receives fetched torrent files."""

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise to an upper-case standard level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}.")
        return level

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns the set of keys accepted in the INI file."""
        return set(cls.model_fields)
