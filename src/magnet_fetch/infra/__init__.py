"""Infrastructure layer — external system integration.

This layer holds the download engine adapter and configuration file
access.  Every raw exception must be caught here and re-raised as a
:class:`~magnet_fetch.exceptions.MagnetFetchError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from magnet_fetch.infra.config_loader import ConfigLoader, default_config_path
from magnet_fetch.infra.placeholder_engine import EngineSession, PlaceholderEngine

__all__: list[str] = [
    "ConfigLoader",
    "EngineSession",
    "PlaceholderEngine",
    "default_config_path",
]
