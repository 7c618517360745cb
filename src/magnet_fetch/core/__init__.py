"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from magnet_fetch.core.bootstrap_service import BootstrapService
from magnet_fetch.core.config import FetchConfig
from magnet_fetch.core.magnet_decoder import decode_magnet
from magnet_fetch.core.models import Magnet, SessionDescriptor
from magnet_fetch.core.protocols import DownloadEngine, ProgressCallback

__all__: list[str] = [
    "BootstrapService",
    "DownloadEngine",
    "FetchConfig",
    "Magnet",
    "ProgressCallback",
    "SessionDescriptor",
    "decode_magnet",
]
