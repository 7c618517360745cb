"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, BinaryIO, Protocol

from magnet_fetch.core.models import SessionDescriptor

ProgressCallback = Callable[[dict[str, Any]], None]
"""Receives progress dicts with a ``"status"`` key (``"downloading"`` or
``"finished"``) plus ``downloaded_bytes``, ``total_bytes`` and
``filename`` while downloading."""


class DownloadEngine(Protocol):
    """Contract for torrent download engines.

    An engine performs peer discovery, the wire protocol and content
    assembly for a single content identifier.  Any object implementing
    :meth:`start` with the correct signature satisfies this protocol
    structurally (no explicit inheritance required).
    """

    def start(
        self,
        descriptor: SessionDescriptor,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> BinaryIO:
        """Open a session for *descriptor* and return the fetched document.

        Parameters
        ----------
        descriptor:
            The content identifier and piece-length hint for the session.
        progress_callback:
            Optional callable invoked with progress dicts while the
            engine works.  May be ``None``.

        Returns
        -------
        BinaryIO
            A readable stream holding the torrent metadata document.
            The caller owns and closes it.

        Raises
        ------
        SessionStartError
            When the session cannot be opened.
        NotSupportedError
            When the engine cannot fetch metadata for magnet links.
        """
        ...  # pragma: no cover
