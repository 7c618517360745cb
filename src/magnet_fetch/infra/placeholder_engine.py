"""Placeholder implementation of :class:`~magnet_fetch.core.protocols.DownloadEngine`.

Metadata exchange over the peer wire protocol (BEP 9) is not
implemented.  The engine still opens a session the way a real engine
would, so that descriptors are validated and the session state a real
engine needs is in place, and then refuses with
:class:`~magnet_fetch.exceptions.NotSupportedError`.

A real engine runs a fixed pool of peer-handling tasks that feed one
ordered inbound-message queue, consumed by a single coordinator.  That
state lives on :class:`EngineSession`, never on the descriptor.
"""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass, field
from typing import Any, BinaryIO

from magnet_fetch.core.models import INFO_HASH_SIZE, SessionDescriptor
from magnet_fetch.core.protocols import ProgressCallback
from magnet_fetch.exceptions import NotSupportedError, SessionStartError

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class EngineSession:
    """Mutable per-session state owned by the engine."""

    descriptor: SessionDescriptor

    peers: dict[str, Any] = field(default_factory=dict)
    """Peer address → peer state."""

    inbound: queue.Queue[Any] = field(default_factory=queue.Queue)
    """Messages from every peer connection, in arrival order."""

    active_pieces: dict[int, Any] = field(default_factory=dict)
    """Piece index → in-flight piece state."""


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class PlaceholderEngine:
    """Download engine that cannot fetch metadata for magnet links.

    This class satisfies the :class:`~magnet_fetch.core.protocols.DownloadEngine`
    protocol structurally — no explicit inheritance required.
    """

    _NOT_SUPPORTED_HINT: str = (
        "Fetching metadata from peers (BEP 9) is not implemented yet. "
        "Download the .torrent file directly instead."
    )

    @staticmethod
    def open_session(descriptor: SessionDescriptor) -> EngineSession:
        """Validate *descriptor* and build the state for a new session.

        Raises
        ------
        SessionStartError
            If the info hash or piece length is unusable.
        """
        if len(descriptor.info_hash) != INFO_HASH_SIZE:
            raise SessionStartError(
                f"Info hash must be {INFO_HASH_SIZE} bytes, "
                f"got {len(descriptor.info_hash)}.",
            )
        if descriptor.piece_length <= 0:
            raise SessionStartError(
                f"Piece length must be positive, got {descriptor.piece_length}.",
            )
        return EngineSession(descriptor=descriptor)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def start(
        self,
        descriptor: SessionDescriptor,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> BinaryIO:
        """Open a session for *descriptor*, then refuse.

        Raises
        ------
        SessionStartError
            If the descriptor is invalid.
        NotSupportedError
            Always, once the session is open.
        """
        session = self.open_session(descriptor)
        log.debug(
            "Opened session %s (name=%s, piece_length=%d)",
            descriptor.content_id,
            descriptor.name,
            descriptor.piece_length,
        )
        raise NotSupportedError(
            session.descriptor.info_hash,
            hint=self._NOT_SUPPORTED_HINT,
        )
