"""Domain models for magnet-fetch.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass

INFO_HASH_SIZE: int = 20
"""Width in bytes of a BitTorrent v1 info hash (a SHA-1 digest)."""

METADATA_PIECE_LENGTH: int = 16384
"""Block size used when exchanging torrent metadata (BEP 9)."""

METADATA_FILENAME: str = "magnetfile.torrent"
"""Generic name given to metadata fetched through a magnet link."""


# ---------------------------------------------------------------------------
# Decoded magnet link
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Magnet:
    """A decoded magnet URI."""

    info_hashes: tuple[bytes, ...]
    """Raw 20-byte info hashes, in ``xt`` parameter order."""

    display_name: str | None = None
    """First ``dn`` value, or ``None``.  Informational only."""

    trackers: tuple[str, ...] = ()
    """``tr`` values in URI order.  Informational only."""

    @property
    def hex_hashes(self) -> tuple[str, ...]:
        """Lowercase hex form of every info hash."""
        return tuple(info_hash.hex() for info_hash in self.info_hashes)


# ---------------------------------------------------------------------------
# Engine request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SessionDescriptor:
    """The minimal request a download engine needs to open a session.

    Built fresh for every bootstrap call and discarded afterwards.
    """

    info_hash: bytes
    """The selected 20-byte content identifier."""

    name: str = METADATA_FILENAME
    """Placeholder filename.  Never taken from the ``dn`` parameter."""

    piece_length: int = METADATA_PIECE_LENGTH

    md5sum: str | None = None
    """Optional content checksum.  Unknown until the metadata arrives."""

    @property
    def content_id(self) -> str:
        """Hex form of :attr:`info_hash`, used as the session identity key."""
        return self.info_hash.hex()
