"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
defaults, and derived properties.
"""

from __future__ import annotations

import pytest

from magnet_fetch.core.models import (
    METADATA_FILENAME,
    METADATA_PIECE_LENGTH,
    Magnet,
    SessionDescriptor,
)

RAW_HASH = bytes.fromhex("bbb6db69965af769f664b6636e7914f8735141b3")


class TestMagnet:
    def test_hex_hashes(self) -> None:
        m = Magnet(info_hashes=(RAW_HASH, b"\x00" * 20))
        assert m.hex_hashes == (
            "bbb6db69965af769f664b6636e7914f8735141b3",
            "00" * 20,
        )

    def test_defaults(self) -> None:
        m = Magnet(info_hashes=())
        assert m.display_name is None
        assert m.trackers == ()
        assert m.hex_hashes == ()

    def test_frozen(self) -> None:
        m = Magnet(info_hashes=(RAW_HASH,))
        with pytest.raises(AttributeError):
            m.info_hashes = ()  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Magnet(info_hashes=(RAW_HASH,)) == Magnet(info_hashes=(RAW_HASH,))


class TestSessionDescriptor:
    def test_defaults(self) -> None:
        d = SessionDescriptor(info_hash=RAW_HASH)
        assert d.name == METADATA_FILENAME == "magnetfile.torrent"
        assert d.piece_length == METADATA_PIECE_LENGTH == 16384

    def test_checksum_is_absent(self) -> None:
        d = SessionDescriptor(info_hash=RAW_HASH)
        assert d.md5sum is None

    def test_content_id_is_hex(self) -> None:
        d = SessionDescriptor(info_hash=RAW_HASH)
        assert d.content_id == "bbb6db69965af769f664b6636e7914f8735141b3"

    def test_frozen(self) -> None:
        d = SessionDescriptor(info_hash=RAW_HASH)
        with pytest.raises(AttributeError):
            d.piece_length = 1  # type: ignore[misc]
