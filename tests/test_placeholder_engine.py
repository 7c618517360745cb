"""Tests for the placeholder download engine (infra/placeholder_engine.py)."""

from __future__ import annotations

import queue

import pytest

from magnet_fetch.core.models import SessionDescriptor
from magnet_fetch.exceptions import NotSupportedError, SessionStartError
from magnet_fetch.infra.placeholder_engine import EngineSession, PlaceholderEngine

RAW_HASH = bytes.fromhex("bbb6db69965af769f664b6636e7914f8735141b3")


class TestOpenSession:
    def test_builds_empty_session_state(self) -> None:
        descriptor = SessionDescriptor(info_hash=RAW_HASH)
        session = PlaceholderEngine.open_session(descriptor)

        assert isinstance(session, EngineSession)
        assert session.descriptor is descriptor
        assert session.peers == {}
        assert session.active_pieces == {}
        assert isinstance(session.inbound, queue.Queue)
        assert session.inbound.empty()

    def test_sessions_do_not_share_state(self) -> None:
        a = PlaceholderEngine.open_session(SessionDescriptor(info_hash=RAW_HASH))
        b = PlaceholderEngine.open_session(SessionDescriptor(info_hash=RAW_HASH))
        a.peers["10.0.0.1:6881"] = object()
        assert b.peers == {}
        assert a.inbound is not b.inbound

    def test_rejects_short_hash(self) -> None:
        with pytest.raises(SessionStartError, match="20 bytes"):
            PlaceholderEngine.open_session(SessionDescriptor(info_hash=b"\x01" * 19))

    @pytest.mark.parametrize("piece_length", [0, -16384])
    def test_rejects_non_positive_piece_length(self, piece_length: int) -> None:
        with pytest.raises(SessionStartError, match="Piece length"):
            PlaceholderEngine.open_session(
                SessionDescriptor(info_hash=RAW_HASH, piece_length=piece_length),
            )


class TestStart:
    def test_always_not_supported(self) -> None:
        engine = PlaceholderEngine()

        with pytest.raises(NotSupportedError) as exc_info:
            engine.start(SessionDescriptor(info_hash=RAW_HASH))

        assert exc_info.value.info_hash == RAW_HASH
        assert exc_info.value.hint is not None
        assert "BEP 9" in exc_info.value.hint

    def test_invalid_descriptor_fails_before_refusal(self) -> None:
        engine = PlaceholderEngine()

        with pytest.raises(SessionStartError):
            engine.start(SessionDescriptor(info_hash=b""))

    def test_progress_callback_not_invoked(self) -> None:
        calls: list[dict[str, object]] = []
        engine = PlaceholderEngine()

        with pytest.raises(NotSupportedError):
            engine.start(SessionDescriptor(info_hash=RAW_HASH), progress_callback=calls.append)
        assert calls == []
