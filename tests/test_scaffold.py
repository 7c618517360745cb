"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from magnet_fetch import __version__
from magnet_fetch.cli import exit_codes
from magnet_fetch.cli.app import main
from magnet_fetch.exceptions import (
    BadInfoHashEncodingError,
    BadInfoHashLengthError,
    ConfigurationError,
    EnvironmentError,
    MagnetDecodeError,
    MagnetFetchError,
    MalformedURIError,
    MissingExactTopicError,
    MissingInfoHashPrefixError,
    NoInfoHashError,
    NotSupportedError,
    SessionStartError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            MalformedURIError,
            MissingExactTopicError,
            MissingInfoHashPrefixError,
            BadInfoHashLengthError,
            BadInfoHashEncodingError,
        ],
    )
    def test_decode_errors_share_base(self, exc_class: type[MagnetFetchError]) -> None:
        assert issubclass(exc_class, MagnetDecodeError)

    @pytest.mark.parametrize(
        "exc_class",
        [
            MagnetDecodeError,
            NoInfoHashError,
            NotSupportedError,
            SessionStartError,
            ConfigurationError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[MagnetFetchError]
    ) -> None:
        assert issubclass(exc_class, MagnetFetchError)

    def test_hint_is_stored(self) -> None:
        err = MagnetFetchError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert MagnetFetchError("boom").hint is None

    def test_length_error_reports_expected_and_actual(self) -> None:
        err = BadInfoHashLengthError("abc", expected=40)
        assert (err.expected, err.actual) == (40, 3)
        assert "Wanted 40, got 3" in str(err)

    def test_not_supported_names_hash(self) -> None:
        err = NotSupportedError(b"\xab" * 20)
        assert "ab" * 20 in str(err)


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self) -> None:
        assert main([]) == exit_codes.SUCCESS

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("magnet_fetch.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        assert main(["doctor"]) == exit_codes.SUCCESS
