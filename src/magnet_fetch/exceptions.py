"""Custom exception hierarchy for magnet-fetch.

All exceptions that cross layer boundaries must inherit from
:class:`MagnetFetchError`.  Raw exceptions raised by a download engine
must NEVER propagate beyond the bootstrap service — they are caught
there and re-raised as :class:`SessionStartError`.

Hierarchy
---------
MagnetFetchError
├── MagnetDecodeError
│   ├── MalformedURIError
│   ├── MissingExactTopicError
│   ├── MissingInfoHashPrefixError
│   ├── BadInfoHashLengthError
│   └── BadInfoHashEncodingError
├── NoInfoHashError
├── NotSupportedError
├── SessionStartError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class MagnetFetchError(Exception):
    """Base exception for all magnet-fetch errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- URI decoding ----------------------------------------------------------

class MagnetDecodeError(MagnetFetchError):
    """Common base for every failure raised while decoding a magnet URI."""


class MalformedURIError(MagnetDecodeError):
    """Raised when the input is not a syntactically valid URI."""

    def __init__(self, message: str, *, uri: str, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.uri: str = uri


class MissingExactTopicError(MagnetDecodeError):
    """Raised when the URI carries no ``xt`` (exact topic) parameter."""

    def __init__(self, uri: str) -> None:
        super().__init__(
            f"Magnet URI missing the 'xt' argument: {uri}",
            hint="A magnet link needs at least one xt=urn:btih:<hash> parameter.",
        )
        self.uri: str = uri


class MissingInfoHashPrefixError(MagnetDecodeError):
    """Raised when an ``xt`` value does not split cleanly on ``urn:btih:``."""

    def __init__(self, value: str) -> None:
        super().__init__(
            "Magnet URI xt parameter missing the 'urn:btih:' prefix. "
            "Not a bittorrent hash link?",
        )
        self.value: str = value


class BadInfoHashLengthError(MagnetDecodeError):
    """Raised when the info-hash payload is not 40 bytes long."""

    def __init__(self, value: str, *, expected: int) -> None:
        super().__init__(
            "Magnet URI contains infohash with unexpected length. "
            f"Wanted {expected}, got {len(value.encode('utf-8'))}: {value}",
            hint="Only hex-encoded (40 character) info hashes are supported.",
        )
        self.value: str = value
        self.expected: int = expected
        self.actual: int = len(value.encode("utf-8"))


class BadInfoHashEncodingError(MagnetDecodeError):
    """Raised when the info-hash payload is not valid hexadecimal."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(
            f"Magnet URI contains infohash that can't be hex-decoded {value!r}: {reason}",
        )
        self.value: str = value


# --- Session bootstrap -----------------------------------------------------

class NoInfoHashError(MagnetFetchError):
    """Raised when decoding succeeded but produced no content identifier."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"No bittorrent infohashes found in the magnet link {uri}.")
        self.uri: str = uri


class NotSupportedError(MagnetFetchError):
    """Raised when the download engine cannot fetch the torrent metadata."""

    def __init__(self, info_hash: bytes, *, hint: str | None = None) -> None:
        super().__init__(
            "Not supported. Would have downloaded torrent file with hash "
            f"{info_hash.hex()}",
            hint=hint,
        )
        self.info_hash: bytes = info_hash


class SessionStartError(MagnetFetchError):
    """Raised when the download engine fails to open a session."""


# --- Configuration / environment -------------------------------------------

class ConfigurationError(MagnetFetchError):
    """Raised for issues related to configuration loading or validation."""


class EnvironmentError(MagnetFetchError):
    """Raised when a required runtime dependency is not available."""
