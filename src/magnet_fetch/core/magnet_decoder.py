"""Magnet URI decoding (BEP 9).

Example bittorrent magnet link::

    magnet:?xt=urn:btih:bbb6db69965af769f664b6636e7914f8735141b3&dn=Ubuntu.iso

* ``xt`` — exact topic.  ``urn:btih:`` marks a BitTorrent info hash.
* ``dn`` — display name (optional).
* ``tr`` — tracker address (optional).

Only hex-encoded info hashes are accepted; base32 payloads fail the
length check.

Guarantees
----------
* Pure — the result depends only on the input string.
* Only :class:`~magnet_fetch.exceptions.MagnetDecodeError` subclasses
  escape.
"""

from __future__ import annotations

import binascii
import logging
from urllib.parse import parse_qs, urlsplit

from magnet_fetch.core.models import INFO_HASH_SIZE, Magnet
from magnet_fetch.exceptions import (
    BadInfoHashEncodingError,
    BadInfoHashLengthError,
    MalformedURIError,
    MissingExactTopicError,
    MissingInfoHashPrefixError,
)

log = logging.getLogger(__name__)

INFO_HASH_MARKER: str = "urn:btih:"
HEX_INFO_HASH_LENGTH: int = INFO_HASH_SIZE * 2


def decode_magnet(uri: str, *, strict_prefix: bool = False) -> Magnet:
    """Decode *uri* into a :class:`Magnet`.

    Parameters
    ----------
    uri:
        The magnet link to decode.
    strict_prefix:
        When ``False`` (default) an ``xt`` value only has to split into
        exactly two parts on ``urn:btih:``.  When ``True`` it must also
        start with the marker.

    Raises
    ------
    MalformedURIError
        If *uri* is not a parseable URI with a scheme.
    MissingExactTopicError
        If there is no ``xt`` parameter.
    MissingInfoHashPrefixError
        If an ``xt`` value does not carry the ``urn:btih:`` marker.
    BadInfoHashLengthError
        If a hash payload is not 40 characters long.
    BadInfoHashEncodingError
        If a hash payload is not valid hexadecimal.
    """
    query = _split_query(uri)

    exact_topics = query.get("xt")
    if exact_topics is None:
        raise MissingExactTopicError(uri)

    info_hashes = tuple(
        _decode_exact_topic(xt, strict_prefix=strict_prefix) for xt in exact_topics
    )
    display_names = query.get("dn")

    log.debug("Decoded %d info hash(es) from %s", len(info_hashes), uri)
    return Magnet(
        info_hashes=info_hashes,
        display_name=display_names[0] if display_names else None,
        trackers=tuple(query.get("tr", ())),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _split_query(uri: str) -> dict[str, list[str]]:
    """Parse *uri* as a generic URI and return its query parameters."""
    if not uri.strip():
        raise MalformedURIError("URI must not be empty.", uri=uri)
    if uri[0] <= " ":
        raise MalformedURIError(
            f"Leading whitespace or control character in URI: {uri!r}", uri=uri,
        )
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in uri):
        raise MalformedURIError(
            f"Invalid control character in URI: {uri!r}", uri=uri,
        )

    try:
        parts = urlsplit(uri)
    except ValueError as exc:
        raise MalformedURIError(f"Cannot parse URI {uri!r}: {exc}", uri=uri) from exc

    if not parts.scheme:
        raise MalformedURIError(
            f"Missing scheme in URI: {uri}",
            uri=uri,
            hint="Magnet links start with 'magnet:?'.",
        )

    # Blank values are kept so that ``xt=`` reports a missing marker
    # instead of a missing parameter.
    return parse_qs(parts.query, keep_blank_values=True)


def _decode_exact_topic(xt: str, *, strict_prefix: bool) -> bytes:
    """Turn one ``xt`` value into a raw 20-byte info hash."""
    pieces = xt.split(INFO_HASH_MARKER)
    if len(pieces) != 2 or (strict_prefix and pieces[0]):
        raise MissingInfoHashPrefixError(xt)

    payload = pieces[1]
    # Counted in UTF-8 bytes, so non-ASCII payloads fail on length first.
    if len(payload.encode("utf-8")) != HEX_INFO_HASH_LENGTH:
        raise BadInfoHashLengthError(payload, expected=HEX_INFO_HASH_LENGTH)

    try:
        return binascii.unhexlify(payload)
    except ValueError as exc:
        # binascii.Error subclasses ValueError; non-ASCII text raises
        # ValueError directly.
        raise BadInfoHashEncodingError(payload, str(exc)) from exc
