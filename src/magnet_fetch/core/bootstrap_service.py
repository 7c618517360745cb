"""Core bootstrap service — turns a magnet link into an engine session.

This service delegates the actual transfer to a
:class:`~magnet_fetch.core.protocols.DownloadEngine` injected at
construction time.  It is responsible for:

* Decoding the magnet URI.
* Selecting the content identifier (only the first one is used).
* Building the :class:`~magnet_fetch.core.models.SessionDescriptor`.
* Ensuring only :class:`~magnet_fetch.exceptions.MagnetFetchError`
  subclasses escape.

One download attempt carries exactly one identity; additional ``xt``
hashes in a multi-hash link are ignored.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from magnet_fetch.core.magnet_decoder import decode_magnet
from magnet_fetch.core.models import SessionDescriptor
from magnet_fetch.core.protocols import DownloadEngine, ProgressCallback
from magnet_fetch.exceptions import MagnetFetchError, NoInfoHashError, SessionStartError

log = logging.getLogger(__name__)


class BootstrapService:
    """Stateless service that starts a download from a magnet link.

    Parameters
    ----------
    engine:
        Any object satisfying the :class:`DownloadEngine` protocol.
    strict_prefix:
        Forwarded to :func:`~magnet_fetch.core.magnet_decoder.decode_magnet`.
    """

    def __init__(self, engine: DownloadEngine, *, strict_prefix: bool = False) -> None:
        self._engine: DownloadEngine = engine
        self._strict_prefix: bool = strict_prefix

    # ------------------------------------------------------------------
    # Descriptor construction (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def build_descriptor(info_hash: bytes) -> SessionDescriptor:
        """Return the session request for *info_hash*.

        The checksum field is left unset: it is unknown until the
        metadata itself has been fetched.
        """
        return SessionDescriptor(info_hash=info_hash)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def torrent_from_magnet(
        self,
        uri: str,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> BinaryIO:
        """Fetch the torrent metadata document named by *uri*.

        Raises
        ------
        MagnetDecodeError
            Any decoding failure, unchanged.
        NoInfoHashError
            If the link decodes to no info hash at all.
        NotSupportedError
            If the engine cannot fetch metadata for magnet links.
        SessionStartError
            When the engine fails for any other reason.
        """
        magnet = decode_magnet(uri, strict_prefix=self._strict_prefix)
        if not magnet.info_hashes:
            raise NoInfoHashError(uri)

        info_hash = magnet.info_hashes[0]
        if len(magnet.info_hashes) > 1:
            log.debug(
                "Ignoring %d additional info hash(es) in %s",
                len(magnet.info_hashes) - 1,
                uri,
            )

        log.info("Starting session for info hash %s", info_hash.hex())
        return self._start(self.build_descriptor(info_hash), progress_callback)

    # ------------------------------------------------------------------
    # Engine delegation (safe boundary)
    # ------------------------------------------------------------------

    def _start(
        self,
        descriptor: SessionDescriptor,
        progress_callback: ProgressCallback | None,
    ) -> BinaryIO:
        """Call the engine and ensure only our exceptions escape."""
        try:
            stream = self._engine.start(descriptor, progress_callback=progress_callback)
        except MagnetFetchError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise SessionStartError(
                f"Unexpected engine error for {descriptor.content_id}: {exc}",
            ) from exc

        if stream is None:
            raise SessionStartError(
                f"Download engine returned no data for {descriptor.content_id}.",
            )
        return stream
