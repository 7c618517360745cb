"""magnet-fetch — turn magnet links into torrent download sessions.

Decodes BitTorrent magnet URIs and hands the content identifier to a
pluggable download engine.
"""

from magnet_fetch.version import __version__

__all__: list[str] = ["__version__"]
