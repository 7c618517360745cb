"""Allow ``python -m magnet_fetch`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m magnet_fetch`` behaves identically to the
``magnet-fetch`` console script.
"""

from __future__ import annotations

from magnet_fetch.cli.app import cli

if __name__ == "__main__":
    cli()
