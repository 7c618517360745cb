"""CLI application entry point and command routing for magnet-fetch.

This module is the **sole error boundary** for the entire application.
It catches :class:`~magnet_fetch.exceptions.MagnetFetchError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services and infrastructure adapters.
* This module is the only place that configures logging and translates
  between the domain world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from magnet_fetch.cli import exit_codes
from magnet_fetch.cli.console import console, escape_markup
from magnet_fetch.exceptions import MagnetFetchError
from magnet_fetch.version import __version__

if TYPE_CHECKING:
    from magnet_fetch.core.config import FetchConfig
    from magnet_fetch.core.models import Magnet

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``magnet-fetch <magnet-uri>``            — fetch the torrent file
    * ``magnet-fetch --inspect <magnet-uri>``  — decode only
    * ``magnet-fetch doctor``                  — environment diagnostics
    * ``magnet-fetch --version``
    """
    parser = argparse.ArgumentParser(
        prog="magnet-fetch",
        description="Fetch torrent metadata from a BitTorrent magnet link.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-vv for debug).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to an INI configuration file.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Require xt values to start with 'urn:btih:'.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Where to write the fetched .torrent file.",
    )
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Decode the magnet link and show its info hashes, then exit.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Magnet URI to fetch, or 'doctor' to run diagnostics.",
    )
    return parser


def _load_config(args: argparse.Namespace) -> FetchConfig:
    from magnet_fetch.infra.config_loader import ConfigLoader

    return ConfigLoader(args.config).load_config({"strict_prefix": args.strict})


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _render_magnet(magnet: Magnet) -> None:
    """Show the decoded link as a table, or plain lines without Rich."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        for index, hex_hash in enumerate(magnet.hex_hashes):
            print(f"xt[{index}] {hex_hash}", file=sys.stderr)
        print(f"dn {magnet.display_name or '-'}", file=sys.stderr)
        for tracker in magnet.trackers:
            print(f"tr {tracker}", file=sys.stderr)
        return

    table = Table(title="Magnet link", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for index, hex_hash in enumerate(magnet.hex_hashes):
        label = "info hash" if index == 0 else f"info hash #{index + 1} (ignored)"
        table.add_row(label, hex_hash)
    table.add_row("display name", Text(magnet.display_name or "-"))
    for tracker in magnet.trackers:
        table.add_row("tracker", Text(tracker))
    console.print(table)


def _handle_inspect(uri: str, config: FetchConfig) -> int:
    """Decode *uri* and render its contents without starting a session."""
    from magnet_fetch.core.magnet_decoder import decode_magnet

    magnet = decode_magnet(uri, strict_prefix=config.strict_prefix)
    _render_magnet(magnet)
    return exit_codes.SUCCESS


def _handle_fetch(uri: str, config: FetchConfig, output: Path | None) -> int:
    """Bootstrap a session for *uri* and save the fetched torrent file.

    Flow:
    1. Validate the link.
    2. Instantiate the engine + bootstrap service.
    3. Start the session with Rich progress.
    4. Write the returned stream to *output*.
    """
    from magnet_fetch.cli.progress import RichProgressHook
    from magnet_fetch.core.bootstrap_service import BootstrapService
    from magnet_fetch.core.magnet_decoder import decode_magnet
    from magnet_fetch.core.models import METADATA_FILENAME
    from magnet_fetch.infra.placeholder_engine import PlaceholderEngine

    # Decode errors must surface before the progress display is built.
    decode_magnet(uri, strict_prefix=config.strict_prefix)

    service = BootstrapService(PlaceholderEngine(), strict_prefix=config.strict_prefix)
    target = output or config.output_dir / METADATA_FILENAME

    console.print("\n[bold]Resolving magnet link…[/bold]\n")
    with RichProgressHook() as hook:
        stream = service.torrent_from_magnet(uri, progress_callback=hook)

    target.parent.mkdir(parents=True, exist_ok=True)
    with stream, target.open("wb") as fh:
        shutil.copyfileobj(stream, fh)

    log.info("Wrote %s", target)
    console.print(f"\n[bold green]Saved torrent file.[/bold green]  {escape_markup(str(target))}")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from magnet_fetch.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the magnet-fetch CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target: str = args.target

    if target.lower() == "doctor":
        return _handle_doctor()

    from magnet_fetch.cli.logging_setup import configure_logging, resolve_log_level

    config = _load_config(args)
    configure_logging(resolve_log_level(args.verbose, config.log_level))

    if args.inspect:
        return _handle_inspect(target, config)
    return _handle_fetch(target, config, args.output)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MagnetFetchError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
