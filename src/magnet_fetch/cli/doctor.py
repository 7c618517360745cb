"""``magnet-fetch doctor`` — environment diagnostics command.

Collects runtime information and renders a table summarising whether
the environment satisfies magnet-fetch's requirements.  Falls back to
plain text when Rich is not installed.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from magnet_fetch.cli import exit_codes
from magnet_fetch.cli.console import console
from magnet_fetch.version import __version__

Check = tuple[str, str, str]

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _magnet_fetch_version_check() -> Check:
    return "magnet-fetch", __version__, _OK


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _distribution_check(name: str, *, required: bool) -> Check:
    """Return (label, value, status) for an installed distribution."""
    try:
        version = metadata.version(name)
    except metadata.PackageNotFoundError:
        return name, "NOT INSTALLED", _FAIL if required else _WARN
    return name, version, _OK


def _engine_check() -> Check:
    # Only the placeholder engine ships today.
    return "engine", "placeholder (no metadata exchange)", _WARN


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_table(checks: list[Check]) -> None:
    print("\nmagnet-fetch doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_table(checks: list[Check]) -> None:
    from rich.table import Table

    table = Table(
        title="magnet-fetch doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no critical check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _magnet_fetch_version_check(),
        _python_version_check(),
        _distribution_check("pydantic", required=True),
        _distribution_check("rich", required=False),
        _engine_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        _print_rich_table(checks)
    except ModuleNotFoundError:
        _print_plain_table(checks)
        summary = "Some checks failed." if has_failure else "All checks passed."
        print(summary, file=sys.stderr)
    else:
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
