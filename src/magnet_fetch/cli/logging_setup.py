"""Logging configuration for the CLI.

Library modules only call ``logging.getLogger(__name__)``; the handler
is installed here, once, on the ``magnet_fetch`` package logger.
"""

from __future__ import annotations

import logging

from magnet_fetch.cli.console import get_rich_console
from magnet_fetch.exceptions import EnvironmentError

PACKAGE_LOGGER: str = "magnet_fetch"
PLAIN_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_log_level(verbosity: int, configured: str) -> str:
    """Map ``-v`` counts onto a level name, else use the configured one."""
    if verbosity >= 2:
        return "DEBUG"
    if verbosity == 1:
        return "INFO"
    return configured


def _build_handler() -> logging.Handler:
    """Return a Rich log handler, or a plain stderr one without Rich."""
    try:
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            console=get_rich_console(),
            rich_tracebacks=True,
            show_path=False,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    except (ModuleNotFoundError, EnvironmentError):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    return handler


def configure_logging(level: str) -> logging.Logger:
    """Send ``magnet_fetch`` log records at *level* and above to stderr.

    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers[:] = [_build_handler()]
    logger.setLevel(level)
    logger.propagate = False
    return logger
