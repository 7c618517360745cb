"""Shared pytest fixtures and configuration for the magnet-fetch test suite.

Guidelines
----------
* No network access in any test.
* Download engines are mocked at the protocol boundary.
* Core tests must be pure — no side effects.
* Configuration is isolated from the real user config directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config location at an empty temp directory."""
    config_home = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    """Undo the handler installed by ``configure_logging`` during a test."""
    logger = logging.getLogger("magnet_fetch")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
