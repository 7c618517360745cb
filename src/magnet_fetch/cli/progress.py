"""Rich progress display driven by download-engine progress callbacks.

The engine reports metadata transfer through a
:data:`~magnet_fetch.core.protocols.ProgressCallback`; this module turns
those dicts into a Rich :class:`~rich.progress.Progress` bar.

Calls made before :meth:`RichProgressHook.start` or after
:meth:`RichProgressHook.stop` are ignored.
"""

from __future__ import annotations

from typing import Any

from magnet_fetch.cli.console import get_rich_console
from magnet_fetch.exceptions import EnvironmentError

_MAX_LABEL: int = 50


class RichProgressHook:
    """Callable progress adapter for Rich.

    Usage::

        with RichProgressHook() as hook:
            service.torrent_from_magnet(uri, progress_callback=hook)
    """

    def __init__(self) -> None:
        try:
            from rich.progress import (
                BarColumn,
                DownloadColumn,
                Progress,
                SpinnerColumn,
                TextColumn,
                TransferSpeedColumn,
            )
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._progress: Any = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            console=get_rich_console(),
            transient=True,
        )
        self._task_id: int | None = None
        self._started: bool = False

    def __enter__(self) -> RichProgressHook:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    def start(self) -> None:
        """Start the Rich progress display."""
        if not self._started:
            self._progress.start()
            self._started = True

    def stop(self) -> None:
        """Stop the Rich progress display (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    def __call__(self, event: dict[str, Any]) -> None:
        """Engine progress callback.

        *event* carries a ``"status"`` of ``"downloading"`` or
        ``"finished"``; anything else is ignored.
        """
        if not self._started:
            return

        status = event.get("status", "")
        if status == "downloading":
            self._on_downloading(event)
        elif status == "finished":
            self._on_finished()

    def _on_downloading(self, event: dict[str, Any]) -> None:
        total = _safe_int(event.get("total_bytes"))
        received = _safe_int(event.get("downloaded_bytes")) or 0

        if self._task_id is None:
            label = str(event.get("filename") or "metadata")
            if len(label) > _MAX_LABEL:
                label = label[: _MAX_LABEL - 3] + "..."
            self._task_id = self._progress.add_task(label, total=total)

        if total is not None:
            self._progress.update(self._task_id, total=total, completed=received)
        else:
            self._progress.update(self._task_id, completed=received)

    def _on_finished(self) -> None:
        if self._task_id is None:
            return
        task = self._progress.tasks[self._task_id]
        if task.total is not None:
            self._progress.update(self._task_id, completed=task.total)


def _safe_int(value: object) -> int | None:
    """Convert *value* to ``int`` or return ``None``."""
    if value is None or not isinstance(value, (int, float, str)):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
