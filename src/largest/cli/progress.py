"""Live status line for long scans."""

from __future__ import annotations

import time
from typing import Callable, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn

from ..config import DEFAULT_PROGRESS_INTERVAL
from ..logging_config import get_logger
from ..models import ScanStats

logger = get_logger(__name__)


def format_status(stats: ScanStats) -> str:
    """One-line summary of a scan in flight."""
    text = (
        f"Files: {stats.files_visited:,}  "
        f"Depth: {stats.current_depth}  "
        f"Max depth: {stats.max_depth_seen}"
    )
    if stats.inaccessible_count:
        text += f"  Inaccessible: {stats.inaccessible_count:,}"
    return text


class ProgressReporter:
    """Time-gated status line on the status console.

    The line is redrawn at most once per ``interval`` seconds however often
    ``notify`` is called. The cursor is hidden while the scan runs and the
    line is erased on ``finish``. Rendering problems are logged and dropped,
    never raised into the scan.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        enabled: bool = True,
        interval: float = DEFAULT_PROGRESS_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.console = console or Console(stderr=True)
        self.enabled = enabled
        self.interval = interval
        self._clock = clock
        self._last: Optional[float] = None
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None
        self.updates = 0
        self.last_status = ""

    def start(self) -> None:
        """Start the status display."""
        if not self.enabled or self._progress is not None:
            return
        try:
            self._progress = Progress(
                SpinnerColumn(),
                TextColumn("{task.description}"),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
                auto_refresh=False,
            )
            self._progress.start()
            self._task_id = self._progress.add_task("Scanning...", total=None)
        except Exception as e:
            logger.debug(f"Progress display unavailable: {e}")
            self._progress = None

    def notify(self, stats: ScanStats) -> bool:
        """Redraw the status line if the interval has elapsed.

        Returns:
            True if the line was redrawn
        """
        if self._progress is None or self._task_id is None:
            return False

        now = self._clock()
        if self._last is not None and now - self._last < self.interval:
            return False
        self._last = now

        self.last_status = format_status(stats)
        try:
            self._progress.update(self._task_id, description=self.last_status, refresh=True)
        except Exception as e:
            logger.debug(f"Progress update failed: {e}")
            return False
        self.updates += 1
        return True

    def finish(self) -> None:
        """Erase the status line and restore the cursor."""
        if self._progress is None:
            return
        try:
            self._progress.stop()
        except Exception as e:
            logger.debug(f"Progress shutdown failed: {e}")
        finally:
            self._progress = None
            self._task_id = None

    def __enter__(self) -> ProgressReporter:
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.finish()
