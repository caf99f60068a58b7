"""Depth-bounded, failure-tolerant directory walker."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from ..config import ScanConfig
from ..exceptions import DirectoryInaccessibleError, EntryInaccessibleError
from ..logging_config import get_logger
from ..models import FileRecord, ScanStats
from .fs import FileSystem
from .matcher import NameMatcher

logger = get_logger(__name__)

MatchCb = Callable[[FileRecord], None]
ProgressCb = Callable[[ScanStats], None]
StopCb = Callable[[], bool]


class DirectoryWalker:
    """Walks a tree with an explicit work list instead of recursion.

    A directory that cannot be listed, or an entry that cannot be classified
    or measured, is counted in ``inaccessible_count`` and skipped. Nothing
    the filesystem raises gets past ``walk``.
    """

    def __init__(self, config: ScanConfig, fs: Optional[FileSystem] = None):
        self.config = config
        self.fs = fs or FileSystem(follow_symlinks=config.follow_symlinks)
        self.matcher = NameMatcher(config.mask)
        self.stats = ScanStats()

    def walk(
        self,
        on_match: MatchCb,
        on_progress: Optional[ProgressCb] = None,
        should_stop: Optional[StopCb] = None,
    ) -> ScanStats:
        """Visit every directory within ``max_depth`` of the root.

        Args:
            on_match: Called with a FileRecord for each matching regular file
            on_progress: Called with the live stats after every entry
            should_stop: Polled before each directory; True ends the walk

        Returns:
            Snapshot of the final statistics
        """
        max_depth = self.config.max_depth
        stack: list[tuple[Path, int]] = [(self.config.root, 0)]

        while stack:
            if should_stop is not None and should_stop():
                logger.debug(f"Walk stopped with {len(stack)} directories pending")
                break

            directory, depth = stack.pop()
            if max_depth is not None and depth > max_depth:
                continue

            try:
                entries = self.fs.list_dir(directory)
            except DirectoryInaccessibleError as e:
                self._skip(e)
                self._progress(on_progress)
                continue

            self.stats.enter_directory(depth)

            for entry in entries:
                try:
                    if self.fs.is_dir(entry):
                        stack.append((entry.path, depth + 1))
                    elif self.fs.is_file(entry) and self.matcher(entry.name):
                        size = self.fs.size_of(entry)
                        self.stats.files_visited += 1
                        on_match(FileRecord(size=size, path=entry.path))
                except EntryInaccessibleError as e:
                    self._skip(e)
                self._progress(on_progress)

        return self.stats.snapshot()

    def _skip(self, error: Exception) -> None:
        self.stats.inaccessible_count += 1
        logger.info(f"Skipped: {error}")

    def _progress(self, on_progress: Optional[ProgressCb]) -> None:
        if on_progress is not None:
            on_progress(self.stats)


def walk(
    config: ScanConfig,
    on_match: MatchCb,
    on_progress: Optional[ProgressCb] = None,
    should_stop: Optional[StopCb] = None,
    fs: Optional[FileSystem] = None,
) -> ScanStats:
    """Walk ``config.root`` and report matching files through ``on_match``."""
    return DirectoryWalker(config, fs=fs).walk(on_match, on_progress, should_stop)
