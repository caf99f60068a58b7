"""Data models shared by the walker, selector, reporter and formatters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """A matching file and its size in bytes."""

    size: int
    path: Path


@dataclass
class ScanStats:
    """Running counters for one scan.

    Mutated only by the walker. Readers get a copy through ``snapshot()``.
    """

    files_visited: int = 0
    inaccessible_count: int = 0
    current_depth: int = 0
    max_depth_seen: int = 0
    directories_scanned: int = 0

    def enter_directory(self, depth: int) -> None:
        self.directories_scanned += 1
        self.current_depth = depth
        if depth > self.max_depth_seen:
            self.max_depth_seen = depth

    def snapshot(self) -> ScanStats:
        return replace(self)


@dataclass
class ScanResult:
    """Outcome of ``find_largest``: the selected files, largest first."""

    root: Path
    records: list[FileRecord] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)
