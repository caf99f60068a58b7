"""Filesystem access layer used by the walker.

Every ``OSError`` is translated into one of the recoverable scanning
exceptions, so the walker only has to know about those.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..exceptions import DirectoryInaccessibleError, EntryInaccessibleError


@dataclass(frozen=True)
class Entry:
    """One item returned by ``FileSystem.list_dir``."""

    name: str
    path: Path
    handle: Any = None


class FileSystem:
    """Local filesystem backed by ``os.scandir``."""

    def __init__(self, follow_symlinks: bool = False):
        self.follow_symlinks = follow_symlinks

    def list_dir(self, path: Path) -> list[Entry]:
        try:
            with os.scandir(path) as it:
                return [Entry(name=e.name, path=Path(e.path), handle=e) for e in it]
        except OSError as e:
            raise DirectoryInaccessibleError(path, e.strerror or str(e)) from e

    def is_dir(self, entry: Entry) -> bool:
        try:
            return entry.handle.is_dir(follow_symlinks=self.follow_symlinks)
        except OSError as e:
            raise EntryInaccessibleError(entry.path, e.strerror or str(e)) from e

    def is_file(self, entry: Entry) -> bool:
        # File symlinks count as files, the same way the platform's stat() sees them
        try:
            return entry.handle.is_file()
        except OSError as e:
            raise EntryInaccessibleError(entry.path, e.strerror or str(e)) from e

    def size_of(self, entry: Entry) -> int:
        try:
            return int(entry.handle.stat().st_size)
        except OSError as e:
            raise EntryInaccessibleError(entry.path, e.strerror or str(e)) from e

    def relativize(self, path: Path, root: Path) -> Path:
        try:
            return Path(os.path.relpath(path, root))
        except ValueError:
            # Different drives on Windows
            return path


def validate_root(path: Path) -> Optional[str]:
    """Return why ``path`` cannot be scanned, or None if it can."""
    if not path.exists():
        return "does not exist"
    if not path.is_dir():
        return "not a directory"
    return None
