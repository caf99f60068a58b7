"""Scanning exceptions: per-entry and per-directory access, mask compilation.

None of these escape a scan. The walker turns access errors into statistics
and the matcher turns a malformed mask into substring matching.
"""

from pathlib import Path

from .base import LargestError


class ScanError(LargestError):
    """Base class for recoverable errors raised while scanning."""

    pass


class EntryInaccessibleError(ScanError):
    """Raised when a directory entry cannot be classified or measured."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot access entry: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class DirectoryInaccessibleError(ScanError):
    """Raised when a directory cannot be enumerated."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot list directory: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class MalformedMaskError(ScanError):
    """Raised when a file mask cannot be compiled into a pattern."""

    def __init__(self, mask: str, reason: str):
        super().__init__(f"Malformed file mask: {mask!r}", details={"reason": reason})
        self.mask = mask
        self.reason = reason
