"""Base formatter interface for result rendering."""

from abc import ABC, abstractmethod
from typing import Optional, TextIO

from ..config import ScanConfig
from ..models import FileRecord, ScanResult
from ..scanning.fs import FileSystem

_fs = FileSystem()


def display_path(record: FileRecord, config: ScanConfig) -> str:
    """Path as it should be shown: relative to the root when asked for."""
    if config.relative:
        return str(_fs.relativize(record.path, config.root))
    return str(record.path)


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, result: ScanResult, config: ScanConfig, file: Optional[TextIO] = None) -> None:
        """Write the formatted result to ``file`` (stdout by default)."""
        text = self.format(result, config)
        if text:
            print(text, file=file)

    @abstractmethod
    def format(self, result: ScanResult, config: ScanConfig) -> str:
        """Return formatted string representation of the result."""
