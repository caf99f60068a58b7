"""Plain text listing, one file per line."""

from ..config import ScanConfig
from ..models import FileRecord, ScanResult
from .base import BaseFormatter, display_path
from .sizes import SIZE_COLUMN_WIDTH, format_size


class TextFormatter(BaseFormatter):
    """Render ``<size> <path>`` lines, or bare paths."""

    def format_line(self, record: FileRecord, config: ScanConfig) -> str:
        path = display_path(record, config)
        if config.bare:
            return path
        return f"{format_size(record.size, width=SIZE_COLUMN_WIDTH)} {path}"

    def lines(self, result: ScanResult, config: ScanConfig) -> list[str]:
        return [self.format_line(r, config) for r in result.records]

    def format(self, result: ScanResult, config: ScanConfig) -> str:
        return "\n".join(self.lines(result, config))
