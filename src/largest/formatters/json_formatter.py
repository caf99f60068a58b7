"""JSON formatter."""

import json

from ..config import ScanConfig
from ..models import ScanResult
from .base import BaseFormatter, display_path


class JsonFormatter(BaseFormatter):
    """Render the selection as a JSON array of ``{size, path}`` objects."""

    def format(self, result: ScanResult, config: ScanConfig) -> str:
        data = [{"size": r.size, "path": display_path(r, config)} for r in result.records]
        return json.dumps(data, indent=2)
