"""Output formatters for largest."""

from .base import BaseFormatter, display_path
from .json_formatter import JsonFormatter
from .sizes import SIZE_SUFFIXES, format_size
from .text_formatter import TextFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "text", "json"

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "text": TextFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JsonFormatter",
    "SIZE_SUFFIXES",
    "display_path",
    "format_size",
    "get_formatter",
]
