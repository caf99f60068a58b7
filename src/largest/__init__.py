"""
largest - find the biggest files under a directory

Walks a directory tree with a depth bound and a wildcard name filter, keeps
only the K largest matching files in a bounded heap, and survives unreadable
entries and directories without aborting the scan.
"""

__version__ = "0.1.0"

from .api import find_largest
from .config import ScanConfig, load_config
from .models import FileRecord, ScanResult, ScanStats

__all__ = [
    "find_largest",  # Main entry point
    "ScanConfig",
    "load_config",
    "FileRecord",
    "ScanResult",
    "ScanStats",
]
