"""Programmatic entry point.

Example:
    >>> from largest import find_largest
    >>> from largest.config import ScanConfig
    >>> result = find_largest(ScanConfig(root=Path("/var/log"), limit=5))
    >>> [r.size for r in result.records]
"""

import os
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .config import ScanConfig
from .exceptions import RootInvalidError
from .logging_config import get_logger
from .models import ScanResult
from .scanning import DirectoryWalker, FileSystem, TopKSelector, validate_root
from .scanning.walker import ProgressCb, StopCb

logger = get_logger(__name__)


def find_largest(
    config: ScanConfig,
    on_progress: Optional[ProgressCb] = None,
    should_stop: Optional[StopCb] = None,
    fs: Optional[FileSystem] = None,
) -> ScanResult:
    """Scan ``config.root`` and return its largest matching files.

    Args:
        config: Scan configuration
        on_progress: Receives live statistics while the walk runs
        should_stop: Polled between directories for early termination
        fs: Filesystem access layer (defaults to the local filesystem)

    Returns:
        ScanResult with records sorted by size, largest first

    Raises:
        RootInvalidError: If the root does not exist or is not a directory
    """
    root = Path(os.path.abspath(config.root))
    reason = validate_root(root)
    if reason is not None:
        raise RootInvalidError(root, reason)

    if root != config.root:
        config = replace(config, root=root)

    selector = TopKSelector(config.limit)
    walker = DirectoryWalker(config, fs=fs)
    logger.debug(f"Scanning {root} mask={config.mask!r} limit={config.limit} depth={config.max_depth}")

    stats = walker.walk(selector.offer, on_progress=on_progress, should_stop=should_stop)

    logger.debug(
        f"Scanned {stats.directories_scanned} directories, {stats.files_visited} matching files, "
        f"{stats.inaccessible_count} inaccessible"
    )
    return ScanResult(root=root, records=selector.drain_sorted_descending(), stats=stats)
