"""Shared CLI helpers."""

import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ScanConfig, load_config, parse_depth, parse_limit

console = Console()
err_console = Console(stderr=True)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def resolve_config(
    path: Optional[Path] = None,
    mask: Optional[str] = None,
    limit: Optional[str] = None,
    depth: Optional[str] = None,
    bare: bool = False,
    relative: bool = False,
    progress: bool = False,
    verbose: bool = False,
    json_output: bool = False,
    config: Optional[Path] = None,
) -> ScanConfig:
    """Build a scan config from CLI options.

    Only options given on the command line override file and environment
    settings.
    """
    overrides: dict = {}
    if path is not None:
        overrides["root"] = path
    if mask is not None:
        overrides["mask"] = mask
    if limit is not None:
        overrides["limit"] = parse_limit(limit)
    if depth is not None:
        overrides["max_depth"] = parse_depth(depth)
    if bare:
        overrides["bare"] = True
    if relative:
        overrides["relative"] = True
    if progress:
        overrides["show_progress"] = True
    if verbose:
        overrides["verbose"] = True
    if json_output:
        overrides["output_format"] = "json"
    return load_config(config_file=config, **overrides)


def prepare_stdout() -> None:
    """Let stdout write file names that are not valid in its encoding.

    Undecodable bytes in names come back from the OS as surrogate escapes;
    writing them with ``surrogateescape`` reproduces the original bytes.
    """
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")
