"""Configuration loading and management for largest.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.largest.toml)
    3. Project config (./largest.toml)
    4. Explicit config file (--config)
    5. Environment variables (LARGEST_* prefix)
    6. CLI overrides (passed as kwargs)

In files and environment variables, ``limit = -1`` and ``max_depth = -1``
mean "unbounded", as on the command line.

Example:
    >>> config = load_config(root=Path("/var/log"), limit=10)
    >>> config.limit
    10
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, LargestError

OutputFormat = Literal["text", "json"]

DEFAULT_LIMIT = 50
DEFAULT_MASK = "*"
DEFAULT_PROGRESS_INTERVAL = 0.1
UNBOUNDED = -1

_OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan.

    Attributes:
        What to scan:
            root: Directory to scan
            mask: Wildcard file name filter (``*`` and ``?``)
            max_depth: Deepest directory level to enumerate, root is 0 (None = unbounded)
            follow_symlinks: Descend into symlinked directories

        What to keep:
            limit: Number of largest files to keep (None = keep all)

        Output control:
            bare: Print paths only, no sizes
            relative: Print paths relative to root
            output_format: "text" or "json"

        Feedback:
            show_progress: Live status line on stderr
            progress_interval: Minimum seconds between status line updates
            verbose: Log inaccessible entries and print a skipped summary
    """

    root: Path = field(default_factory=Path.cwd)
    mask: str = DEFAULT_MASK
    max_depth: Optional[int] = None
    follow_symlinks: bool = False

    limit: Optional[int] = DEFAULT_LIMIT

    bare: bool = False
    relative: bool = False
    output_format: OutputFormat = "text"

    show_progress: bool = False
    progress_interval: float = DEFAULT_PROGRESS_INTERVAL
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.root, Path):
            object.__setattr__(self, "root", Path(self.root))
        if not self.mask:
            object.__setattr__(self, "mask", DEFAULT_MASK)

        if self.max_depth is not None and self.max_depth < 0:
            raise InvalidConfigError("max_depth", self.max_depth, "must be non-negative")
        if self.limit is not None and self.limit < 0:
            raise InvalidConfigError("limit", self.limit, "must be non-negative")
        if self.progress_interval <= 0:
            raise InvalidConfigError(
                "progress_interval", self.progress_interval, "must be positive"
            )
        if self.output_format not in _OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected one of {', '.join(_OUTPUT_FORMATS)}"
            )


def parse_limit(value: str) -> Optional[int]:
    """Parse a ``-n`` value: -1 keeps everything, anything invalid means 50."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    if n == UNBOUNDED:
        return None
    if n < UNBOUNDED:
        return DEFAULT_LIMIT
    return n


def parse_depth(value: str) -> Optional[int]:
    """Parse a ``-d`` value: -1 (or anything invalid) means unbounded."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        return None
    if n < 0:
        return None
    return n


def load_config(config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated ScanConfig instance

    Raises:
        LargestError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".largest.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise LargestError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "largest.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise LargestError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise LargestError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise LargestError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Bounds from files and environment use the command line's -1 convention
    for key in ("limit", "max_depth"):
        if merged.get(key) == UNBOUNDED:
            merged[key] = None

    merged.update(overrides)

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise LargestError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LARGEST_* environment variables.

    Supported environment variables:
        LARGEST_ROOT: path
        LARGEST_MASK: str
        LARGEST_MAX_DEPTH: int (-1 = unbounded)
        LARGEST_LIMIT: int (-1 = keep all)
        LARGEST_BARE, LARGEST_RELATIVE, LARGEST_SHOW_PROGRESS,
        LARGEST_VERBOSE, LARGEST_FOLLOW_SYMLINKS: bool (true/false/1/0)
        LARGEST_PROGRESS_INTERVAL: float
        LARGEST_OUTPUT_FORMAT: text/json

    Returns:
        Dict of field_name -> parsed_value for any LARGEST_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"LARGEST_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise LargestError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass
        field_name: Field name for error messages

    Returns:
        Parsed value or None if can't parse

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is Path:
        return Path(value)

    # String (including Literal types like OutputFormat)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        LargestError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise LargestError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
