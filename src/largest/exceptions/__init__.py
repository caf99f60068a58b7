"""Exception hierarchy for largest."""

from .base import LargestError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    RootInvalidError,
)
from .scanning import (
    DirectoryInaccessibleError,
    EntryInaccessibleError,
    MalformedMaskError,
    ScanError,
)

__all__ = [
    "LargestError",
    "ScanError",
    "EntryInaccessibleError",
    "DirectoryInaccessibleError",
    "MalformedMaskError",
    "ConfigurationError",
    "InvalidPathError",
    "RootInvalidError",
    "InvalidConfigError",
]
