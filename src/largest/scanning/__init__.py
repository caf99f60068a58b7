"""Tree walking, name matching and top-K selection."""

from .fs import Entry, FileSystem, validate_root
from .matcher import NameMatcher, compile_mask, matches
from .selector import TopKSelector
from .walker import DirectoryWalker, walk

__all__ = [
    "Entry",
    "FileSystem",
    "validate_root",
    "NameMatcher",
    "compile_mask",
    "matches",
    "TopKSelector",
    "DirectoryWalker",
    "walk",
]
