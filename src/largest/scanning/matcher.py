"""Wildcard file name matching.

Masks know two wildcards: ``*`` (any run of characters, possibly empty) and
``?`` (exactly one character). Everything else matches literally and
case-insensitively against the whole name.
"""

import re
from functools import lru_cache
from typing import Callable

from ..exceptions import MalformedMaskError
from ..logging_config import get_logger

logger = get_logger(__name__)

MATCH_ALL = "*"


def _translate(mask: str) -> str:
    parts = []
    for ch in mask:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return "".join(parts)


def compile_mask(mask: str) -> "re.Pattern[str]":
    """Compile ``mask`` into an anchored, case-insensitive pattern.

    Raises:
        MalformedMaskError: If the translated pattern does not compile
    """
    try:
        return re.compile(_translate(mask), re.IGNORECASE | re.DOTALL)
    except re.error as e:
        raise MalformedMaskError(mask, str(e)) from e


class NameMatcher:
    """Predicate over file names, compiled once from a mask."""

    def __init__(self, mask: str):
        self.mask = mask or MATCH_ALL
        self.degraded = False
        self._predicate = self._build()

    def _build(self) -> Callable[[str], bool]:
        if self.mask == MATCH_ALL:
            return lambda name: True
        try:
            pattern = compile_mask(self.mask)
        except MalformedMaskError as e:
            logger.warning(f"{e}; falling back to substring match")
            self.degraded = True
            needle = self.mask.casefold()
            return lambda name: needle in name.casefold()
        return lambda name: pattern.fullmatch(name) is not None

    def __call__(self, name: str) -> bool:
        return self._predicate(name)

    def __repr__(self) -> str:
        return f"NameMatcher({self.mask!r})"


@lru_cache(maxsize=64)
def _cached_matcher(mask: str) -> NameMatcher:
    return NameMatcher(mask)


def matches(name: str, mask: str) -> bool:
    """Return True if ``name`` satisfies ``mask``."""
    return _cached_matcher(mask)(name)
