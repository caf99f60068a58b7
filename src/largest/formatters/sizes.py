"""Human-readable byte counts in decimal (1000-based) units."""

SIZE_SUFFIXES = ("KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

# Width of the numeric part in listings, so units line up in a column
SIZE_COLUMN_WIDTH = 3


def format_size(size: int, width: int = 0) -> str:
    """Format ``size`` bytes, truncating rather than rounding.

    >>> format_size(999)
    '999 bytes'
    >>> format_size(999999)
    '999 KB'
    >>> format_size(2000, width=3)
    '  2 KB'
    """
    if size < 1000:
        return f"{size:>{width}} bytes"

    value = size
    index = -1
    while value >= 1000 and index < len(SIZE_SUFFIXES) - 1:
        value //= 1000
        index += 1

    return f"{value:>{width}} {SIZE_SUFFIXES[index]}"
