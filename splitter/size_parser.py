"""Parses human-readable chunk size expressions ("512KB", "1.5GB") into byte counts."""

import re
from fractions import Fraction

from common.constants import SIZE_UNIT_SCALES
from common.exceptions import InvalidFormat

SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*(B|KB|MB|GB)?$")


def parse_size(text: str) -> int:
    """
    Convert a size expression into an exact byte count.

    The expression is a non-negative number, optionally decimal, followed by
    an optional unit: B, KB, MB or GB (powers of 1024, case-insensitive).
    Fractional byte counts are truncated toward zero, never rounded.

    Args:
        text: Size expression, e.g. "1MB", "1.5 gb", "1000000"

    Returns:
        Number of bytes

    Raises:
        InvalidFormat: If the expression does not match <number>[unit]
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"Invalid size format: {text!r}")

    match = SIZE_PATTERN.match(text.strip().upper())
    if match is None:
        raise InvalidFormat(
            f"Invalid size format: '{text}' (expected <number>[B|KB|MB|GB], e.g. 512KB)"
        )

    number, unit = match.groups()
    scale = SIZE_UNIT_SCALES[unit or ""]
    return int(Fraction(number) * scale)
