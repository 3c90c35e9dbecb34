# src/hiscores/parsing.py

"""Strict parsing of numeric text fields from hiscores rows."""

import re

# The hiscores format stores ranks and scores as signed 32-bit integers.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DECIMAL_RE = re.compile(r"-?[0-9]+")


def parse_int(text: str) -> int | None:
    """Parse a whole field as a signed decimal integer.

    Unlike ``int()``, surrounding whitespace, a leading ``+``, digit
    separators and non-ASCII digits are all rejected, as are values that
    do not fit in 32 bits.

    Returns:
        The parsed integer, or None if the field is not a valid integer.
    """
    if _DECIMAL_RE.fullmatch(text) is None:
        return None

    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value
