"""Elevation extraction from annotation text.

Elevation labels usually end with the value, often followed by markup:
``"FG=23.5"``, ``"23,5\\PFG"``. The parser scans from the end of the string
toward its start and keeps the last embedded number. Both ``,`` and ``.`` are
accepted as decimal separator; only the rightmost one is honoured.
"""

from typing import Any

from .core.types import INVALID_ELEVATION

DIGITS = frozenset('0123456789')
DECIMAL_SEPARATORS = frozenset(',.')


def parse_elevation(text: Any) -> float:
    """Extract the trailing decimal number embedded in ``text``.

    The scan skips trailing non-digit characters, then collects digits and at
    most one decimal separator while moving backward. A second separator or
    any other character ends the token. Signs are not recognised.

    Args:
        text: Annotation text

    Returns:
        Parsed value, or ``INVALID_ELEVATION`` (-100) when no digit is found

    Examples:
        >>> parse_elevation("FG=23.5")
        23.5
        >>> parse_elevation("23,5\\\\PFG")
        23.5
        >>> parse_elevation("1.2.3")
        2.3
        >>> parse_elevation("no value")
        -100.0
    """
    if not isinstance(text, str) or not text:
        return INVALID_ELEVATION

    index = len(text) - 1
    while index >= 0 and text[index] not in DIGITS:
        index -= 1
    if index < 0:
        return INVALID_ELEVATION

    token = []
    separator_seen = False
    while index >= 0:
        char = text[index]
        if char in DIGITS:
            token.append(char)
        elif char in DECIMAL_SEPARATORS and not separator_seen:
            token.append('.')
            separator_seen = True
        else:
            break
        index -= 1

    digits = ''.join(reversed(token))
    if not any(c in DIGITS for c in digits):
        return INVALID_ELEVATION
    return float(digits)


def is_valid_elevation(value: float) -> bool:
    """Return False for the invalid elevation sentinel."""
    return value != INVALID_ELEVATION


def format_number(value: float, precision: int = 4) -> str:
    """Format ``value`` as fixed-point decimal, never in scientific notation.

    Examples:
        >>> format_number(1e-7, 4)
        '0.0000'
        >>> format_number(12.5, 6)
        '12.500000'
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    return f"{float(value):.{precision}f}"


__all__ = [
    'parse_elevation',
    'is_valid_elevation',
    'format_number',
]
