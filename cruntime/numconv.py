"""Conversions from text to numbers, with the C integer limits they use."""

from __future__ import annotations

import re
from functools import reduce
from itertools import takewhile

from .ctype import isdigit, islower, isupper, isxdigit

__all__ = [
    "EDOM",
    "ERANGE",
    "CHAR_BIT",
    "SCHAR_MIN",
    "SCHAR_MAX",
    "UCHAR_MAX",
    "CHAR_MIN",
    "CHAR_MAX",
    "MB_LEN_MAX",
    "SHRT_MIN",
    "SHRT_MAX",
    "USHRT_MAX",
    "INT_MIN",
    "INT_MAX",
    "UINT_MAX",
    "LONG_MIN",
    "LONG_MAX",
    "ULONG_MAX",
    "ConversionRangeError",
    "strtod",
    "atof",
    "strtoul",
    "strtol",
    "atol",
    "atoi",
]

EDOM = 1
ERANGE = 2

CHAR_BIT = 8
SCHAR_MAX = 127
SCHAR_MIN = -128
UCHAR_MAX = 0xFF
CHAR_MAX = SCHAR_MAX
CHAR_MIN = SCHAR_MIN
MB_LEN_MAX = 0
SHRT_MAX = 0x7FFF
SHRT_MIN = -1 - 0x7FFF
USHRT_MAX = 0xFFFF
INT_MAX = 0x7FFFFFFF
INT_MIN = -1 - 0x7FFFFFFF
UINT_MAX = 0xFFFFFFFF
LONG_MAX = 0x7FFFFFFFFFFFFFFF
LONG_MIN = -LONG_MAX - 1
ULONG_MAX = 2 * LONG_MAX + 1


class ConversionRangeError(OverflowError):
    """The number in the text does not fit; ``value`` is the clamped result."""

    errno = ERANGE

    def __init__(self, value: int) -> None:
        super().__init__(f"value out of range, clamped to {value}")
        self.value = value


_DECIMAL = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?e?")
_LEADING = re.compile(r"[ \t\n\v\f\r]*([+-]?)")


def strtod(text: str) -> tuple[float, int]:
    """Parse a decimal number at the start of ``text``.

    Returns the value and the index just past what was read.  No leading
    whitespace is skipped and exponents are not applied: an ``e`` right
    after the number is consumed and otherwise ignored.
    """
    match = _DECIMAL.match(text)
    sign, whole, fraction = match.group(1, 2, 3)
    result = 0.0
    for ch in whole:
        result = result * 10 + int(ch)
    scale = 10.0
    for ch in fraction or "":
        result += int(ch) / scale
        scale *= 10
    if sign == "-":
        result = -result
    return result, match.end()


def atof(text: str) -> float:
    """The value ``strtod`` reads from ``text``."""
    return strtod(text)[0]


def _digit_value(ch: str) -> int | None:
    if isdigit(ch):
        return ord(ch) - ord("0")
    if isupper(ch):
        return ord(ch) - ord("A") + 10
    if islower(ch):
        return ord(ch) - ord("a") + 10
    return None


def _parse_integer(text: str, base: int) -> tuple[bool, int, int]:
    """Read sign, magnitude and end index of an integer in ``text``."""
    if base < 0 or base == 1:
        return False, 0, 0

    lead = _LEADING.match(text)
    negative = lead.group(1) == "-"
    start = lead.end()
    rest = text[start:]

    octal = rest.startswith("0")
    hexadecimal = octal and rest[1:2] in ("x", "X")
    if base in (0, 16) and hexadecimal and len(rest) > 2 and isxdigit(rest[2]):
        start += 2
        base = 16
    elif base in (0, 8) and octal:
        base = 8
    elif base == 0:
        raise ValueError("base 0 needs a '0' or '0x' prefix to choose a base")

    digits = list(
        takewhile(
            lambda value: value is not None and value < base,
            map(_digit_value, text[start:]),
        )
    )
    magnitude = reduce(lambda acc, digit: acc * base + digit, digits, 0)
    return negative, magnitude, start + len(digits)


def strtoul(text: str, base: int) -> tuple[int, int]:
    """Parse an unsigned long in ``base`` (0 or 2-36) at the start of ``text``.

    Returns the value and the index just past the digits read.  A leading
    minus negates modulo 2**64.  Raises ConversionRangeError when the
    digits exceed ULONG_MAX.  A base below 0 or equal to 1 reads nothing.
    """
    negative, magnitude, end = _parse_integer(text, base)
    if magnitude > ULONG_MAX:
        raise ConversionRangeError(0 if negative else ULONG_MAX)
    value = -magnitude if negative else magnitude
    return value % (ULONG_MAX + 1), end


def strtol(text: str, base: int) -> tuple[int, int]:
    """Parse a signed long in ``base`` at the start of ``text``.

    Returns the value and the index just past the digits read.  Raises
    ConversionRangeError, clamped to LONG_MIN or LONG_MAX, on overflow.
    """
    negative, magnitude, end = _parse_integer(text, base)
    limit = -LONG_MIN if negative else LONG_MAX
    if magnitude > limit:
        raise ConversionRangeError(LONG_MIN if negative else LONG_MAX)
    return (-magnitude if negative else magnitude), end


def atol(text: str) -> int:
    """Decimal long at the start of ``text``, clamped on overflow."""
    try:
        return strtol(text, 10)[0]
    except ConversionRangeError as err:
        return err.value


def atoi(text: str) -> int:
    """Like ``atol``, with the result wrapped to a 32-bit int."""
    return (atol(text) - INT_MIN) % (UINT_MAX + 1) + INT_MIN