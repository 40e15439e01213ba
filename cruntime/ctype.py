"""ASCII character classification and case mapping.

Each function takes either a character code (an ``int``) or a
one-character string.  Only the ASCII ranges are recognised.
"""

from __future__ import annotations

__all__ = [
    "isalnum",
    "isalpha",
    "iscntrl",
    "isdigit",
    "isgraph",
    "islower",
    "isprint",
    "ispunct",
    "isspace",
    "isupper",
    "isxdigit",
    "tolower",
    "toupper",
]

_SPACES = frozenset(map(ord, " \f\n\r\t\v"))


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and decimal digits."""
    return isalpha(c) or isdigit(c)


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    return isupper(c) or islower(c)


def iscntrl(c: int | str) -> bool:
    """True for DEL and for every code below space, negative ones included."""
    code = _code(c)
    return code == 0x7F or code < 0x20


def isdigit(c: int | str) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isgraph(c: int | str) -> bool:
    """True for visible ASCII characters, '!' through '~'."""
    return ord("!") <= _code(c) <= ord("~")


def islower(c: int | str) -> bool:
    """True for ASCII lower-case letters."""
    return ord("a") <= _code(c) <= ord("z")


def isprint(c: int | str) -> bool:
    """True for visible characters and for every whitespace character."""
    return isspace(c) or isgraph(c)


def ispunct(c: int | str) -> bool:
    """True for any code above space that is not a letter or digit."""
    return _code(c) > 0x20 and not isalnum(c)


def isspace(c: int | str) -> bool:
    """True for space, form feed, newline, carriage return and both tabs."""
    return _code(c) in _SPACES


def isupper(c: int | str) -> bool:
    """True for ASCII upper-case letters."""
    return ord("A") <= _code(c) <= ord("Z")


def isxdigit(c: int | str) -> bool:
    """True for hexadecimal digits in either case."""
    code = _code(c)
    return (
        isdigit(code)
        or ord("A") <= code <= ord("F")
        or ord("a") <= code <= ord("f")
    )


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def tolower(c: int | str) -> int | str:
    """Map an upper-case letter to lower case; anything else is returned as is."""
    code = _code(c)
    if isupper(code):
        code += ord("a") - ord("A")
    return _same_kind(c, code)


def toupper(c: int | str) -> int | str:
    """Map a lower-case letter to upper case; anything else is returned as is."""
    code = _code(c)
    if islower(code):
        code -= ord("a") - ord("A")
    return _same_kind(c, code)