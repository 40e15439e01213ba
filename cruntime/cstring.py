"""Byte-string and memory-block routines over NUL-terminated buffers.

Strings are bytes-like objects; a NUL byte, or the end of the object,
ends a string.  Destinations are mutable buffers such as ``bytearray``
and are changed in place.  Byte values compare as signed characters.
A write or read that would run past a buffer raises ``ValueError``.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Union

__all__ = [
    "strlen",
    "strcmp",
    "strncmp",
    "strcpy",
    "strncpy",
    "strcat",
    "strncat",
    "strchr",
    "strrchr",
    "strspn",
    "strcspn",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
]

BytesLike = Union[bytes, bytearray, memoryview]


def _signed(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


def _cstr(s: BytesLike) -> bytes:
    """The string held in ``s``, without its terminator."""
    return bytes(s).split(b"\0", 1)[0]


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")


def _store(dest: bytearray, offset: int, data: bytes) -> None:
    end = offset + len(data)
    if end > len(dest):
        raise ValueError(
            f"destination holds {len(dest)} bytes, {end} needed"
        )
    dest[offset:end] = data


def _first_difference(a: bytes, b: bytes) -> int:
    return next(
        (_signed(x) - _signed(y) for x, y in zip(a, b) if x != y), 0
    )


def strlen(s: BytesLike) -> int:
    """Number of bytes before the terminator."""
    return len(_cstr(s))


def strcmp(s1: BytesLike, s2: BytesLike) -> int:
    """Difference of the first differing bytes, terminators included."""
    return _first_difference(_cstr(s1) + b"\0", _cstr(s2) + b"\0")


def strncmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Compare exactly ``n`` bytes, reading past terminators as zeros."""
    _check_size(n)
    a = bytes(s1)[:n].ljust(n, b"\0")
    b = bytes(s2)[:n].ljust(n, b"\0")
    return _first_difference(a, b)


def strcpy(dest: bytearray, src: BytesLike) -> bytearray:
    """Copy ``src`` and its terminator to the start of ``dest``."""
    _store(dest, 0, _cstr(src) + b"\0")
    return dest


def strncpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy at most ``n`` bytes of ``src``, stopping after its terminator."""
    _check_size(n)
    _store(dest, 0, (_cstr(src) + b"\0")[:n])
    return dest


def strncat(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Append at most ``n`` bytes of ``src`` at the end of the string in ``dest``.

    No terminator is written after the appended bytes.
    """
    _check_size(n)
    _store(dest, strlen(dest), _cstr(src)[:n])
    return dest


def strcat(dest: bytearray, src: BytesLike) -> bytearray:
    """Append all of ``src`` at the end of the string in ``dest``."""
    return strncat(dest, src, strlen(src))


def _search_byte(c: int) -> int | None:
    # Bytes compare as signed chars, so codes above 127 never match,
    # and the terminator itself is never found.
    if c == 0 or not -128 <= c <= 127:
        return None
    return c & 0xFF


def strchr(s: BytesLike, c: int) -> bytes | None:
    """The rest of ``s`` from the first occurrence of ``c``, or None."""
    target = _search_byte(c)
    if target is None:
        return None
    text = _cstr(s)
    pos = text.find(target)
    return None if pos < 0 else text[pos:]


def strrchr(s: BytesLike, c: int) -> bytes | None:
    """The rest of ``s`` from the last occurrence of ``c``, or None."""
    target = _search_byte(c)
    if target is None:
        return None
    text = _cstr(s)
    pos = text.rfind(target)
    return None if pos < 0 else text[pos:]


def strspn(s1: BytesLike, s2: BytesLike) -> int:
    """Length of the prefix that ``s1`` and ``s2`` have in common."""
    pairs = zip(_cstr(s1), _cstr(s2))
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], pairs))


def strcspn(s1: BytesLike, s2: BytesLike) -> int:
    """Index of the first byte of ``s1`` found in ``s2``, else ``strlen(s1)``."""
    text = _cstr(s1)
    rejects = set(_cstr(s2))
    return next(
        (i for i, byte in enumerate(text) if byte in rejects), len(text)
    )


def _check_span(n: int, *buffers: BytesLike) -> None:
    _check_size(n)
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"buffer holds {len(buf)} bytes, {n} requested")


def memcmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``."""
    _check_span(n, s1, s2)
    return _first_difference(bytes(s1[:n]), bytes(s2[:n]))


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_span(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to ``dest``; overlapping views are safe."""
    return memcpy(dest, src, n)


def memset(dest: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``dest`` with the low byte of ``c``."""
    _check_span(n, dest)
    dest[:n] = bytes([c & 0xFF]) * n
    return dest