"""Integer arithmetic helpers and a linear congruential random generator."""

from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "RAND_MAX",
    "DivResult",
    "RandomGenerator",
    "iabs",
    "labs",
    "div",
    "ldiv",
]

RAND_MAX = 32767

_MULTIPLIER = 1103515245
_INCREMENT = 12345
_STATE_MASK = 0xFFFFFFFF
_DEFAULT_SEED = 1


class DivResult(NamedTuple):
    """Quotient and remainder of a division truncated toward zero."""

    quot: int
    rem: int


def iabs(j: int) -> int:
    """Absolute value of an int."""
    return -j if j < 0 else j


def labs(j: int) -> int:
    """Absolute value of a long."""
    return -j if j < 0 else j


def _truncating_divmod(number: int, denom: int) -> DivResult:
    if denom == 0:
        raise ZeroDivisionError("integer division by zero")
    quot = abs(number) // abs(denom)
    if (number < 0) != (denom < 0):
        quot = -quot
    return DivResult(quot, number - quot * denom)


def div(number: int, denom: int) -> DivResult:
    """Divide, truncating toward zero; the remainder takes the dividend's sign."""
    return _truncating_divmod(number, denom)


def ldiv(number: int, denom: int) -> DivResult:
    """Long division with the same rounding as ``div``."""
    return _truncating_divmod(number, denom)


class RandomGenerator:
    """The classic 32-bit linear congruential generator, seeded with 1."""

    def __init__(self, seed: int = _DEFAULT_SEED) -> None:
        self._state = seed & _STATE_MASK

    def rand(self) -> int:
        """Advance the state and return a value in 0..RAND_MAX."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _STATE_MASK
        return (self._state // 65536) % (RAND_MAX + 1)

    def srand(self, seed: int) -> None:
        """Restart the sequence from ``seed`` taken as an unsigned 32-bit int."""
        self._state = seed & _STATE_MASK