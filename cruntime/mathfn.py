"""Floating-point helpers."""

from __future__ import annotations

from .numconv import EDOM

__all__ = ["DomainError", "sqrt"]

_NEWTON_STEPS = 10


class DomainError(ValueError):
    """An argument lies outside the domain of a math function."""

    errno = EDOM


def sqrt(x: float) -> float:
    """Square root by ten Newton steps starting from 1.

    Raises DomainError for negative arguments.
    """
    if x < 0:
        raise DomainError(f"square root of negative number {x!r}")
    z = 1.0
    for _ in range(_NEWTON_STEPS):
        z -= (z * z - x) / (2 * z)
    return z