"""Process start-up, exit handlers, signals and the environment."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum, IntEnum
from typing import Union

__all__ = [
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "ATEXIT_MAX",
    "Signal",
    "Disposition",
    "AbortTrap",
    "Runtime",
]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
ATEXIT_MAX = 32

_SIGNAL_SLOTS = 7


class Signal(IntEnum):
    """Signal numbers."""

    SIGABRT = 0
    SIGFPE = 1
    SIGILL = 2
    SIGINT = 3
    SIGSEGV = 4
    SIGTERM = 5


class Disposition(Enum):
    """Built-in ways of handling a signal."""

    IGNORE = 0
    DEFAULT = 1


Handler = Union[Disposition, Callable[[int], object]]


class AbortTrap(RuntimeError):
    """``abort`` went on after SIGABRT was handled and the program trapped."""


class _ProcessExit(SystemExit):
    """Raised by ``Runtime.exit``; ``Runtime.run`` turns it into a status."""


def _signal_number(sig: int) -> int:
    if not 0 <= sig < _SIGNAL_SLOTS:
        raise ValueError(f"invalid signal number {sig}")
    return int(sig)


def _as_signal(number: int) -> int:
    try:
        return Signal(number)
    except ValueError:
        return number


class Runtime:
    """The state a running program sees: handlers, exit functions, environment.

    ``environ`` is a mapping or an iterable of ``NAME=value`` strings; by
    default the current process environment is used.
    """

    def __init__(
        self, environ: Mapping[str, str] | Iterable[str] | None = None
    ) -> None:
        if environ is None:
            environ = os.environ
        if isinstance(environ, Mapping):
            self._environ = [f"{key}={value}" for key, value in environ.items()]
        else:
            self._environ = list(environ)
        self._reset()

    def _reset(self) -> None:
        self._handlers: list[Handler] = [Disposition.DEFAULT] * _SIGNAL_SLOTS
        self._atexit: list[Callable[[], object]] = []

    def signal(self, sig: int, handler: Handler) -> Handler:
        """Install ``handler`` for ``sig`` and return the previous one.

        Raises ValueError for a signal number outside 0-6.
        """
        number = _signal_number(sig)
        if not isinstance(handler, Disposition) and not callable(handler):
            raise TypeError(f"handler must be a Disposition or callable, got {handler!r}")
        previous = self._handlers[number]
        self._handlers[number] = handler
        return previous

    def raise_signal(self, sig: int) -> None:
        """Deliver ``sig`` to its handler; the built-in dispositions do nothing."""
        number = _signal_number(sig)
        handler = self._handlers[number]
        if isinstance(handler, Disposition):
            return
        handler(_as_signal(number))

    def atexit(self, func: Callable[[], object]) -> None:
        """Register ``func`` to run at exit; at most ATEXIT_MAX may be held."""
        if not callable(func):
            raise TypeError(f"exit function must be callable, got {func!r}")
        if len(self._atexit) >= ATEXIT_MAX:
            raise RuntimeError(f"no more than {ATEXIT_MAX} exit functions may be registered")
        self._atexit.append(func)

    def exit(self, status: int) -> None:
        """Run the exit functions in registration order, then end the program.

        Ends by raising SystemExit carrying ``status``.
        """
        for func in list(self._atexit):
            func()
        raise _ProcessExit(status)

    def abort(self) -> None:
        """Raise SIGABRT; if its handler returns, trap with AbortTrap."""
        self.raise_signal(Signal.SIGABRT)
        raise AbortTrap("abnormal program termination")

    def getenv(self, name: str) -> str | None:
        """Value of the first environment entry whose name starts ``name``.

        An entry matches when its name is a prefix of ``name``, so a longer
        name can find a shorter entry.  Entries without ``=`` never match.
        """
        for entry in self._environ:
            entry_name, sep, value = entry.partition("=")
            if sep and name.startswith(entry_name):
                return value
        return None

    def run(
        self, main: Callable[["Runtime", list[str]], int | None], argv: Sequence[str]
    ) -> int:
        """Start ``main(runtime, argv)`` afresh and return its exit status.

        Signal handlers are reset to their defaults and exit functions are
        cleared first.  What ``main`` returns is passed to ``exit``; None
        counts as 0.
        """
        self._reset()
        try:
            status = main(self, list(argv))
            self.exit(EXIT_SUCCESS if status is None else status)
        except _ProcessExit as done:
            return done.code
        raise AssertionError("exit returned")