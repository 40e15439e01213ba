"""A small C runtime: ctype, string and memory routines, sqrt, number parsing, arithmetic, signals and exit handling."""

__version__ = "0.1.0"
__all__ = ["arith", "cstring", "ctype", "mathfn", "numconv", "runtime"]