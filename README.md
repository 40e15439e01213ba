# cruntime

A small C standard library written as a Python library. It has ASCII
character classification, NUL-terminated string and memory routines over
bytes-like buffers, a Newton-iteration square root, `strtod`/`strtoul`-style
number parsing with the C integer limits, integer arithmetic helpers with a
linear congruential generator, and a `Runtime` object that holds signal
handlers, exit functions and an environment.

The library has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `cruntime.ctype`

`isalnum`, `isalpha`, `iscntrl`, `isdigit`, `isgraph`, `islower`, `isprint`,
`ispunct`, `isspace`, `isupper`, `isxdigit`, `tolower`, `toupper`.

Each takes a character code (`int`) or a one-character string; any other
string raises `ValueError`. Only ASCII ranges are recognised. The `is*`
functions return `bool`. `tolower` and `toupper` return the same kind they
were given: a code for a code, a one-character string for a string.
`iscntrl` is true for DEL and for every code below space, and `isprint` is
true for visible characters and for whitespace.

### `cruntime.cstring`

`strlen`, `strcmp`, `strncmp`, `strcpy`, `strncpy`, `strcat`, `strncat`,
`strchr`, `strrchr`, `strspn`, `strcspn`, `memcmp`, `memcpy`, `memmove`,
`memset`.

Strings are `bytes`, `bytearray` or `memoryview`; a NUL byte or the end of
the object ends a string. Destinations are mutable buffers such as
`bytearray`, changed in place and returned. A write or read that would run
past a buffer, or a negative size, raises `ValueError`. Comparisons treat
bytes as signed characters and return the difference of the first
differing bytes.

Points where these routines behave in their own way:

- `strncat` and `strcat` do not write a terminator after the appended bytes,
  so the destination should already be zero-filled.
- `strchr` and `strrchr` return the rest of the string from the match as
  `bytes`, or `None`; searching for 0 or for a code above 127 finds nothing.
- `strspn(s1, s2)` is the length of the prefix `s1` and `s2` have in common.
- `strcspn(s1, s2)` is the index of the first byte of `s1` that occurs in
  `s2`, or `strlen(s1)`.

### `cruntime.mathfn`

`sqrt(x)` runs ten Newton steps starting from 1, so it is accurate only for
moderate arguments. A negative argument raises `DomainError` (a
`ValueError` whose `errno` attribute is `EDOM`).

### `cruntime.numconv`

`strtod`, `atof`, `strtoul`, `strtol`, `atol`, `atoi`, the error numbers
`EDOM` and `ERANGE`, and the integer limits (`CHAR_BIT`, `INT_MAX`,
`LONG_MAX`, `ULONG_MAX` and the rest, for 64-bit longs).

- `strtod(text)` returns `(value, end_index)`. It skips no leading
  whitespace and does not apply exponents: an `e` right after the number is
  consumed and ignored. `atof` returns just the value.
- `strtoul(text, base)` and `strtol(text, base)` return `(value, end_index)`.
  They skip leading whitespace, accept a sign, and recognise `0x`/`0X` for
  base 0 or 16 and a leading `0` for base 0 or 8. Base 0 with neither prefix
  raises `ValueError`; a base below 0 or equal to 1 reads nothing and
  returns `(0, 0)`. `strtoul` negates a leading minus modulo 2**64.
- When the digits do not fit, `ConversionRangeError` (an `OverflowError`
  whose `errno` is `ERANGE`) is raised; its `value` attribute holds the
  clamped result.
- `atol` parses a decimal long and returns the clamped value on overflow;
  `atoi` wraps that result to a 32-bit int.

### `cruntime.arith`

`iabs`, `labs`, `div`, `ldiv` and `RAND_MAX`. `div` and `ldiv` truncate
toward zero and return a `DivResult(quot, rem)` named tuple; division by
zero raises `ZeroDivisionError`. `RandomGenerator(seed=1)` is the classic
32-bit linear congruential generator: `rand()` returns a value in
`0..RAND_MAX`, and `srand(seed)` restarts the sequence.

### `cruntime.runtime`

`Runtime(environ=None)` takes a mapping or an iterable of `NAME=value`
strings; by default it uses the current process environment.

- `signal(sig, handler)` installs a handler for signal numbers 0 to 6 and
  returns the previous one. A handler is a callable taking the signal number
  or a `Disposition` (`IGNORE`, `DEFAULT`). Other numbers raise
  `ValueError`.
- `raise_signal(sig)` calls the installed handler; both dispositions do
  nothing.
- `atexit(func)` registers up to `ATEXIT_MAX` (32) exit functions; one more
  raises `RuntimeError`.
- `exit(status)` runs the exit functions in registration order and then
  raises `SystemExit` carrying the status.
- `abort()` raises `Signal.SIGABRT`; if the handler returns, it raises
  `AbortTrap`.
- `getenv(name)` returns the value of the first entry whose name is a
  prefix of `name`, or `None`.
- `run(main, argv)` resets handlers and exit functions, calls
  `main(runtime, argv)`, passes its return value (`None` counts as 0) to
  `exit`, and returns the exit status.

`Signal` lists `SIGABRT`, `SIGFPE`, `SIGILL`, `SIGINT`, `SIGSEGV` and
`SIGTERM`; `EXIT_SUCCESS` and `EXIT_FAILURE` are also defined.

## Example

```python
from cruntime.ctype import isalpha
from cruntime.cstring import strcat, strcmp
from cruntime.numconv import strtoul
from cruntime.runtime import Runtime, Signal

assert strcmp(b"hello", b"hello") == 0
assert isalpha("A") and not isalpha("1")
assert strtoul("0xFFFF", 16) == (0xFFFF, 6)

buffer = bytearray(50)
strcat(buffer, b"hello")
strcat(buffer, b"world")
assert strcmp(buffer, b"helloworld") == 0


def main(rt, argv):
    rt.signal(Signal.SIGABRT, lambda sig: rt.exit(0))
    rt.abort()
    return 1


assert Runtime(environ={}).run(main, ["prog"]) == 0
```

## What it does not do

The package is a library only; it has no command. `Runtime.exit` ends a
`Runtime.run` call by raising `SystemExit`, not by stopping the Python
process, and raising a signal never reaches the operating system. There are
no stdio or file functions, no memory allocation, and of the math functions
only `sqrt` is provided.