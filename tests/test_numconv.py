import pytest

from cruntime.numconv import (
    ERANGE,
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    ULONG_MAX,
    ConversionRangeError,
    atof,
    atoi,
    atol,
    strtod,
    strtol,
    strtoul,
)


def test_strtod_cases():
    assert strtod("1.0")[0] == 1.0
    assert strtod("-2")[0] == -2
    assert strtod("-2.0")[0] == -2.0


def test_strtod_end_index():
    assert strtod("1.5abc") == (1.5, 3)
    assert strtod("+7") == (7.0, 2)


def test_strtod_skips_exponent_marker():
    assert strtod("2e5") == (2.0, 2)
    assert strtod("3.5e") == (3.5, 4)


def test_strtod_nothing_to_read():
    assert strtod("abc") == (0.0, 0)
    assert strtod(" 1") == (0.0, 0)


def test_atof():
    assert atof("12.25") == 12.25
    assert atof("-0.5xyz") == -0.5


def test_strtoul_cases():
    assert strtoul("0", 10)[0] == 0
    assert strtoul("0xFFFF", 16)[0] == 0xFFFF
    assert strtoul("0xffff", 16)[0] == 0xFFFF
    assert strtoul("0xFFFFFFFF", 16)[0] == 0xFFFFFFFF


def test_strtoul_negative_wraps():
    value, end = strtoul("-10", 10)
    assert value + 10 == ULONG_MAX + 1
    assert end == 3
    assert strtoul("-0xFF", 16)[0] + 0xFF == ULONG_MAX + 1


def test_strtoul_overflow():
    with pytest.raises(ConversionRangeError) as info:
        strtoul("0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFF", 16)
    assert info.value.value == ULONG_MAX
    assert info.value.errno == ERANGE


def test_strtoul_largest_value_fits():
    assert strtoul("0xFFFFFFFFFFFFFFFF", 16)[0] == ULONG_MAX


def test_strtoul_base_detection():
    assert strtoul("0x1f", 0) == (31, 4)
    assert strtoul("017", 0) == (15, 3)
    assert strtoul("08", 0) == (0, 1)


def test_strtoul_base_zero_without_prefix():
    with pytest.raises(ValueError):
        strtoul("12", 0)


def test_strtoul_invalid_base_reads_nothing():
    assert strtoul("123", 1) == (0, 0)
    assert strtoul("123", -2) == (0, 0)


def test_strtoul_prefix_needs_hex_digit():
    assert strtoul("0x", 16) == (0, 1)
    assert strtoul("0xg", 16) == (0, 1)


def test_strtoul_skips_whitespace_and_stops_at_garbage():
    assert strtoul("  \t42abc", 10) == (42, 5)
    assert strtoul("  -z", 10) == (0, 3)


def test_strtoul_letters_as_digits():
    assert strtoul("zz", 36)[0] == 35 * 36 + 35
    assert strtoul("102", 2) == (2, 2)


def test_strtol_signed_values():
    assert strtol("-123", 10) == (-123, 4)
    assert strtol("+77", 8) == (63, 3)


def test_strtol_limits():
    assert strtol("9223372036854775807", 10)[0] == LONG_MAX
    assert strtol("-9223372036854775808", 10)[0] == LONG_MIN


def test_strtol_overflow_clamps():
    with pytest.raises(ConversionRangeError) as high:
        strtol("9223372036854775808", 10)
    assert high.value.value == LONG_MAX
    with pytest.raises(ConversionRangeError) as low:
        strtol("-9223372036854775809", 10)
    assert low.value.value == LONG_MIN


def test_atol_clamps_instead_of_raising():
    assert atol("99999999999999999999") == LONG_MAX
    assert atol("-99999999999999999999") == LONG_MIN
    assert atol("  -15 apples") == -15


def test_atoi_reads_decimal():
    assert atoi("  42abc") == 42
    assert atoi("2147483647") == INT_MAX
    assert atoi("-2147483648") == INT_MIN


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == INT_MIN
    assert atoi("4294967297") == 1