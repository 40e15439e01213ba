import pytest

from cruntime.arith import (
    RAND_MAX,
    DivResult,
    RandomGenerator,
    div,
    iabs,
    labs,
    ldiv,
)


@pytest.mark.parametrize("value", [-5, 0, 5, -123456, 2**40])
def test_iabs_and_labs_give_magnitude(value):
    expected = value if value >= 0 else -value
    assert iabs(value) == expected
    assert labs(value) == expected


def test_iabs_of_negative_is_positive():
    assert iabs(-42) == 42
    assert labs(-42) == 42


@pytest.mark.parametrize(
    "number, denom",
    [(7, 2), (-7, 2), (7, -2), (-7, -2), (0, 3), (6, 3), (-2**62, 7)],
)
@pytest.mark.parametrize("divide", [div, ldiv])
def test_division_invariants(divide, number, denom):
    result = divide(number, denom)
    assert result.quot * denom + result.rem == number
    assert abs(result.rem) < abs(denom)
    assert result.rem == 0 or (result.rem < 0) == (number < 0)


def test_division_truncates_toward_zero():
    assert div(-7, 2) == DivResult(-3, -1)
    assert ldiv(-7, 2) == DivResult(-3, -1)


def test_division_result_unpacks():
    quot, rem = div(9, 3)
    assert (quot, rem) == (3, 0)


@pytest.mark.parametrize("divide", [div, ldiv])
def test_division_by_zero(divide):
    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


def test_first_value_from_default_seed():
    assert RandomGenerator().rand() == 16838


def test_default_seed_matches_srand_one():
    fresh = RandomGenerator()
    seeded = RandomGenerator(99)
    seeded.srand(1)
    assert [fresh.rand() for _ in range(20)] == [seeded.rand() for _ in range(20)]


def test_values_stay_in_range():
    gen = RandomGenerator(12345)
    assert all(0 <= gen.rand() <= RAND_MAX for _ in range(2000))


def test_srand_restarts_sequence():
    gen = RandomGenerator()
    gen.srand(7)
    first = [gen.rand() for _ in range(10)]
    gen.srand(7)
    assert [gen.rand() for _ in range(10)] == first


def test_seed_is_taken_as_unsigned_32_bit():
    wrapped = RandomGenerator(2**32 + 5)
    plain = RandomGenerator(5)
    assert [wrapped.rand() for _ in range(10)] == [plain.rand() for _ in range(10)]