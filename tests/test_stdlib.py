import pytest
from hypothesis import given
from hypothesis import strategies as st

from eposlib.stdlib import (
    LONG_MAX,
    LONG_MIN,
    RAND_MAX,
    ULONG_MAX,
    DivResult,
    ParkMillerRandom,
    atol,
    div,
    ldiv,
    rand_r,
    strtol,
    strtoul,
)

ints = st.integers(min_value=-(2**31) + 1, max_value=2**31 - 1)
nonzero = ints.filter(lambda v: v != 0)


@given(ints, nonzero)
def test_div_identity_and_truncation(numer, denom):
    result = div(numer, denom)
    assert result.quot * denom + result.rem == numer
    assert abs(result.rem) < abs(denom)
    assert result.rem == 0 or (result.rem < 0) == (numer < 0)


@given(ints, nonzero)
def test_ldiv_matches_div(numer, denom):
    assert ldiv(numer, denom) == div(numer, denom)


def test_div_truncates_towards_zero():
    assert div(-7, 2) == DivResult(-3, -1)


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        div(1, 0)


def test_first_value_from_seed_one():
    gen = ParkMillerRandom(1)
    assert gen.rand() == 16807


def test_ten_thousandth_value_from_seed_one():
    gen = ParkMillerRandom()
    for _ in range(9999):
        gen.rand()
    assert gen.rand() == 1043618065


def test_zero_seed_behaves_like_default_nonzero_seed():
    assert rand_r(0) == rand_r(123459876)


def test_generator_matches_rand_r_chain():
    gen = ParkMillerRandom(42)
    seed = 42
    for _ in range(20):
        value, seed = rand_r(seed)
        assert gen.rand() == value


def test_reseed_restarts_sequence():
    gen = ParkMillerRandom(7)
    first = [gen.rand() for _ in range(5)]
    gen.seed(7)
    assert [gen.rand() for _ in range(5)] == first


def test_strtol_limits():
    assert strtol("2147483647") == (LONG_MAX, 10)
    assert strtol("-2147483648") == (LONG_MIN, 11)


def test_strtol_overflow_saturates():
    assert strtol("99999999999")[0] == LONG_MAX
    assert strtol("-99999999999")[0] == LONG_MIN
    assert strtol("99999999999x")[1] == len("99999999999")


def test_strtol_skips_space_and_reports_end():
    text = "  -42abc"
    assert strtol(text) == (-42, len("  -42"))


def test_strtol_prefixes_with_base_zero():
    assert strtol("0x1f", 0) == (int("1f", 16), 4)
    assert strtol("0b101", 0) == (int("101", 2), 5)
    assert strtol("010", 0) == (int("10", 8), 3)


def test_strtol_hex_prefix_without_digits():
    assert strtol("0x", 16) == (0, 0)


def test_strtol_no_digits():
    assert strtol("abc") == (0, 0)
    assert strtol("") == (0, 0)


def test_strtol_letters_as_digits():
    assert strtol("Zz", 36)[0] == int("Zz", 36)


@given(ints)
def test_strtol_round_trip(value):
    text = str(value)
    assert strtol(text) == (value, len(text))


def test_strtoul_negative_wraps():
    assert strtoul("-1") == (ULONG_MAX, 2)


def test_strtoul_overflow():
    assert strtoul("4294967296")[0] == ULONG_MAX
    assert strtoul("4294967295")[0] == ULONG_MAX


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_strtoul_hex_round_trip(value):
    text = format(value, "x")
    assert strtoul(text, 16) == (value, len(text))


def test_atol():
    assert atol(" 123tail") == 123


def test_invalid_base_raises():
    with pytest.raises(ValueError):
        strtol("1", 37)
    with pytest.raises(ValueError):
        strtoul("1", -1)