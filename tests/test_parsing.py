import math
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from idr_numeral import FixedPoint, ParseOptions, format_idr, parse_idr

LARGE = "9.223.372.036.854.775.807,99"


def test_parses_indonesian_formatted_strings():
    assert parse_idr("1.000") == 1000
    assert parse_idr("1.050") == 1050
    assert parse_idr("1.050,32") == 1050.32
    assert parse_idr("1.234.567,89") == 1234567.89


def test_ignores_non_formatting_characters():
    assert parse_idr("Rp 1.234,56") == 1234.56
    assert parse_idr("  10.000  ") == 10000


def test_keeps_minus_sign():
    assert parse_idr("-1.050,5") == -1050.5
    assert parse_idr("-Rp 25.000") == -25000


@pytest.mark.parametrize("value", ["", None, "abc", ",,,", "-", ".", "-abc", "Rp"])
def test_returns_none_for_invalid_input(value):
    assert parse_idr(value) is None
    assert parse_idr(value, mode="exact") is None


def test_only_first_comma_marks_decimals():
    assert parse_idr("1,2,3") == 1.23


def test_decimal_part_without_integer_part():
    assert parse_idr(",5") == 0.5
    assert parse_idr("5,") == 5


def test_dots_in_text_are_always_thousands():
    assert parse_idr("12.34") == 1234


def test_numbers_keep_their_decimal_point():
    assert parse_idr(1050.5) == 1050.5
    assert parse_idr(1000) == 1000
    assert parse_idr(-0.25) == -0.25
    assert parse_idr(float("nan")) is None
    assert parse_idr(Decimal("12.50"), mode="exact") == FixedPoint(sign=1, unscaled=1250, scale=2)


def test_exact_mode_keeps_every_digit():
    fixed = parse_idr(LARGE, mode="exact")

    assert isinstance(fixed, FixedPoint)
    assert fixed.sign == 1
    assert fixed.unscaled == 922337203685477580799
    assert fixed.scale == 2
    assert fixed.to_canonical_string() == "9223372036854775807.99"


def test_approximate_mode_loses_precision_but_stays_finite():
    approx = parse_idr(LARGE)

    assert isinstance(approx, float)
    assert math.isfinite(approx)
    assert approx == pytest.approx(9.223372036854776e18)


def test_exact_mode_keeps_trailing_zeros_and_sign():
    assert parse_idr("000,50", ParseOptions(mode="exact")) == FixedPoint(sign=1, unscaled=50, scale=2)
    assert parse_idr("-1.050,50", mode="exact") == FixedPoint(sign=-1, unscaled=105050, scale=2)
    assert parse_idr("5,", mode="exact") == FixedPoint(sign=1, unscaled=5, scale=0)


def test_exact_mode_has_no_magnitude_limit():
    digits = "1" + "0" * 400
    fixed = parse_idr(digits + ",25", mode="exact")

    assert fixed.to_canonical_string() == digits + ".25"


def test_non_finite_approximation_returns_none():
    with capture_logs() as logs:
        assert parse_idr("1" + "0" * 400) is None

    assert logs[0]["event"] == "parse_non_finite"
    assert logs[0]["log_level"] == "warning"


def test_invalid_mode_raises():
    with pytest.raises(ValueError):
        ParseOptions(mode="fixed")
    with pytest.raises(ValueError):
        parse_idr("1", mode="number")
    with pytest.raises(TypeError):
        parse_idr("1", strict=True)


@pytest.mark.parametrize("text", ["0", "12", "1000", "1050", "1234567", "1050,32", "1.234,5", "-1.050,5"])
def test_round_trip_with_format(text):
    formatted = format_idr(text)
    parsed = parse_idr(formatted)

    assert parsed == parse_idr(text)
    assert parse_idr(format_idr(parsed)) == parsed


@pytest.mark.parametrize("value", [0.0, 1.5, 1.234, 1050.32, -1050.5, 123456789.125, 1e-7, 1e15])
def test_float_round_trip(value):
    assert parse_idr(format_idr(value)) == value


@pytest.mark.parametrize("text", ["1,500", "-1.050,50", "0,000", LARGE, "000123", "12,", "1,2,3", "-0"])
def test_exact_round_trip(text):
    first = parse_idr(text, mode="exact")
    second = parse_idr(format_idr(first), mode="exact")

    assert (second.sign, second.scale, second.unscaled) == (first.sign, first.scale, first.unscaled)


def test_exact_mode_beyond_int_string_limit():
    fixed = parse_idr("1" * 5000 + ",5", mode="exact")

    assert fixed.scale == 1
    assert fixed.to_canonical_string() == "1" * 5000 + ".5"
    assert parse_idr(format_idr(fixed), mode="exact") == fixed


def test_large_integral_float_round_trip():
    assert parse_idr(format_idr(1e23)) == 1e23
