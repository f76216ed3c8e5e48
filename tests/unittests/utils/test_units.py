from decimal import Decimal

import pytest

from vault_relay.exceptions import AmountTooPrecise, InvalidAmount
from vault_relay.utils.units import UINT256_MAX, from_fixed_point, to_decimal, to_fixed_point


class TestToFixedPoint:
    @pytest.mark.parametrize(
        "value, expected",
        argvalues=[
            ("100", 100_000_000),
            ("10", 10_000_000),
            ("0.000001", 1),
            ("1.5", 1_500_000),
            ("  2.25 ", 2_250_000),
            (20, 20_000_000),
            (0.1, 100_000),
            (Decimal("3.141592"), 3_141_592),
            ("1e3", 1_000_000_000),
        ],
    )
    def test_scales_value_by_six_decimals(self, value, expected):
        assert to_fixed_point(value) == expected

    def test_uses_given_decimals(self):
        assert to_fixed_point("1.5", decimals=18) == 1_500_000_000_000_000_000

    def test_does_not_check_the_sign(self):
        assert to_fixed_point("-1") == -1_000_000
        assert to_fixed_point("0") == 0

    @pytest.mark.parametrize("value", ["1.0000001", "0.0000005", 1e-7])
    def test_raises_if_value_has_more_than_six_fractional_digits(self, value):
        with pytest.raises(AmountTooPrecise):
            to_fixed_point(value)

    def test_trailing_zeros_do_not_count_as_fractional_digits(self):
        assert to_fixed_point("1.50000000") == 1_500_000

    def test_scaling_is_exact_for_many_significant_digits(self):
        assert (
            to_fixed_point("12345678901234567890123456789.1")
            == 12345678901234567890123456789100000
        )
        assert to_fixed_point("9" * 40 + ".999999") == int("9" * 46)

    def test_largest_uint256_is_accepted(self):
        assert to_fixed_point(UINT256_MAX, decimals=0) == UINT256_MAX

    @pytest.mark.parametrize("value", ["1e1000000", "1e72", str(UINT256_MAX)])
    def test_raises_if_scaled_value_does_not_fit_uint256(self, value):
        with pytest.raises(InvalidAmount):
            to_fixed_point(value)

    def test_tiny_exponent_is_too_precise(self):
        with pytest.raises(AmountTooPrecise):
            to_fixed_point("1e-1000000")

    def test_zero_with_any_exponent_is_zero(self):
        assert to_fixed_point("0e-1000000") == 0
        assert to_fixed_point("0.000000000") == 0

    @pytest.mark.parametrize("value", ["1_000", "1_000.5", "_1"])
    def test_raises_for_digit_group_separators(self, value):
        with pytest.raises(InvalidAmount):
            to_fixed_point(value)

    @pytest.mark.parametrize(
        "value", ["abc", "", "1,5", "NaN", "Infinity", "-inf", None, True, [], {"a": 1}]
    )
    def test_raises_for_values_which_are_not_finite_numbers(self, value):
        with pytest.raises(InvalidAmount):
            to_fixed_point(value)


class TestFromFixedPoint:
    @pytest.mark.parametrize(
        "value, expected",
        argvalues=[
            (1_000_000, "1.0"),
            (1_500_000, "1.5"),
            (0, "0.0"),
            (1, "0.000001"),
            (123_456_789, "123.456789"),
            (10_000_000_000_000, "10000000.0"),
            (-2_500_000, "-2.5"),
        ],
    )
    def test_renders_decimal_string(self, value, expected):
        assert from_fixed_point(value) == expected

    def test_never_has_more_than_six_fractional_digits(self):
        _, fraction = from_fixed_point(987_654_321_123).split(".")
        assert 1 <= len(fraction) <= 6

    def test_equals_integer_divided_by_one_million(self):
        assert Decimal(from_fixed_point(98_765_432)) == Decimal(98_765_432) / Decimal(1_000_000)


@pytest.mark.parametrize("value", ["0.000001", "1", "1.5", "42.123456", "100000000.1", "7.10"])
def test_positive_amounts_survive_conversion(value):
    assert Decimal(from_fixed_point(to_fixed_point(value))) == Decimal(value)


def test_to_decimal_parses_floats_from_their_string_representation():
    assert to_decimal(0.1) == Decimal("0.1")
