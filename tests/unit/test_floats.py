"""
Tests for float conversions (truncation both ways)
"""

import math

import pytest

from arbint.core.math.floats import float_2exp_from_int, float_from_int, int_from_float


class TestIntFromFloat:
    """float -> integer"""

    @pytest.mark.parametrize("value, expected", [(42.7, 42), (-42.7, -42), (0.0, 0), (-0.5, 0), (1e20, 10**20)])
    def test_truncates(self, value: float, expected: int) -> None:
        """Fraction dropped toward zero"""
        assert int_from_float(value) == expected

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value: float) -> None:
        """NaN and infinities have no integer value"""
        with pytest.raises(ValueError, match="finite float"):
            int_from_float(value)


class TestFloatFromInt:
    """integer -> float"""

    def test_exact_values(self) -> None:
        """Representable values convert unchanged"""
        assert float_from_int(0) == 0.0
        assert float_from_int(-3) == -3.0
        assert float_from_int(2**53) == 2.0**53

    def test_truncates_instead_of_rounding(self) -> None:
        """2**54 - 1 rounds up with float() but truncates here"""
        assert float(2**54 - 1) == 2.0**54
        assert float_from_int(2**54 - 1) == 2.0**54 - 2
        assert float_from_int(-(2**54 - 1)) == -(2.0**54 - 2)

    def test_overflow_is_infinite(self) -> None:
        """Beyond the double range"""
        assert float_from_int(10**400) == math.inf
        assert float_from_int(-(10**400)) == -math.inf


class TestFloat2Exp:
    """mantissa * 2**exponent decomposition"""

    @pytest.mark.parametrize(
        "value, expected",
        [(0, (0.0, 0)), (1, (0.5, 1)), (8, (0.5, 4)), (-3, (-0.75, 2)), (2**100, (0.5, 101))],
    )
    def test_known_values(self, value: int, expected: tuple) -> None:
        """Mantissa in [0.5, 1)"""
        assert float_2exp_from_int(value) == expected

    def test_large_value_recombines(self) -> None:
        """Truncated mantissa times the power is at most the value"""
        value = 3**500
        mantissa, exponent = float_2exp_from_int(value)
        assert 0.5 <= mantissa < 1.0
        assert exponent == value.bit_length()
        assert int(math.ldexp(mantissa, 53)) << (exponent - 53) <= value
