"""
Tests for the Numerical Safeguards module

Checks:
1. Fixed-width bounds, including the minimal signed value
2. Range tests without conversion
3. Two's-complement and magnitude wrapping
4. Exact integer/float comparison
5. Argument validation
"""

import math

import pytest

from arbint.core.errors import DivisionByZeroError, InvalidExponentError
from arbint.core.math.numerical_safeguards import (
    INT16_MAX,
    INT16_MIN,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    LIMB_BITS,
    LIMB_MASK,
    UINT16_MAX,
    UINT64_MAX,
    compare_values,
    compare_with_float,
    fits_signed,
    fits_unsigned,
    is_valid_float,
    require_nonzero,
    sign_of,
    signed_bounds,
    unsigned_bounds,
    validate_exponent,
    validate_in_range,
    validate_non_negative,
    validate_positive,
    wrap_signed,
    wrap_unsigned,
)

# =============================================================================
# BOUNDS
# =============================================================================


class TestBounds:
    """Fixed-width bound constants and helpers"""

    def test_constants_match_helpers(self) -> None:
        """Constants agree with signed_bounds/unsigned_bounds"""
        assert signed_bounds(16) == (INT16_MIN, INT16_MAX)
        assert signed_bounds(64) == (INT64_MIN, INT64_MAX)
        assert unsigned_bounds(16) == (0, UINT16_MAX)
        assert unsigned_bounds(64) == (0, UINT64_MAX)

    def test_minimal_value_has_no_positive_counterpart(self) -> None:
        """-INT_MIN is one past INT_MAX"""
        assert -INT32_MIN == 2**31
        assert -INT64_MIN == INT64_MAX + 1

    def test_limb_geometry(self) -> None:
        """Limbs are 64 bits wide"""
        assert LIMB_BITS == 64
        assert LIMB_MASK == UINT64_MAX

    def test_non_positive_width_raises(self) -> None:
        """Width must be positive"""
        with pytest.raises(ValueError, match="width must be positive"):
            signed_bounds(0)
        with pytest.raises(ValueError, match="width must be positive"):
            unsigned_bounds(-8)


class TestFits:
    """Range tests"""

    def test_signed_boundaries(self) -> None:
        """Both ends of the signed range fit, one past does not"""
        assert fits_signed(INT16_MIN, 16)
        assert fits_signed(INT16_MAX, 16)
        assert not fits_signed(INT16_MIN - 1, 16)
        assert not fits_signed(INT16_MAX + 1, 16)

    def test_negated_minimum_does_not_fit(self) -> None:
        """Negation of the minimal value overflows the width"""
        assert not fits_signed(-INT64_MIN, 64)

    def test_unsigned_boundaries(self) -> None:
        """0..2^w-1 fit, negatives never fit"""
        assert fits_unsigned(0, 16)
        assert fits_unsigned(UINT16_MAX, 16)
        assert not fits_unsigned(UINT16_MAX + 1, 16)
        assert not fits_unsigned(-1, 16)


class TestWrap:
    """Modular reduction into a width"""

    def test_values_that_fit_unchanged(self) -> None:
        """Values in range are returned as is"""
        assert wrap_signed(-5, 16) == -5
        assert wrap_signed(INT16_MAX, 16) == INT16_MAX
        assert wrap_signed(INT16_MIN, 16) == INT16_MIN

    def test_signed_wraps_around(self) -> None:
        """One past either end wraps to the other end"""
        assert wrap_signed(INT16_MAX + 1, 16) == INT16_MIN
        assert wrap_signed(INT16_MIN - 1, 16) == INT16_MAX
        assert wrap_signed(2**64 + 7, 64) == 7

    def test_signed_is_reduction_modulo_power_of_two(self) -> None:
        """Result is congruent to the input modulo 2^width"""
        for value in (-(2**70) + 3, 2**70 - 3, 123456789123456789):
            wrapped = wrap_signed(value, 32)
            assert (value - wrapped) % 2**32 == 0
            assert fits_signed(wrapped, 32)

    def test_unsigned_uses_magnitude(self) -> None:
        """Sign is dropped before reduction"""
        assert wrap_unsigned(-42, 64) == 42
        assert wrap_unsigned(UINT16_MAX + 2, 16) == 1


class TestComparison:
    """Tri-state comparisons"""

    def test_sign_of(self) -> None:
        """-1, 0, +1"""
        assert sign_of(-(10**30)) == -1
        assert sign_of(0) == 0
        assert sign_of(10**30) == 1

    def test_compare_values(self) -> None:
        """Ordering of ints"""
        assert compare_values(1, 2) == -1
        assert compare_values(2, 2) == 0
        assert compare_values(3, 2) == 1

    def test_compare_with_float_is_exact(self) -> None:
        """No rounding of the integer operand"""
        assert compare_with_float(2**53 + 1, 2.0**53) == 1
        assert compare_with_float(2**53, 2.0**53) == 0

    def test_compare_with_fractional_float(self) -> None:
        """Fractions order between neighbouring integers"""
        assert compare_with_float(42, 42.5) == -1
        assert compare_with_float(43, 42.5) == 1
        assert compare_with_float(-43, -42.5) == -1
        assert compare_with_float(-42, -42.5) == 1

    def test_compare_with_infinities(self) -> None:
        """Every integer lies strictly between -inf and +inf"""
        assert compare_with_float(10**400, math.inf) == -1
        assert compare_with_float(-(10**400), -math.inf) == 1

    def test_compare_with_nan_raises(self) -> None:
        """NaN has no order"""
        with pytest.raises(ValueError, match="NaN"):
            compare_with_float(1, math.nan)


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidation:
    """Argument validation helpers"""

    def test_is_valid_float(self) -> None:
        """Finite floats only"""
        assert is_valid_float(1.5)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(-math.inf)

    def test_validate_positive(self) -> None:
        """Zero and negatives rejected"""
        validate_positive(1, "n")
        with pytest.raises(ValueError, match="n must be positive, got 0"):
            validate_positive(0, "n")

    def test_validate_non_negative(self) -> None:
        """Zero accepted, negatives rejected"""
        validate_non_negative(0, "index")
        with pytest.raises(ValueError, match="index must be non-negative, got -1"):
            validate_non_negative(-1, "index")

    def test_validate_in_range(self) -> None:
        """Inclusive bounds"""
        validate_in_range(5, "bits", 1, 5)
        with pytest.raises(ValueError, match="bits must be >= 1"):
            validate_in_range(0, "bits", 1, 5)
        with pytest.raises(ValueError, match="bits must be <= 5"):
            validate_in_range(6, "bits", 1, 5)

    def test_validate_exponent(self) -> None:
        """Negative exponent is an InvalidExponentError and a ValueError"""
        validate_exponent(0)
        with pytest.raises(InvalidExponentError) as info:
            validate_exponent(-3)
        assert info.value.exponent == -3
        assert isinstance(info.value, ValueError)

    def test_require_nonzero(self) -> None:
        """Zero divisor is a DivisionByZeroError and a ZeroDivisionError"""
        require_nonzero(-1)
        with pytest.raises(ZeroDivisionError, match="modulus must be non-zero"):
            require_nonzero(0, "modulus")
        with pytest.raises(DivisionByZeroError):
            require_nonzero(0)
