"""
Numerical Safeguards — Fixed-Width Bounds and Argument Validation

Primitives shared by every algorithm of the engine:
- Bounds of the fixed-width signed/unsigned host integers (16/32/64 bits)
- Range tests and modular wrapping into a fixed width
- Argument validation with uniform error messages
- Tri-state comparison and sign extraction

CRITICAL INVARIANTS:
1. The minimal signed value of a width fits that width; its negation does not
2. Wrapping is reduction modulo 2^width, never saturation
3. Validation never mutates and raises before any work is done
"""

import math
from typing import Final

from arbint.core.errors import DivisionByZeroError, InvalidExponentError

# =============================================================================
# FIXED-WIDTH BOUNDS
# =============================================================================

INT16_MIN: Final[int] = -(1 << 15)
INT16_MAX: Final[int] = (1 << 15) - 1
INT32_MIN: Final[int] = -(1 << 31)
INT32_MAX: Final[int] = (1 << 31) - 1
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

UINT16_MAX: Final[int] = (1 << 16) - 1
UINT32_MAX: Final[int] = (1 << 32) - 1
UINT64_MAX: Final[int] = (1 << 64) - 1

# Limb geometry used by limb access
LIMB_BITS: Final[int] = 64
LIMB_MASK: Final[int] = (1 << LIMB_BITS) - 1


# =============================================================================
# RANGE TESTS AND WRAPPING
# =============================================================================


def signed_bounds(width: int) -> tuple[int, int]:
    """
    Inclusive bounds of a two's-complement integer of the given width.

    Args:
        width: Width in bits

    Returns:
        (minimum, maximum)

    Raises:
        ValueError: If width is not positive

    Examples:
        >>> signed_bounds(16)
        (-32768, 32767)
    """
    validate_positive(width, "width")
    return -(1 << (width - 1)), (1 << (width - 1)) - 1


def unsigned_bounds(width: int) -> tuple[int, int]:
    """
    Inclusive bounds of an unsigned integer of the given width.

    Examples:
        >>> unsigned_bounds(16)
        (0, 65535)
    """
    validate_positive(width, "width")
    return 0, (1 << width) - 1


def fits_signed(value: int, width: int) -> bool:
    """Range test for a signed fixed-width integer, without conversion."""
    low, high = signed_bounds(width)
    return low <= value <= high


def fits_unsigned(value: int, width: int) -> bool:
    """Range test for an unsigned fixed-width integer, without conversion."""
    low, high = unsigned_bounds(width)
    return low <= value <= high


def wrap_signed(value: int, width: int) -> int:
    """
    Reduce value modulo 2^width into the signed range of that width.

    Values that fit are returned unchanged; anything else keeps only its low
    `width` bits, interpreted as two's complement.

    Examples:
        >>> wrap_signed(32768, 16)
        -32768
        >>> wrap_signed(-32769, 16)
        32767
        >>> wrap_signed(-5, 16)
        -5
    """
    validate_positive(width, "width")
    modulus = 1 << width
    wrapped = value & (modulus - 1)
    if wrapped >> (width - 1):
        wrapped -= modulus
    return wrapped


def wrap_unsigned(value: int, width: int) -> int:
    """
    Reduce the magnitude of value modulo 2^width.

    The sign is discarded before reduction, matching how a magnitude is
    read out as an unsigned word.

    Examples:
        >>> wrap_unsigned(65537, 16)
        1
        >>> wrap_unsigned(-42, 16)
        42
    """
    validate_positive(width, "width")
    return abs(value) & ((1 << width) - 1)


# =============================================================================
# COMPARISON
# =============================================================================


def sign_of(value: int) -> int:
    """
    Sign of an integer as -1, 0 or +1.

    Examples:
        >>> sign_of(-7), sign_of(0), sign_of(9)
        (-1, 0, 1)
    """
    return (value > 0) - (value < 0)


def compare_values(a: int, b: int) -> int:
    """Tri-state comparison: -1 if a < b, 0 if equal, +1 if a > b."""
    return (a > b) - (a < b)


def compare_with_float(value: int, other: float) -> int:
    """
    Exact tri-state comparison between an integer and a float.

    No rounding takes place: 2**53 + 1 compares greater than 2.0**53.

    Raises:
        ValueError: If other is NaN
    """
    if math.isnan(other):
        raise ValueError(f"other must not be NaN, got {other}")
    if math.isinf(other):
        return -1 if other > 0 else 1

    floor_other = math.floor(other)
    if value < floor_other:
        return -1
    if value > floor_other:
        return 1
    # value == floor(other); a fractional part makes other strictly larger
    return 0 if other == floor_other else -1


# =============================================================================
# FLOAT CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if finite, False for NaN or Inf
    """
    return math.isfinite(value)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(value: int, name: str) -> None:
    """
    Validate that an integer argument is strictly positive.

    Raises:
        ValueError: If value <= 0
    """
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: int, name: str) -> None:
    """
    Validate that an integer argument is non-negative.

    Raises:
        ValueError: If value < 0
    """
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Validate that an integer argument lies in [min_value, max_value].

    Args:
        value: Value to check
        name: Argument name (for the error message)
        min_value: Inclusive lower bound (optional)
        max_value: Inclusive upper bound (optional)

    Raises:
        ValueError: If value is outside of the range
    """
    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


def validate_exponent(exponent: int, name: str = "exponent") -> None:
    """
    Validate an exponent of a power-of-two indexed operation.

    Raises:
        InvalidExponentError: If exponent < 0
    """
    if exponent < 0:
        raise InvalidExponentError(exponent, name)


def require_nonzero(divisor: int, name: str = "divisor") -> None:
    """
    Validate a divisor or modulus.

    Raises:
        DivisionByZeroError: If divisor == 0
    """
    if divisor == 0:
        raise DivisionByZeroError(f"{name} must be non-zero")
