"""
Float Conversions — Truncating Bridges Between Integers and Doubles

CRITICAL INVARIANTS:
1. float → integer truncates toward zero; NaN/Inf are rejected
2. integer → float truncates toward zero (no round-to-nearest)
3. to_float_2exp returns a mantissa in [0.5, 1) or (0.0, 0) for zero
"""

import math
from typing import Final

from arbint.core.math.numerical_safeguards import is_valid_float

# Significand width of an IEEE-754 double
DOUBLE_MANTISSA_BITS: Final[int] = 53


def int_from_float(value: float) -> int:
    """
    Convert a float to an integer, truncating toward zero.

    Args:
        value: Finite float

    Returns:
        Integer part of value

    Raises:
        ValueError: If value is NaN or infinite

    Examples:
        >>> int_from_float(42.7)
        42
        >>> int_from_float(-42.7)
        -42
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a finite float, got {value}")
    return int(value)


def _truncated_significand(magnitude: int) -> tuple[int, int]:
    """Top DOUBLE_MANTISSA_BITS bits of magnitude and the dropped bit count."""
    shift = max(magnitude.bit_length() - DOUBLE_MANTISSA_BITS, 0)
    return magnitude >> shift, shift


def float_from_int(value: int) -> float:
    """
    Convert an integer to a float, truncating toward zero.

    Python's float(int) rounds to nearest; this conversion drops the low bits
    instead. Values beyond the double range become a signed infinity.

    Examples:
        >>> float_from_int(2**53 + 1) == 2.0**53
        True
        >>> float_from_int(-3)
        -3.0
    """
    significand, shift = _truncated_significand(abs(value))
    try:
        result = math.ldexp(float(significand), shift)
    except OverflowError:
        result = math.inf
    return -result if value < 0 else result


def float_2exp_from_int(value: int) -> tuple[float, int]:
    """
    Decompose an integer as mantissa * 2**exponent.

    The mantissa is truncated to double precision and lies in [0.5, 1) in
    absolute value; zero decomposes as (0.0, 0).

    Returns:
        (mantissa, exponent)

    Examples:
        >>> float_2exp_from_int(0)
        (0.0, 0)
        >>> float_2exp_from_int(8)
        (0.5, 4)
        >>> float_2exp_from_int(-3)
        (-0.75, 2)
    """
    if value == 0:
        return 0.0, 0

    exponent = abs(value).bit_length()
    significand, _ = _truncated_significand(abs(value))
    mantissa = math.ldexp(float(significand), -min(exponent, DOUBLE_MANTISSA_BITS))
    return (-mantissa if value < 0 else mantissa), exponent
