"""
Integer Roots — Truncated n-th Roots and Perfect-Power Tests

CRITICAL INVARIANTS:
1. root is truncated toward zero; odd roots of negatives keep the sign
2. value == root**n + remainder, remainder has the sign of value
3. 0, 1 and -1 are perfect powers; negatives only for odd exponents
"""

import math

from arbint.core.errors import NegativeRootError
from arbint.core.math.number_theory import primes_up_to
from arbint.core.math.numerical_safeguards import validate_positive


def _iroot_non_negative(value: int, n: int) -> int:
    """floor(value ** (1/n)) for value >= 0 by integer Newton iteration."""
    if value < 2 or n == 1:
        return value
    if n == 2:
        return math.isqrt(value)
    if n >= value.bit_length():
        return 1

    # Start above the root; Newton then decreases monotonically to it
    x = 1 << -(-value.bit_length() // n)
    while True:
        y = ((n - 1) * x + value // x ** (n - 1)) // n
        if y >= x:
            return x
        x = y


def iroot(value: int, n: int) -> int:
    """
    Integer n-th root truncated toward zero.

    Args:
        value: Operand
        n: Root degree, n >= 1

    Raises:
        ValueError: If n < 1
        NegativeRootError: If value < 0 and n is even

    Examples:
        >>> iroot(64, 3)
        4
        >>> iroot(-10, 3)
        -2
    """
    validate_positive(n, "n")
    if value < 0:
        if n % 2 == 0:
            raise NegativeRootError(f"even root (n={n}) of negative value")
        return -_iroot_non_negative(-value, n)
    return _iroot_non_negative(value, n)


def iroot_remainder(value: int, n: int) -> tuple[int, int]:
    """(root, value - root**n)."""
    root = iroot(value, n)
    return root, value - root**n


def is_perfect_square(value: int) -> bool:
    if value < 0:
        return False
    root = math.isqrt(value)
    return root * root == value


def is_perfect_power(value: int) -> bool:
    """
    value == a**b for some integers a and b > 1.

    Examples:
        >>> is_perfect_power(-64)
        True
        >>> is_perfect_power(-16)
        False
        >>> is_perfect_power(12)
        False
    """
    if value in (-1, 0, 1):
        return True

    magnitude = abs(value)
    for p in primes_up_to(magnitude.bit_length()):
        if value < 0 and p == 2:
            continue
        root = _iroot_non_negative(magnitude, p)
        if root**p == magnitude:
            return True
    return False
