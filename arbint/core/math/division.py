"""
Division Engine — Four Rounding Conventions on Unbounded Integers

For divisor d != 0 and dividend n each convention yields (q, r) with
n == q*d + r:

| Convention | q rounds toward | r has the sign of |
|------------|-----------------|-------------------|
| floor      | -inf            | d (or zero)       |
| ceiling    | +inf            | -d (or zero)      |
| truncating | 0               | n (or zero)       |
| exact      | caller promises d | n, r == 0       |

Power-of-two variants divide by 2**exponent using shifts only, so a huge
exponent never materializes 2**exponent as a divisor.

CRITICAL INVARIANTS:
1. A zero divisor raises DivisionByZeroError before any work
2. A negative power-of-two exponent raises InvalidExponentError
3. modulo() always lies in [0, |m|)
"""

from typing import NamedTuple

from arbint.core.math.numerical_safeguards import require_nonzero, validate_exponent


class QuotientRemainder(NamedTuple):
    """Quotient and remainder of one division convention."""

    quotient: int
    remainder: int


# =============================================================================
# DIVISION BY AN ARBITRARY DIVISOR
# =============================================================================


def floor_divmod(n: int, d: int) -> QuotientRemainder:
    """
    Floor division: quotient rounded toward -inf.

    Examples:
        >>> floor_divmod(-10, 3)
        QuotientRemainder(quotient=-4, remainder=2)
    """
    require_nonzero(d)
    q, r = divmod(n, d)
    return QuotientRemainder(q, r)


def ceiling_divmod(n: int, d: int) -> QuotientRemainder:
    """
    Ceiling division: quotient rounded toward +inf.

    Examples:
        >>> ceiling_divmod(10, 3)
        QuotientRemainder(quotient=4, remainder=-2)
    """
    require_nonzero(d)
    q = -((-n) // d)
    return QuotientRemainder(q, n - q * d)


def truncating_divmod(n: int, d: int) -> QuotientRemainder:
    """
    Truncating division: quotient rounded toward zero.

    Examples:
        >>> truncating_divmod(-10, 3)
        QuotientRemainder(quotient=-3, remainder=-1)
    """
    require_nonzero(d)
    q = abs(n) // abs(d)
    if (n < 0) != (d < 0):
        q = -q
    return QuotientRemainder(q, n - q * d)


def exact_divide(n: int, d: int) -> int:
    """
    Division when d is known to divide n.

    The result is unspecified when d does not divide n.
    """
    require_nonzero(d)
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def euclidean_modulo(n: int, m: int) -> int:
    """
    Remainder in [0, |m|) regardless of the signs of n and m.

    Examples:
        >>> euclidean_modulo(-10, 3)
        2
        >>> euclidean_modulo(-10, -3)
        2
    """
    require_nonzero(m, "modulus")
    return n % abs(m)


def is_divisible(n: int, d: int) -> bool:
    """Divisibility test that never raises: only 0 is divisible by 0."""
    if d == 0:
        return n == 0
    return n % d == 0


def is_congruent(a: int, b: int, modulus: int) -> bool:
    """a ≡ b (mod modulus); modulo zero means a == b."""
    return is_divisible(a - b, modulus)


# =============================================================================
# DIVISION BY A POWER OF TWO
# =============================================================================


def floor_divmod_2exp(n: int, exponent: int) -> QuotientRemainder:
    """Floor division by 2**exponent."""
    validate_exponent(exponent)
    q = n >> exponent
    return QuotientRemainder(q, n - (q << exponent))


def ceiling_divmod_2exp(n: int, exponent: int) -> QuotientRemainder:
    """Ceiling division by 2**exponent."""
    validate_exponent(exponent)
    q = -((-n) >> exponent)
    return QuotientRemainder(q, n - (q << exponent))


def truncating_divmod_2exp(n: int, exponent: int) -> QuotientRemainder:
    """Truncating division by 2**exponent."""
    validate_exponent(exponent)
    q = abs(n) >> exponent
    if n < 0:
        q = -q
    return QuotientRemainder(q, n - (q << exponent))


def trailing_zeros(n: int) -> int:
    """Index of the lowest set bit of n (n != 0)."""
    return (n & -n).bit_length() - 1


def is_divisible_2exp(n: int, exponent: int) -> bool:
    """n divisible by 2**exponent; zero is divisible by every power."""
    validate_exponent(exponent)
    return n == 0 or trailing_zeros(n) >= exponent


def is_congruent_2exp(a: int, b: int, exponent: int) -> bool:
    """a ≡ b (mod 2**exponent)."""
    return is_divisible_2exp(a - b, exponent)
