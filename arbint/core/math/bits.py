"""
Bit Operations — Infinite Two's-Complement View of Unbounded Integers

Negative values behave as if sign-extended with infinitely many 1 bits,
which is exactly how Python's int bitwise operators and shifts behave.
This module adds the scans, counts and limb access on top.

CRITICAL INVARIANTS:
1. scan1/scan0 return None only when no such bit exists at all
2. Population count of a negative value is infinite (None)
3. Limb access reads the magnitude, never the two's-complement form
"""

from arbint.core.math.numerical_safeguards import LIMB_BITS, LIMB_MASK, validate_non_negative


def _lowest_set_bit(n: int) -> int:
    return (n & -n).bit_length() - 1


def test_bit(n: int, index: int) -> bool:
    """Bit at index (0 = least significant)."""
    validate_non_negative(index, "index")
    return bool((n >> index) & 1)


def set_bit(n: int, index: int) -> int:
    validate_non_negative(index, "index")
    return n | (1 << index)


def clear_bit(n: int, index: int) -> int:
    validate_non_negative(index, "index")
    return n & ~(1 << index)


def complement_bit(n: int, index: int) -> int:
    validate_non_negative(index, "index")
    return n ^ (1 << index)


def scan1(n: int, start: int = 0) -> int | None:
    """
    Index of the first 1 bit at or after start.

    Examples:
        >>> scan1(0b1000, 0)
        3
        >>> scan1(0b1000, 4) is None
        True
        >>> scan1(-1, 100)
        100
    """
    validate_non_negative(start, "start")
    remaining = n >> start
    if remaining == 0:
        return None
    return start + _lowest_set_bit(remaining)


def scan0(n: int, start: int = 0) -> int | None:
    """
    Index of the first 0 bit at or after start.

    Examples:
        >>> scan0(0b0111, 0)
        3
        >>> scan0(-1, 0) is None
        True
    """
    return scan1(~n, start)


def population_count(n: int) -> int | None:
    """Number of 1 bits of a non-negative value; None for negatives."""
    if n < 0:
        return None
    return n.bit_count()


def hamming_distance(a: int, b: int) -> int | None:
    """
    Number of differing bits; None when the signs differ.

    Values of opposite sign differ in infinitely many bits.
    """
    if (a < 0) != (b < 0):
        return None
    return (a ^ b).bit_count()


def limb_count(n: int) -> int:
    """Number of LIMB_BITS-wide limbs in the magnitude (0 for zero)."""
    return -(-abs(n).bit_length() // LIMB_BITS)


def get_limb(n: int, index: int) -> int:
    """Limb of the magnitude at index, least significant first; 0 past the end."""
    validate_non_negative(index, "index")
    return (abs(n) >> (LIMB_BITS * index)) & LIMB_MASK
