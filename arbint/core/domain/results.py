"""
Result tuples returned by ArbitraryInteger operations.
"""

from typing import TYPE_CHECKING, NamedTuple

from arbint.core.math.number_theory import Primality

if TYPE_CHECKING:
    from arbint.core.domain.integer import ArbitraryInteger


class DivisionResult(NamedTuple):
    """Quotient and remainder of one division convention."""

    quotient: "ArbitraryInteger"
    remainder: "ArbitraryInteger"


class ExtendedGCD(NamedTuple):
    """g == a*s + b*t with g >= 0."""

    gcd: "ArbitraryInteger"
    s: "ArbitraryInteger"
    t: "ArbitraryInteger"


class RootResult(NamedTuple):
    root: "ArbitraryInteger"
    is_exact: bool


class RootRemainder(NamedTuple):
    """value == root**n + remainder."""

    root: "ArbitraryInteger"
    remainder: "ArbitraryInteger"


class SequencePair(NamedTuple):
    """Consecutive terms (X(n), X(n-1)) of a Fibonacci-like sequence."""

    current: "ArbitraryInteger"
    previous: "ArbitraryInteger"


class PrimeCandidate(NamedTuple):
    prime: "ArbitraryInteger"
    certainty: Primality


class Float2Exp(NamedTuple):
    """value ≈ mantissa * 2**exponent, 0.5 <= |mantissa| < 1."""

    mantissa: float
    exponent: int
