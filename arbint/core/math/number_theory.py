"""
Number Theory — GCD Family, Modular Arithmetic, Primality, Sequences

Algorithms on plain Python ints:
- gcd / extended gcd / lcm and modular inverse
- modular exponentiation, standard and with a uniform Montgomery ladder
- Jacobi and Kronecker symbols
- Miller-Rabin primality with exact answers below DEFINITE_PRIME_LIMIT
- factorial family, binomials, primorials
- Fibonacci and Lucas numbers by fast doubling, plus O(1)-per-step sequences
- factor removal

CRITICAL INVARIANTS:
1. gcd and lcm are non-negative; gcd(0, 0) == 0
2. a*s + b*t == g for every extended_gcd(a, b) == (g, s, t)
3. Modular results lie in [0, |modulus|)
4. The secure ladder performs the same operations for every exponent of a
   given limb length
"""

import logging
import math
import random
from enum import IntEnum
from typing import Final, Iterator

from arbint.core.errors import NoInverseError
from arbint.core.math.division import trailing_zeros
from arbint.core.math.numerical_safeguards import (
    LIMB_BITS,
    require_nonzero,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Miller-Rabin rounds used when the caller does not choose
DEFAULT_PRIMALITY_REPS: Final[int] = 25

# Values below this limit are classified exactly by trial division
DEFINITE_PRIME_LIMIT: Final[int] = 1_000_000

# Trial divisors: every prime below sqrt(DEFINITE_PRIME_LIMIT)
_TRIAL_DIVISION_BOUND: Final[int] = 1000


class Primality(IntEnum):
    """Three-valued primality verdict."""

    COMPOSITE = 0
    PROBABLY_PRIME = 1
    PRIME = 2


def primes_up_to(limit: int) -> list[int]:
    """
    All primes p <= limit (sieve of Eratosthenes).

    Examples:
        >>> primes_up_to(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
        >>> primes_up_to(1)
        []
    """
    if limit < 2:
        return []
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return [p for p, flag in enumerate(sieve) if flag]


SMALL_PRIMES: Final[tuple[int, ...]] = tuple(primes_up_to(_TRIAL_DIVISION_BOUND))


# =============================================================================
# GCD FAMILY
# =============================================================================


def gcd(a: int, b: int) -> int:
    """Non-negative greatest common divisor; gcd(0, 0) == 0."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Non-negative least common multiple; 0 if either operand is 0."""
    return math.lcm(a, b)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclid: (g, s, t) with a*s + b*t == g >= 0.

    The iteration runs on |a|, |b| and folds the signs into s and t, so
    every sign combination satisfies the identity; (0, 0) gives (0, 0, 0).

    Examples:
        >>> extended_gcd(240, 46)
        (2, -9, 47)
        >>> extended_gcd(0, -5)
        (5, 0, -1)
    """
    old_r, r = abs(a), abs(b)
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    if old_r == 0:
        return 0, 0, 0
    if a < 0:
        old_s = -old_s
    if b < 0:
        old_t = -old_t
    return old_r, old_s, old_t


def modular_inverse(a: int, modulus: int) -> int | None:
    """
    Inverse of a modulo |modulus|, in [0, |modulus|).

    Returns:
        The inverse; 0 when |modulus| == 1; None when modulus is 0 or
        gcd(a, modulus) != 1

    Examples:
        >>> modular_inverse(3, 11)
        4
        >>> modular_inverse(2, 4) is None
        True
    """
    if modulus == 0:
        return None
    m = abs(modulus)
    if m == 1:
        return 0
    g, s, _ = extended_gcd(a % m, m)
    if g != 1:
        return None
    return s % m


# =============================================================================
# MODULAR EXPONENTIATION
# =============================================================================


def _resolve_negative_exponent(base: int, exponent: int, m: int) -> tuple[int, int]:
    """Replace base**-e by inverse(base)**e."""
    if exponent >= 0:
        return base, exponent
    inverse = modular_inverse(base, m)
    if inverse is None:
        raise NoInverseError(f"{base} has no inverse modulo {m}")
    return inverse, -exponent


def powm(base: int, exponent: int, modulus: int) -> int:
    """
    base**exponent mod |modulus|, negative exponents through the inverse.

    Raises:
        DivisionByZeroError: If modulus == 0
        NoInverseError: If exponent < 0 and base is not invertible

    Examples:
        >>> powm(5, 3, 13)
        8
        >>> powm(3, -1, 11)
        4
    """
    require_nonzero(modulus, "modulus")
    m = abs(modulus)
    base, exponent = _resolve_negative_exponent(base, exponent, m)
    return pow(base, exponent, m)


def powm_secure(base: int, exponent: int, modulus: int) -> int:
    """
    Montgomery-ladder modular exponentiation.

    Every bit of the exponent, padded to a whole number of limbs, costs one
    multiplication, one squaring and two masked swaps, whatever its value.
    The result equals powm(base, exponent, modulus). Uniform timing is only
    claimed for odd moduli.

    Raises:
        DivisionByZeroError: If modulus == 0
        NoInverseError: If exponent < 0 and base is not invertible
    """
    require_nonzero(modulus, "modulus")
    m = abs(modulus)
    base, exponent = _resolve_negative_exponent(base, exponent, m)

    r0, r1 = 1 % m, base % m
    padded_bits = max(-(-exponent.bit_length() // LIMB_BITS), 1) * LIMB_BITS
    for i in reversed(range(padded_bits)):
        mask = -((exponent >> i) & 1)
        diff = (r0 ^ r1) & mask
        r0, r1 = r0 ^ diff, r1 ^ diff
        r1 = (r0 * r1) % m
        r0 = (r0 * r0) % m
        diff = (r0 ^ r1) & mask
        r0, r1 = r0 ^ diff, r1 ^ diff
    return r0


# =============================================================================
# RESIDUE SYMBOLS
# =============================================================================


def jacobi(a: int, n: int) -> int:
    """
    Jacobi symbol (a/n) for a positive odd n.

    Raises:
        ValueError: If n is not positive and odd

    Examples:
        >>> jacobi(2, 7), jacobi(3, 7), jacobi(7, 7)
        (1, -1, 0)
    """
    if n <= 0 or n % 2 == 0:
        raise ValueError(f"n must be a positive odd integer, got {n}")

    a %= n
    result = 1
    while a:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def kronecker(a: int, n: int) -> int:
    """
    Kronecker symbol (a/n) for any integer n.

    Examples:
        >>> kronecker(3, 8)
        -1
        >>> kronecker(-1, -1)
        -1
        >>> kronecker(2, 0)
        0
    """
    if n == 0:
        return 1 if abs(a) == 1 else 0

    result = 1
    if n < 0:
        n = -n
        if a < 0:
            result = -result

    twos = trailing_zeros(n)
    if twos:
        if a % 2 == 0:
            return 0
        n >>= twos
        if twos % 2 and a % 8 in (3, 5):
            result = -result
    return result * jacobi(a, n)


# =============================================================================
# PRIMALITY
# =============================================================================


def _is_strong_probable_prime(n: int, base: int, d: int, s: int) -> bool:
    x = pow(base, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def _witnesses(n: int, reps: int) -> list[int]:
    """First reps small primes, topped up with bases drawn from a generator seeded by n."""
    bases = list(SMALL_PRIMES[:reps])
    if reps > len(bases):
        rng = random.Random(n)
        bases.extend(rng.randrange(2, n - 1) for _ in range(reps - len(bases)))
    return bases


def probable_prime(n: int, reps: int = DEFAULT_PRIMALITY_REPS) -> Primality:
    """
    Classify |n| as composite, probably prime or prime.

    Args:
        n: Candidate (the sign is ignored)
        reps: Miller-Rabin rounds, reps >= 1

    Returns:
        PRIME or COMPOSITE below DEFINITE_PRIME_LIMIT, otherwise COMPOSITE
        or PROBABLY_PRIME

    Examples:
        >>> probable_prime(97)
        <Primality.PRIME: 2>
        >>> probable_prime(2**61 - 1)
        <Primality.PROBABLY_PRIME: 1>
    """
    validate_positive(reps, "reps")
    n = abs(n)
    if n < 2:
        return Primality.COMPOSITE

    if n < DEFINITE_PRIME_LIMIT:
        for p in SMALL_PRIMES:
            if p * p > n:
                break
            if n % p == 0:
                return Primality.COMPOSITE
        return Primality.PRIME

    for p in SMALL_PRIMES:
        if n % p == 0:
            return Primality.COMPOSITE

    s = trailing_zeros(n - 1)
    d = (n - 1) >> s
    for base in _witnesses(n, reps):
        if not _is_strong_probable_prime(n, base, d, s):
            return Primality.COMPOSITE
    return Primality.PROBABLY_PRIME


def miller_rabin(n: int, reps: int) -> int:
    """1 if |n| passes reps rounds of Miller-Rabin, 0 otherwise."""
    return int(probable_prime(n, reps) != Primality.COMPOSITE)


def next_prime(n: int, reps: int = DEFAULT_PRIMALITY_REPS) -> int:
    """
    Smallest (probable) prime strictly greater than n.

    Examples:
        >>> next_prime(-5), next_prime(2), next_prime(13)
        (2, 3, 17)
    """
    if n < 2:
        return 2

    candidate = n + 1 if n % 2 == 0 else n + 2
    steps = 1
    while probable_prime(candidate, reps) == Primality.COMPOSITE:
        candidate += 2
        steps += 1
    logger.debug("next_prime: %d candidates tested above a %d-bit value", steps, n.bit_length())
    return candidate


def previous_prime(n: int, reps: int = DEFAULT_PRIMALITY_REPS) -> tuple[int, Primality] | None:
    """
    Largest prime strictly less than n, with its certainty.

    Returns:
        (prime, PRIME or PROBABLY_PRIME), or None when n <= 2

    Examples:
        >>> previous_prime(2) is None
        True
        >>> previous_prime(3)
        (2, <Primality.PRIME: 2>)
    """
    if n <= 2:
        return None
    if n == 3:
        return 2, Primality.PRIME

    candidate = n - 1 if n % 2 == 0 else n - 2
    steps = 1
    while True:
        certainty = probable_prime(candidate, reps)
        if certainty != Primality.COMPOSITE:
            break
        candidate -= 2
        steps += 1
    logger.debug("previous_prime: %d candidates tested below a %d-bit value", steps, n.bit_length())
    return candidate, certainty


# =============================================================================
# FACTORIALS AND BINOMIALS
# =============================================================================


def factorial(n: int) -> int:
    validate_non_negative(n, "n")
    return math.factorial(n)


def multi_factorial(n: int, k: int) -> int:
    """
    Step-k factorial n * (n-k) * (n-2k) * ... down to a positive factor.

    Examples:
        >>> multi_factorial(10, 3)
        280
        >>> multi_factorial(0, 5)
        1
    """
    validate_non_negative(n, "n")
    validate_positive(k, "k")
    if k == 1:
        return math.factorial(n)
    return math.prod(range(n, 0, -k))


def double_factorial(n: int) -> int:
    return multi_factorial(n, 2)


def binomial(n: int, k: int) -> int:
    """
    Binomial coefficient C(n, k) for k >= 0 and any n.

    Negative n follows C(n, k) == (-1)**k * C(k - n - 1, k).

    Examples:
        >>> binomial(5, 2), binomial(2, 5), binomial(-3, 2)
        (10, 0, 6)
    """
    validate_non_negative(k, "k")
    if n >= 0:
        return math.comb(n, k)
    value = math.comb(k - n - 1, k)
    return -value if k % 2 else value


def primorial(n: int) -> int:
    """Product of all primes <= n; 1 for n < 2."""
    return math.prod(primes_up_to(n))


# =============================================================================
# FIBONACCI AND LUCAS
# =============================================================================


def _fibonacci_pair(n: int) -> tuple[int, int]:
    """(F(n), F(n+1)) by fast doubling."""
    a, b = 0, 1
    for bit in format(n, "b"):
        c = a * (2 * b - a)
        d = a * a + b * b
        if bit == "1":
            a, b = d, c + d
        else:
            a, b = c, d
    return a, b


def fibonacci2(n: int) -> tuple[int, int]:
    """
    (F(n), F(n-1)) with F(-1) == 1.

    Examples:
        >>> fibonacci2(0), fibonacci2(10)
        ((0, 1), (55, 34))
    """
    validate_non_negative(n, "n")
    current, following = _fibonacci_pair(n)
    return current, following - current


def fibonacci(n: int) -> int:
    return fibonacci2(n)[0]


def lucas2(n: int) -> tuple[int, int]:
    """
    (L(n), L(n-1)) with L(-1) == -1.

    Examples:
        >>> lucas2(0), lucas2(5)
        ((2, -1), (11, 7))
    """
    f, f_previous = fibonacci2(n)
    return f + 2 * f_previous, 2 * f - f_previous


def lucas(n: int) -> int:
    return lucas2(n)[0]


def _extend(pair: tuple[int, int]) -> Iterator[int]:
    current, previous = pair
    while True:
        yield current
        current, previous = current + previous, current


def fibonacci_sequence(start: int = 0) -> Iterator[int]:
    """F(start), F(start+1), ... with one addition per step."""
    return _extend(fibonacci2(start))


def lucas_sequence(start: int = 0) -> Iterator[int]:
    """L(start), L(start+1), ... with one addition per step."""
    return _extend(lucas2(start))


# =============================================================================
# FACTOR REMOVAL
# =============================================================================


def remove_factor(n: int, factor: int) -> tuple[int, int]:
    """
    Divide factor out of n as often as possible.

    Returns:
        (factor-free quotient, number of divisions)

    Raises:
        DivisionByZeroError: If factor == 0

    Examples:
        >>> remove_factor(72, 2)
        (9, 3)
        >>> remove_factor(-8, -2)
        (1, 3)
    """
    require_nonzero(factor, "factor")
    if n == 0 or abs(factor) == 1:
        return n, 0

    count = 0
    quotient, remainder = divmod(n, factor)
    while remainder == 0:
        n = quotient
        count += 1
        quotient, remainder = divmod(n, factor)
    return n, count
