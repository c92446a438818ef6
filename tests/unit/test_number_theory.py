"""
Tests for number-theoretic functions

Checks:
1. gcd/lcm signs and extended gcd identity
2. Modular inverse and exponentiation, including the secure ladder
3. Jacobi and Kronecker symbols
4. Three-valued primality and prime searches
5. Factorials, binomials, primorials, Fibonacci and Lucas numbers
"""

import itertools
import logging

import pytest

from arbint.core.errors import DivisionByZeroError, NoInverseError
from arbint.core.math.number_theory import (
    DEFINITE_PRIME_LIMIT,
    Primality,
    binomial,
    double_factorial,
    extended_gcd,
    factorial,
    fibonacci,
    fibonacci2,
    fibonacci_sequence,
    gcd,
    jacobi,
    kronecker,
    lcm,
    lucas,
    lucas2,
    lucas_sequence,
    miller_rabin,
    modular_inverse,
    multi_factorial,
    next_prime,
    powm,
    powm_secure,
    previous_prime,
    primes_up_to,
    primorial,
    probable_prime,
    remove_factor,
)

MERSENNE_61 = 2**61 - 1
MERSENNE_89 = 2**89 - 1


# =============================================================================
# GCD FAMILY
# =============================================================================


class TestGcd:
    """gcd / lcm / extended gcd"""

    def test_gcd_is_non_negative(self) -> None:
        """Sign of operands is irrelevant"""
        assert gcd(0, 0) == 0
        assert gcd(-12, 18) == 6
        assert gcd(0, -7) == 7

    def test_lcm(self) -> None:
        """Zero if either operand is zero"""
        assert lcm(-4, 6) == 12
        assert lcm(0, 5) == 0

    def test_extended_reference_values(self) -> None:
        """Known Bezout coefficients"""
        assert extended_gcd(240, 46) == (2, -9, 47)
        assert extended_gcd(0, -5) == (5, 0, -1)
        assert extended_gcd(0, 0) == (0, 0, 0)

    @pytest.mark.parametrize("a, b", list(itertools.product([0, 7, -7, 240, -46, 10**20 + 1], repeat=2)))
    def test_extended_identity(self, a: int, b: int) -> None:
        """a*s + b*t == g == gcd(a, b)"""
        g, s, t = extended_gcd(a, b)
        assert g == gcd(a, b)
        assert a * s + b * t == g


class TestModularInverse:
    """modular_inverse()"""

    def test_inverse(self) -> None:
        """Result lies in [0, |m|)"""
        assert modular_inverse(3, 11) == 4
        assert modular_inverse(3, -11) == 4
        assert modular_inverse(-3, 11) == 7

    def test_modulus_one_gives_zero(self) -> None:
        """Every value is invertible modulo 1"""
        assert modular_inverse(5, 1) == 0
        assert modular_inverse(0, -1) == 0

    def test_not_invertible(self) -> None:
        """Common factor or zero modulus"""
        assert modular_inverse(2, 4) is None
        assert modular_inverse(0, 7) is None
        assert modular_inverse(4, 0) is None


class TestPowm:
    """powm / powm_secure"""

    def test_reference_values(self) -> None:
        """Matches pow() with a positive modulus"""
        assert powm(5, 3, 13) == 8
        assert powm(5, 3, -13) == 8
        assert powm(-2, 3, 7) == 6
        assert powm(7, 0, 1) == 0

    def test_negative_exponent_uses_inverse(self) -> None:
        """b**-e == inverse(b)**e"""
        assert powm(3, -1, 11) == 4
        assert powm(3, -2, 11) == 5
        with pytest.raises(NoInverseError):
            powm(2, -1, 4)

    def test_zero_modulus_raises(self) -> None:
        """Modulus must be non-zero"""
        with pytest.raises(DivisionByZeroError):
            powm(2, 3, 0)
        with pytest.raises(DivisionByZeroError):
            powm_secure(2, 3, 0)

    @pytest.mark.parametrize(
        "base, exponent, modulus",
        [
            (5, 3, 13),
            (2, 0, 7),
            (0, 0, 7),
            (-3, 65, 101),
            (3, -5, 101),
            (12345, 2**130 + 17, MERSENNE_89),
            (7, 10**9, 2**64),
            (7, 12, 1),
        ],
    )
    def test_secure_matches_standard(self, base: int, exponent: int, modulus: int) -> None:
        """Ladder result equals square-and-multiply"""
        assert powm_secure(base, exponent, modulus) == powm(base, exponent, modulus)


class TestSymbols:
    """Jacobi and Kronecker symbols"""

    def test_jacobi(self) -> None:
        """Quadratic residues modulo 7 are 1, 2 and 4"""
        assert [jacobi(a, 7) for a in range(7)] == [0, 1, 1, -1, 1, -1, -1]
        assert jacobi(1001, 9907) == -1

    @pytest.mark.parametrize("n", [0, -3, 8])
    def test_jacobi_requires_positive_odd(self, n: int) -> None:
        """n must be positive and odd"""
        with pytest.raises(ValueError, match="positive odd"):
            jacobi(1, n)

    def test_kronecker(self) -> None:
        """Extensions to even and negative n"""
        assert kronecker(3, 8) == -1
        assert kronecker(1, 8) == 1
        assert kronecker(2, 6) == 0
        assert kronecker(-1, -1) == -1
        assert kronecker(1, 0) == 1
        assert kronecker(2, 0) == 0
        assert kronecker(5, 7) == jacobi(5, 7)


# =============================================================================
# PRIMALITY
# =============================================================================


class TestPrimality:
    """probable_prime / miller_rabin"""

    def test_sieve(self) -> None:
        """Primes up to a bound"""
        assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        assert primes_up_to(-4) == []

    def test_small_values_are_definite(self) -> None:
        """Exact verdicts below the definite limit"""
        assert probable_prime(2) == Primality.PRIME
        assert probable_prime(97) == Primality.PRIME
        assert probable_prime(-97) == Primality.PRIME
        assert probable_prime(999_983) == Primality.PRIME
        assert probable_prime(561) == Primality.COMPOSITE
        assert probable_prime(1) == Primality.COMPOSITE
        assert probable_prime(0) == Primality.COMPOSITE

    def test_large_values_are_probable(self) -> None:
        """Never PRIME at or above the limit"""
        assert DEFINITE_PRIME_LIMIT == 1_000_000
        assert probable_prime(1_000_003) == Primality.PROBABLY_PRIME
        assert probable_prime(MERSENNE_61) == Primality.PROBABLY_PRIME
        assert probable_prime(MERSENNE_61 * MERSENNE_89) == Primality.COMPOSITE
        assert probable_prime(2**64 + 1) == Primality.COMPOSITE

    def test_reps_beyond_small_primes(self) -> None:
        """Extra witnesses are reproducible"""
        assert probable_prime(MERSENNE_89, reps=300) == Primality.PROBABLY_PRIME
        assert probable_prime(MERSENNE_89, reps=300) == probable_prime(MERSENNE_89, reps=300)

    def test_reps_must_be_positive(self) -> None:
        """At least one round"""
        with pytest.raises(ValueError, match="reps must be positive"):
            probable_prime(7, reps=0)

    def test_miller_rabin(self) -> None:
        """1 for (probable) primes, 0 for composites"""
        assert miller_rabin(MERSENNE_61, 10) == 1
        assert miller_rabin(MERSENNE_61 + 2, 10) == 0


class TestPrimeSearch:
    """next_prime / previous_prime"""

    @pytest.mark.parametrize("n, expected", [(-5, 2), (0, 2), (2, 3), (13, 17), (14, 17), (999_983, 1_000_003)])
    def test_next_prime(self, n: int, expected: int) -> None:
        """Strictly greater"""
        assert next_prime(n) == expected

    def test_previous_prime(self) -> None:
        """Strictly smaller, with certainty"""
        assert previous_prime(2) is None
        assert previous_prime(-10) is None
        assert previous_prime(3) == (2, Primality.PRIME)
        assert previous_prime(18) == (17, Primality.PRIME)
        assert previous_prime(1_000_000) == (999_983, Primality.PRIME)
        assert previous_prime(1_000_004) == (1_000_003, Primality.PROBABLY_PRIME)

    def test_search_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Searches report their candidate count"""
        with caplog.at_level(logging.DEBUG, logger="arbint.core.math.number_theory"):
            next_prime(100)
        assert any("next_prime" in record.message for record in caplog.records)


# =============================================================================
# COMBINATORICS
# =============================================================================


class TestCombinatorics:
    """Factorials, binomials, primorials"""

    def test_factorials(self) -> None:
        """Step-1, step-2 and step-k"""
        assert factorial(0) == 1
        assert factorial(20) == 2432902008176640000
        assert double_factorial(9) == 945
        assert double_factorial(8) == 384
        assert double_factorial(0) == 1
        assert multi_factorial(10, 3) == 280

    def test_factorial_rejects_negative(self) -> None:
        """n >= 0"""
        with pytest.raises(ValueError):
            factorial(-1)
        with pytest.raises(ValueError):
            multi_factorial(5, 0)

    @pytest.mark.parametrize("n, k, expected", [(5, 2, 10), (2, 5, 0), (-3, 2, 6), (-3, 3, -10), (0, 0, 1), (100, 50, 100891344545564193334812497256)])
    def test_binomial(self, n: int, k: int, expected: int) -> None:
        """Negative n by upper negation"""
        assert binomial(n, k) == expected

    def test_binomial_rejects_negative_k(self) -> None:
        """k >= 0"""
        with pytest.raises(ValueError):
            binomial(5, -1)

    def test_primorial(self) -> None:
        """Product of primes <= n"""
        assert primorial(10) == 210
        assert primorial(11) == 2310
        assert primorial(1) == 1
        assert primorial(-5) == 1


class TestSequences:
    """Fibonacci and Lucas numbers"""

    def test_fibonacci(self) -> None:
        """F(0)=0, F(1)=1"""
        assert [fibonacci(n) for n in range(10)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
        assert fibonacci(100) == 354224848179261915075

    def test_fibonacci_pair(self) -> None:
        """Previous term included, F(-1) == 1"""
        assert fibonacci2(0) == (0, 1)
        assert fibonacci2(10) == (55, 34)

    def test_lucas(self) -> None:
        """L(0)=2, L(1)=1"""
        assert [lucas(n) for n in range(8)] == [2, 1, 3, 4, 7, 11, 18, 29]
        assert lucas2(0) == (2, -1)
        assert lucas2(5) == (11, 7)

    def test_sequences_continue_from_start(self) -> None:
        """Iterators agree with the closed forms"""
        assert list(itertools.islice(fibonacci_sequence(), 6)) == [0, 1, 1, 2, 3, 5]
        assert list(itertools.islice(fibonacci_sequence(50), 3)) == [fibonacci(50), fibonacci(51), fibonacci(52)]
        assert list(itertools.islice(lucas_sequence(), 5)) == [2, 1, 3, 4, 7]

    def test_negative_index_raises(self) -> None:
        """n >= 0"""
        with pytest.raises(ValueError):
            fibonacci(-1)


class TestRemoveFactor:
    """remove_factor()"""

    def test_remove(self) -> None:
        """Quotient and multiplicity"""
        assert remove_factor(72, 2) == (9, 3)
        assert remove_factor(-8, -2) == (1, 3)
        assert remove_factor(7, 3) == (7, 0)
        assert remove_factor(0, 5) == (0, 0)
        assert remove_factor(81, -1) == (81, 0)

    def test_zero_factor_raises(self) -> None:
        """Division by zero"""
        with pytest.raises(DivisionByZeroError):
            remove_factor(8, 0)
