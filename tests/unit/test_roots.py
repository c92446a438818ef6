"""
Tests for integer roots and perfect-power detection
"""

import pytest

from arbint.core.errors import NegativeRootError
from arbint.core.math.roots import (
    iroot,
    iroot_remainder,
    is_perfect_power,
    is_perfect_square,
)


class TestIroot:
    """iroot()"""

    @pytest.mark.parametrize(
        "value, n, expected",
        [
            (0, 5, 0),
            (1, 7, 1),
            (64, 3, 4),
            (63, 3, 3),
            (5, 3, 1),
            (8, 3, 2),
            (99, 2, 9),
            (-10, 3, -2),
            (-27, 3, -3),
            (123, 1, 123),
            (10**60, 3, 10**20),
            (10**60 - 1, 3, 10**20 - 1),
            (2**1000, 10, 2**100),
        ],
    )
    def test_known_roots(self, value: int, n: int, expected: int) -> None:
        """Truncated toward zero"""
        assert iroot(value, n) == expected

    @pytest.mark.parametrize("value", [2, 17, 10**40 + 7, 3**333])
    @pytest.mark.parametrize("n", [2, 3, 4, 7, 64])
    def test_root_brackets_value(self, value: int, n: int) -> None:
        """root**n <= value < (root+1)**n"""
        root = iroot(value, n)
        assert root**n <= value < (root + 1) ** n

    def test_even_root_of_negative_raises(self) -> None:
        """No real even root"""
        with pytest.raises(NegativeRootError):
            iroot(-4, 2)

    def test_non_positive_degree_raises(self) -> None:
        """n >= 1"""
        with pytest.raises(ValueError, match="n must be positive"):
            iroot(4, 0)


class TestIrootRemainder:
    """iroot_remainder()"""

    def test_remainder_sign_follows_value(self) -> None:
        """value == root**n + remainder"""
        assert iroot_remainder(10, 3) == (2, 2)
        assert iroot_remainder(-10, 3) == (-2, -2)
        assert iroot_remainder(27, 3) == (3, 0)


class TestPerfectPowers:
    """is_perfect_square / is_perfect_power"""

    def test_perfect_square(self) -> None:
        """Negatives never qualify"""
        assert is_perfect_square(0)
        assert is_perfect_square(10**40)
        assert not is_perfect_square(10**40 + 1)
        assert not is_perfect_square(-4)

    @pytest.mark.parametrize("value", [-1, 0, 1, 4, 8, -8, -64, 2**100, 3**7, 10**30, -(5**9)])
    def test_powers(self, value: int) -> None:
        """a**b for b > 1"""
        assert is_perfect_power(value)

    @pytest.mark.parametrize("value", [2, 12, -4, -16, 2**100 + 1, 6 * 10**20])
    def test_non_powers(self, value: int) -> None:
        """Negatives need an odd exponent"""
        assert not is_perfect_power(value)
