"""
Tests for bit operations on the two's-complement view

The module is imported as a namespace so that its test_bit helper is not
collected as a test.
"""

import pytest

from arbint.core.math import bits


class TestSingleBits:
    """test/set/clear/complement"""

    def test_read_bits(self) -> None:
        """Negatives read as sign-extended ones"""
        assert bits.test_bit(0b100, 2)
        assert not bits.test_bit(0b100, 1)
        assert bits.test_bit(-1, 10_000)
        assert not bits.test_bit(-2, 0)

    def test_modify_bits(self) -> None:
        """Modifications act on the infinite two's-complement form"""
        assert bits.set_bit(0, 100) == 2**100
        assert bits.clear_bit(2**100 + 1, 100) == 1
        assert bits.clear_bit(-1, 0) == -2
        assert bits.complement_bit(-1, 3) == -9
        assert bits.complement_bit(5, 0) == 4

    @pytest.mark.parametrize("operation", [bits.test_bit, bits.set_bit, bits.clear_bit, bits.complement_bit])
    def test_negative_index_raises(self, operation) -> None:
        """index must be non-negative"""
        with pytest.raises(ValueError, match="index must be non-negative"):
            operation(1, -1)


class TestScans:
    """scan1/scan0"""

    def test_scan1(self) -> None:
        """First set bit at or after start"""
        assert bits.scan1(0b1000) == 3
        assert bits.scan1(0b1000, 4) is None
        assert bits.scan1(0) is None
        assert bits.scan1(-1, 100) == 100
        assert bits.scan1(-8) == 3

    def test_scan0(self) -> None:
        """First clear bit at or after start"""
        assert bits.scan0(0b0111) == 3
        assert bits.scan0(0, 50) == 50
        assert bits.scan0(-1) is None
        assert bits.scan0(-8, 3) is None
        assert bits.scan0(-8) == 0


class TestCounts:
    """Population count and hamming distance"""

    def test_population_count(self) -> None:
        """Infinite for negatives"""
        assert bits.population_count(0) == 0
        assert bits.population_count(0xFF00FF) == 16
        assert bits.population_count(-1) is None

    def test_hamming_distance(self) -> None:
        """Only defined for same-sign operands"""
        assert bits.hamming_distance(0b1010, 0b0110) == 2
        assert bits.hamming_distance(-1, -2) == 1
        assert bits.hamming_distance(-1, 1) is None
        assert bits.hamming_distance(7, 7) == 0


class TestLimbs:
    """64-bit limb view of the magnitude"""

    def test_limb_count(self) -> None:
        """Zero has no limbs"""
        assert bits.limb_count(0) == 0
        assert bits.limb_count(1) == 1
        assert bits.limb_count(2**64 - 1) == 1
        assert bits.limb_count(2**64) == 2
        assert bits.limb_count(-(2**64)) == 2

    def test_get_limb(self) -> None:
        """Least significant limb first; zero past the end"""
        value = (3 << 64) | 5
        assert bits.get_limb(value, 0) == 5
        assert bits.get_limb(value, 1) == 3
        assert bits.get_limb(value, 2) == 0
        assert bits.get_limb(-value, 1) == 3
