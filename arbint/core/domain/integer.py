"""
ArbitraryInteger — Mutable Arbitrary-Precision Integer

A signed integer whose magnitude is not bounded by any machine word. The
value lives in a single Python int, which is already sign-magnitude and
normalized; the capacity hint only records how much room the caller asked
for and never changes the observable value.

Operations come in two forms:
- "X" (adding, floor_divided, bitwise_and, ...) returns a new value and
  leaves every operand untouched
- "form-X" (add, negate, form_bitwise_and, ...) mutates the receiver in place
  and returns None

Python operators and augmented assignment always use the "X" form, so
`b = a.copy(); a += 1` never changes b. In-place methods compute the complete
result before storing it, so a failing call leaves the receiver unchanged and
self-combination (`a.add(a)`, `a.add_product(a, a)`) is safe.

CRITICAL INVARIANTS:
1. sign is 0 exactly for zero; equality and ordering are by value
2. Every operation producing a value produces an independent object
3. Division by zero raises DivisionByZeroError and mutates nothing
4. Parse failures return None / False and mutate nothing
"""

import operator
from typing import Callable, Final, Iterator, Union

from arbint.core.domain.random_state import RandomState
from arbint.core.domain.results import (
    DivisionResult,
    ExtendedGCD,
    Float2Exp,
    PrimeCandidate,
    RootRemainder,
    RootResult,
    SequencePair,
)
from arbint.core.domain.secure_random import DEFAULT_SECURE_RANDOM, SecureRandom
from arbint.core.domain.word_format import WordFormat
from arbint.core.errors import ParseError
from arbint.core.math import bits, division, floats, number_theory, radix, roots, words
from arbint.core.math.number_theory import DEFAULT_PRIMALITY_REPS, Primality
from arbint.core.math.numerical_safeguards import (
    LIMB_BITS,
    compare_values,
    compare_with_float,
    fits_signed,
    fits_unsigned,
    sign_of,
    validate_exponent,
    validate_non_negative,
    wrap_signed,
    wrap_unsigned,
)

# Capacity reported for a freshly created value (one limb)
DEFAULT_CAPACITY_BITS: Final[int] = LIMB_BITS

IntegerLike = Union["ArbitraryInteger", int]


def _as_int(value: object) -> int:
    """Integer value of an ArbitraryInteger, int or __index__ implementer."""
    if isinstance(value, ArbitraryInteger):
        return value._value
    if isinstance(value, int):
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None


def _as_int_or_none(value: object) -> int | None:
    """Like _as_int, but None for operands an operator should decline."""
    if isinstance(value, ArbitraryInteger):
        return value._value
    if isinstance(value, int):
        return int(value)
    if hasattr(type(value), "__index__"):
        return operator.index(value)
    return None


def _to_limb_capacity(bits_requested: int) -> int:
    return -(-bits_requested // LIMB_BITS) * LIMB_BITS


class ArbitraryInteger:
    """
    Arbitrary-precision signed integer.

    Args:
        value: int, float (truncated toward zero), str, or ArbitraryInteger
        base: Radix of a str value (0 or 2..62, default 10)

    Raises:
        ParseError: If a str value is malformed
        ValueError: If a float value is NaN or infinite
        TypeError: For any other value type

    Examples:
        >>> ArbitraryInteger(42.7)
        ArbitraryInteger(42)
        >>> ArbitraryInteger("-ff", 16)
        ArbitraryInteger(-255)
        >>> ArbitraryInteger(10).floor_divided(3)
        ArbitraryInteger(3)
    """

    __slots__ = ("_value", "_capacity_bits")

    # Mutable: value equality without a stable hash
    __hash__ = None

    def __init__(self, value: Union[IntegerLike, float, str] = 0, base: int | None = None):
        if isinstance(value, str):
            base = radix.DEFAULT_RADIX if base is None else base
            parsed = radix.parse(value, base)
            if parsed is None:
                raise ParseError(f"invalid literal for base {base}: {value!r}")
            self._value = parsed
        elif base is not None:
            raise TypeError("base is only accepted together with a str value")
        elif isinstance(value, float):
            self._value = floats.int_from_float(value)
        else:
            self._value = _as_int(value)
        self._capacity_bits = DEFAULT_CAPACITY_BITS

    @classmethod
    def _wrap(cls, value: int) -> "ArbitraryInteger":
        obj = cls.__new__(cls)
        obj._value = value
        obj._capacity_bits = DEFAULT_CAPACITY_BITS
        return obj

    # =========================================================================
    # CONSTRUCTION AND LIFECYCLE
    # =========================================================================

    @classmethod
    def with_capacity(cls, bits: int) -> "ArbitraryInteger":
        """
        Zero with room reserved for `bits` bits.

        The capacity is a hint only: the value is always zero.
        """
        validate_non_negative(bits, "bits")
        obj = cls._wrap(0)
        obj._capacity_bits = _to_limb_capacity(bits)
        return obj

    @classmethod
    def from_string(cls, text: str, base: int = radix.DEFAULT_RADIX) -> "ArbitraryInteger | None":
        """
        Parse a radix literal.

        Args:
            text: Literal with an optional leading '-'
            base: 0 (auto-detect prefix) or 2..62

        Returns:
            The parsed value, or None for an empty or malformed literal

        Raises:
            InvalidRadixError: If base is not supported

        Examples:
            >>> ArbitraryInteger.from_string("0x1f", 0)
            ArbitraryInteger(31)
            >>> ArbitraryInteger.from_string("") is None
            True
        """
        parsed = radix.parse(text, base)
        return None if parsed is None else cls._wrap(parsed)

    @classmethod
    def import_words(cls, data: bytes, fmt: WordFormat | None = None) -> "ArbitraryInteger | None":
        """
        Rebuild a value from a buffer written by export_words.

        Returns:
            The value, or None for an empty, truncated or malformed buffer
        """
        fmt = fmt or WordFormat()
        value = words.import_words(
            bytes(data),
            size=fmt.size,
            nails=fmt.nails,
            most_significant_first=fmt.most_significant_first,
            byteorder=fmt.byteorder,
        )
        return None if value is None else cls._wrap(value)

    @property
    def capacity_bits(self) -> int:
        """Reserved capacity in bits, never below the space the value needs."""
        return max(self._capacity_bits, _to_limb_capacity(self._value.bit_length()))

    def reallocate(self, bits: int) -> None:
        """Change the capacity hint; the value is preserved."""
        validate_non_negative(bits, "bits")
        self._capacity_bits = _to_limb_capacity(bits)

    def swap(self, other: "ArbitraryInteger") -> None:
        """Exchange contents with other in O(1); self-swap is a no-op."""
        if not isinstance(other, ArbitraryInteger):
            raise TypeError(f"other must be ArbitraryInteger, got {type(other).__name__}")
        self._value, other._value = other._value, self._value
        self._capacity_bits, other._capacity_bits = other._capacity_bits, self._capacity_bits

    def set(self, value: Union[IntegerLike, float]) -> None:
        """Replace the value; later changes to the source are not observed."""
        if isinstance(value, float):
            self._value = floats.int_from_float(value)
        else:
            self._value = _as_int(value)

    def set_from_string(self, text: str, base: int = radix.DEFAULT_RADIX) -> bool:
        """
        Replace the value with a parsed literal.

        Returns:
            True on success; False for a malformed literal, leaving the value
            unchanged
        """
        parsed = radix.parse(text, base)
        if parsed is None:
            return False
        self._value = parsed
        return True

    def copy(self) -> "ArbitraryInteger":
        clone = self._wrap(self._value)
        clone._capacity_bits = self._capacity_bits
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo) -> "ArbitraryInteger":
        return self.copy()

    def __reduce__(self):
        return (type(self), (self._value,))

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return self._value != 0

    def __str__(self) -> str:
        return radix.render(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({radix.render(self._value)})"

    def __trunc__(self) -> "ArbitraryInteger":
        return self.copy()

    __floor__ = __trunc__
    __ceil__ = __trunc__

    def __round__(self, ndigits: int | None = None) -> "ArbitraryInteger":
        return self.copy()

    def to_int(self, width: int = 64) -> int:
        """
        Signed fixed-width value, reduced modulo 2**width when it does not fit.

        Examples:
            >>> ArbitraryInteger(2**63).to_int()
            -9223372036854775808
            >>> ArbitraryInteger(-42).to_int(16)
            -42
        """
        return wrap_signed(self._value, width)

    def to_uint(self, width: int = 64) -> int:
        """
        Unsigned fixed-width value of the magnitude modulo 2**width.

        The sign is dropped: ArbitraryInteger(-42).to_uint() == 42.
        """
        return wrap_unsigned(self._value, width)

    def fits_in_int(self, width: int) -> bool:
        return fits_signed(self._value, width)

    def fits_in_uint(self, width: int) -> bool:
        return fits_unsigned(self._value, width)

    def fits_in_int16(self) -> bool:
        return fits_signed(self._value, 16)

    def fits_in_int32(self) -> bool:
        return fits_signed(self._value, 32)

    def fits_in_int64(self) -> bool:
        return fits_signed(self._value, 64)

    def fits_in_uint16(self) -> bool:
        return fits_unsigned(self._value, 16)

    def fits_in_uint32(self) -> bool:
        return fits_unsigned(self._value, 32)

    def fits_in_uint64(self) -> bool:
        return fits_unsigned(self._value, 64)

    def to_float(self) -> float:
        """Nearest double toward zero; a signed infinity beyond the double range."""
        return floats.float_from_int(self._value)

    def to_float_2exp(self) -> Float2Exp:
        """
        (mantissa, exponent) with 0.5 <= |mantissa| < 1, or (0.0, 0) for zero.

        Examples:
            >>> ArbitraryInteger(8).to_float_2exp()
            Float2Exp(mantissa=0.5, exponent=4)
        """
        return Float2Exp(*floats.float_2exp_from_int(self._value))

    def to_string(self, base: int = radix.DEFAULT_RADIX) -> str:
        """
        Render in base 2..62, or -36..-2 for uppercase letters.

        Raises:
            InvalidRadixError: If base is not supported
        """
        return radix.render(self._value, base)

    def size_in_base(self, base: int = radix.DEFAULT_RADIX) -> int:
        """Exact length of to_string(base), sign included, without rendering."""
        return radix.size_in_base(self._value, base)

    def export_words(self, fmt: WordFormat | None = None) -> bytes:
        """
        Serialize as a sign byte followed by magnitude words.

        Args:
            fmt: Word layout (default: plain big-endian bytes)
        """
        fmt = fmt or WordFormat()
        return words.export_words(
            self._value,
            size=fmt.size,
            nails=fmt.nails,
            most_significant_first=fmt.most_significant_first,
            byteorder=fmt.byteorder,
        )

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare(self, other: Union[IntegerLike, float]) -> int:
        """
        Tri-state comparison with an integer or a float.

        Returns:
            -1, 0 or +1

        Raises:
            ValueError: If other is a NaN float
        """
        if isinstance(other, float):
            return compare_with_float(self._value, other)
        return compare_values(self._value, _as_int(other))

    def compare_absolute_value(self, other: Union[IntegerLike, float]) -> int:
        """Tri-state comparison of |self| and |other|."""
        if isinstance(other, float):
            return compare_with_float(abs(self._value), abs(other))
        return compare_values(abs(self._value), abs(_as_int(other)))

    def _compare_operand(self, other: object) -> int | None:
        if isinstance(other, float):
            return compare_with_float(self._value, other)
        value = _as_int_or_none(other)
        if value is None:
            return None
        return compare_values(self._value, value)

    def _ordered(self, other: object, predicate: Callable[[int], bool]) -> bool:
        # NaN is unordered: every comparison with it is False
        if isinstance(other, float) and other != other:
            return False
        result = self._compare_operand(other)
        return NotImplemented if result is None else predicate(result)

    def __eq__(self, other: object) -> bool:
        return self._ordered(other, lambda c: c == 0)

    def __lt__(self, other: object) -> bool:
        return self._ordered(other, lambda c: c < 0)

    def __le__(self, other: object) -> bool:
        return self._ordered(other, lambda c: c <= 0)

    def __gt__(self, other: object) -> bool:
        return self._ordered(other, lambda c: c > 0)

    def __ge__(self, other: object) -> bool:
        return self._ordered(other, lambda c: c >= 0)

    @property
    def sign(self) -> int:
        """-1, 0 or +1."""
        return sign_of(self._value)

    @property
    def is_zero(self) -> bool:
        return self._value == 0

    @property
    def is_negative(self) -> bool:
        return self._value < 0

    @property
    def is_positive(self) -> bool:
        return self._value > 0

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def adding(self, other: IntegerLike) -> "ArbitraryInteger":
        return self._wrap(self._value + _as_int(other))

    def subtracting(self, other: IntegerLike) -> "ArbitraryInteger":
        return self._wrap(self._value - _as_int(other))

    def multiplied(self, other: IntegerLike) -> "ArbitraryInteger":
        return self._wrap(self._value * _as_int(other))

    def negated(self) -> "ArbitraryInteger":
        return self._wrap(-self._value)

    def absolute_value(self) -> "ArbitraryInteger":
        return self._wrap(abs(self._value))

    def add(self, other: IntegerLike) -> None:
        self._value += _as_int(other)

    def subtract(self, other: IntegerLike) -> None:
        self._value -= _as_int(other)

    def multiply(self, other: IntegerLike) -> None:
        self._value *= _as_int(other)

    def negate(self) -> None:
        self._value = -self._value

    def make_absolute(self) -> None:
        self._value = abs(self._value)

    def adding_product(self, a: IntegerLike, b: IntegerLike) -> "ArbitraryInteger":
        """self + a*b as a new value."""
        return self._wrap(self._value + _as_int(a) * _as_int(b))

    def subtracting_product(self, a: IntegerLike, b: IntegerLike) -> "ArbitraryInteger":
        """self - a*b as a new value."""
        return self._wrap(self._value - _as_int(a) * _as_int(b))

    def add_product(self, a: IntegerLike, b: IntegerLike) -> None:
        """
        self += a*b in one step.

        a and b are read before the receiver changes, so either may be self.
        """
        self._value += _as_int(a) * _as_int(b)

    def subtract_product(self, a: IntegerLike, b: IntegerLike) -> None:
        """self -= a*b in one step; a or b may be self."""
        self._value -= _as_int(a) * _as_int(b)

    def multiplied_by_power_of_2(self, exponent: int) -> "ArbitraryInteger":
        """
        self * 2**exponent.

        Raises:
            InvalidExponentError: If exponent < 0
        """
        validate_exponent(exponent)
        return self._wrap(self._value << exponent)

    def multiply_by_power_of_2(self, exponent: int) -> None:
        validate_exponent(exponent)
        self._value <<= exponent

    def __add__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(self._value - value)

    def __rsub__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(value - self._value)

    def __mul__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(self._value * value)

    __rmul__ = __mul__

    def __neg__(self) -> "ArbitraryInteger":
        return self.negated()

    def __pos__(self) -> "ArbitraryInteger":
        return self.copy()

    def __abs__(self) -> "ArbitraryInteger":
        return self.absolute_value()

    # =========================================================================
    # DIVISION
    # =========================================================================

    def _pair(self, result: division.QuotientRemainder) -> DivisionResult:
        return DivisionResult(self._wrap(result.quotient), self._wrap(result.remainder))

    def floor_quotient_and_remainder(self, divisor: IntegerLike) -> DivisionResult:
        """
        Quotient rounded toward -inf; remainder takes the sign of the divisor.

        Raises:
            DivisionByZeroError: If divisor == 0
        """
        return self._pair(division.floor_divmod(self._value, _as_int(divisor)))

    def floor_divided(self, divisor: IntegerLike) -> "ArbitraryInteger":
        return self.floor_quotient_and_remainder(divisor).quotient

    def floor_remainder(self, divisor: IntegerLike) -> "ArbitraryInteger":
        return self.floor_quotient_and_remainder(divisor).remainder

    def ceiling_quotient_and_remainder(self, divisor: IntegerLike) -> DivisionResult:
        """
        Quotient rounded toward +inf; remainder takes the opposite sign of the divisor.

        Raises:
            DivisionByZeroError: If divisor == 0
        """
        return self._pair(division.ceiling_divmod(self._value, _as_int(divisor)))

    def ceiling_divided(self, divisor: IntegerLike) -> "ArbitraryInteger":
        return self.ceiling_quotient_and_remainder(divisor).quotient

    def ceiling_remainder(self, divisor: IntegerLike) -> "ArbitraryInteger":
        return self.ceiling_quotient_and_remainder(divisor).remainder

    def truncated_quotient_and_remainder(self, divisor: IntegerLike) -> DivisionResult:
        """
        Quotient rounded toward zero; remainder takes the sign of the dividend.

        Raises:
            DivisionByZeroError: If divisor == 0
        """
        return self._pair(division.truncating_divmod(self._value, _as_int(divisor)))

    def truncated_divided(self, divisor: IntegerLike) -> "ArbitraryInteger":
        return self.truncated_quotient_and_remainder(divisor).quotient

    def truncated_remainder(self, divisor: IntegerLike) -> "ArbitraryInteger":
        return self.truncated_quotient_and_remainder(divisor).remainder

    def exactly_divided(self, divisor: IntegerLike) -> "ArbitraryInteger":
        """
        Quotient when divisor is known to divide self.

        The result is unspecified when it does not.

        Raises:
            DivisionByZeroError: If divisor == 0
        """
        return self._wrap(division.exact_divide(self._value, _as_int(divisor)))

    def modulo(self, modulus: IntegerLike) -> "ArbitraryInteger":
        """
        Remainder in [0, |modulus|).

        Examples:
            >>> ArbitraryInteger(-10).modulo(3)
            ArbitraryInteger(2)
        """
        return self._wrap(division.euclidean_modulo(self._value, _as_int(modulus)))

    def is_divisible(self, divisor: IntegerLike) -> bool:
        """True if divisor divides self; only zero is divisible by zero."""
        return division.is_divisible(self._value, _as_int(divisor))

    def is_divisible_by_power_of_2(self, exponent: int) -> bool:
        return division.is_divisible_2exp(self._value, exponent)

    def is_congruent(self, other: IntegerLike, modulus: IntegerLike) -> bool:
        """self ≡ other (mod modulus); congruence modulo zero is equality."""
        return division.is_congruent(self._value, _as_int(other), _as_int(modulus))

    def is_congruent_modulo_power_of_2(self, other: IntegerLike, exponent: int) -> bool:
        return division.is_congruent_2exp(self._value, _as_int(other), exponent)

    def floor_quotient_and_remainder_by_power_of_2(self, exponent: int) -> DivisionResult:
        """
        Floor division by 2**exponent using shifts only.

        Raises:
            InvalidExponentError: If exponent < 0
        """
        return self._pair(division.floor_divmod_2exp(self._value, exponent))

    def floor_divided_by_power_of_2(self, exponent: int) -> "ArbitraryInteger":
        return self.floor_quotient_and_remainder_by_power_of_2(exponent).quotient

    def floor_remainder_by_power_of_2(self, exponent: int) -> "ArbitraryInteger":
        return self.floor_quotient_and_remainder_by_power_of_2(exponent).remainder

    def ceiling_quotient_and_remainder_by_power_of_2(self, exponent: int) -> DivisionResult:
        return self._pair(division.ceiling_divmod_2exp(self._value, exponent))

    def ceiling_divided_by_power_of_2(self, exponent: int) -> "ArbitraryInteger":
        return self.ceiling_quotient_and_remainder_by_power_of_2(exponent).quotient

    def ceiling_remainder_by_power_of_2(self, exponent: int) -> "ArbitraryInteger":
        return self.ceiling_quotient_and_remainder_by_power_of_2(exponent).remainder

    def truncated_quotient_and_remainder_by_power_of_2(self, exponent: int) -> DivisionResult:
        return self._pair(division.truncating_divmod_2exp(self._value, exponent))

    def truncated_divided_by_power_of_2(self, exponent: int) -> "ArbitraryInteger":
        return self.truncated_quotient_and_remainder_by_power_of_2(exponent).quotient

    def truncated_remainder_by_power_of_2(self, exponent: int) -> "ArbitraryInteger":
        return self.truncated_quotient_and_remainder_by_power_of_2(exponent).remainder

    def __floordiv__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self.floor_divided(value)

    def __rfloordiv__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(value).floor_divided(self)

    def __mod__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self.floor_remainder(value)

    def __rmod__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(value).floor_remainder(self)

    def __divmod__(self, other: object) -> DivisionResult:
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self.floor_quotient_and_remainder(value)

    def __rdivmod__(self, other: object) -> DivisionResult:
        value = _as_int_or_none(other)
        if value is None:
            return NotImplemented
        return self._wrap(value).floor_quotient_and_remainder(self)

    # =========================================================================
    # EXPONENTIATION
    # =========================================================================

    def raised_to_power(self, exponent: int) -> "ArbitraryInteger":
        """
        self**exponent; 0**0 == 1.

        Raises:
            InvalidExponentError: If exponent < 0
        """
        exponent = _as_int(exponent)
        validate_exponent(exponent)
        return self._wrap(self._value**exponent)

    @classmethod
    def power(cls, base: IntegerLike, exponent: int) -> "ArbitraryInteger":
        """base**exponent for a machine-sized base."""
        return cls._wrap(_as_int(base)).raised_to_power(exponent)

    def raised_to_power_mod(self, exponent: IntegerLike, modulus: IntegerLike) -> "ArbitraryInteger":
        """
        self**exponent mod |modulus|, in [0, |modulus|).

        A negative exponent raises the modular inverse instead.

        Raises:
            DivisionByZeroError: If modulus == 0
            NoInverseError: If exponent < 0 and self has no inverse

        Examples:
            >>> ArbitraryInteger(5).raised_to_power_mod(3, 13)
            ArbitraryInteger(8)
        """
        return self._wrap(number_theory.powm(self._value, _as_int(exponent), _as_int(modulus)))

    def raised_to_power_mod_secure(
        self, exponent: IntegerLike, modulus: IntegerLike
    ) -> "ArbitraryInteger":
        """
        Same result as raised_to_power_mod, computed by a Montgomery ladder
        whose work does not depend on the exponent's bit pattern.

        Uniform timing is claimed for odd moduli only.
        """
        return self._wrap(
            number_theory.powm_secure(self._value, _as_int(exponent), _as_int(modulus))
        )

    def __pow__(self, exponent: object, modulus: object = None) -> "ArbitraryInteger":
        value = _as_int_or_none(exponent)
        if value is None:
            return NotImplemented
        if modulus is None:
            return self.raised_to_power(value)
        return self.raised_to_power_mod(value, _as_int(modulus))

    def __rpow__(self, base: object) -> "ArbitraryInteger":
        value = _as_int_or_none(base)
        return NotImplemented if value is None else self.power(value, self._value)

    # =========================================================================
    # NUMBER THEORY
    # =========================================================================

    @classmethod
    def gcd(cls, a: IntegerLike, b: IntegerLike) -> "ArbitraryInteger":
        """Non-negative greatest common divisor; gcd(0, 0) == 0."""
        return cls._wrap(number_theory.gcd(_as_int(a), _as_int(b)))

    @classmethod
    def lcm(cls, a: IntegerLike, b: IntegerLike) -> "ArbitraryInteger":
        """Non-negative least common multiple; 0 if either operand is 0."""
        return cls._wrap(number_theory.lcm(_as_int(a), _as_int(b)))

    @classmethod
    def extended_gcd(cls, a: IntegerLike, b: IntegerLike) -> ExtendedGCD:
        """
        (g, s, t) with a*s + b*t == g >= 0.

        Examples:
            >>> g, s, t = ArbitraryInteger.extended_gcd(48, 18)
            >>> int(g), 48 * int(s) + 18 * int(t)
            (6, 6)
        """
        g, s, t = number_theory.extended_gcd(_as_int(a), _as_int(b))
        return ExtendedGCD(cls._wrap(g), cls._wrap(s), cls._wrap(t))

    def modular_inverse(self, modulus: IntegerLike) -> "ArbitraryInteger | None":
        """
        Inverse modulo |modulus| in [0, |modulus|).

        Returns:
            None when modulus is 0 or self is not coprime to it; 0 when
            |modulus| == 1
        """
        inverse = number_theory.modular_inverse(self._value, _as_int(modulus))
        return None if inverse is None else self._wrap(inverse)

    @staticmethod
    def jacobi_symbol(a: IntegerLike, n: IntegerLike) -> int:
        """
        Jacobi symbol (a/n) in {-1, 0, 1}.

        Raises:
            ValueError: If n is not positive and odd
        """
        return number_theory.jacobi(_as_int(a), _as_int(n))

    @staticmethod
    def kronecker_symbol(a: IntegerLike, n: IntegerLike) -> int:
        """Kronecker symbol (a/n) in {-1, 0, 1} for any n."""
        return number_theory.kronecker(_as_int(a), _as_int(n))

    def is_probable_prime(self, reps: int = DEFAULT_PRIMALITY_REPS) -> Primality:
        """
        Classify |self| with reps rounds of Miller-Rabin.

        Returns:
            Primality.PRIME (exact, small values only), PROBABLY_PRIME or
            COMPOSITE; compares equal to 2, 1 and 0
        """
        return number_theory.probable_prime(self._value, reps)

    def miller_rabin_test(self, reps: int) -> int:
        """1 if |self| passes reps Miller-Rabin rounds, else 0."""
        return number_theory.miller_rabin(self._value, reps)

    def next_prime(self) -> "ArbitraryInteger":
        """Smallest (probable) prime strictly greater than self."""
        return self._wrap(number_theory.next_prime(self._value))

    def previous_prime(self) -> PrimeCandidate | None:
        """Largest prime strictly below self and its certainty; None at or below 2."""
        found = number_theory.previous_prime(self._value)
        if found is None:
            return None
        prime, certainty = found
        return PrimeCandidate(self._wrap(prime), certainty)

    @classmethod
    def factorial(cls, n: int) -> "ArbitraryInteger":
        return cls._wrap(number_theory.factorial(_as_int(n)))

    @classmethod
    def double_factorial(cls, n: int) -> "ArbitraryInteger":
        return cls._wrap(number_theory.double_factorial(_as_int(n)))

    @classmethod
    def multi_factorial(cls, n: int, k: int) -> "ArbitraryInteger":
        """n * (n-k) * (n-2k) * ...; k == 1 is the ordinary factorial."""
        return cls._wrap(number_theory.multi_factorial(_as_int(n), _as_int(k)))

    @classmethod
    def binomial(cls, n: IntegerLike, k: int) -> "ArbitraryInteger":
        return cls._wrap(number_theory.binomial(_as_int(n), _as_int(k)))

    @classmethod
    def primorial(cls, n: int) -> "ArbitraryInteger":
        """Product of the primes <= n; 1 for n < 2."""
        return cls._wrap(number_theory.primorial(_as_int(n)))

    @classmethod
    def fibonacci(cls, n: int) -> "ArbitraryInteger":
        return cls._wrap(number_theory.fibonacci(_as_int(n)))

    @classmethod
    def fibonacci2(cls, n: int) -> SequencePair:
        """(F(n), F(n-1)), with F(-1) == 1 for n == 0."""
        current, previous = number_theory.fibonacci2(_as_int(n))
        return SequencePair(cls._wrap(current), cls._wrap(previous))

    @classmethod
    def lucas(cls, n: int) -> "ArbitraryInteger":
        return cls._wrap(number_theory.lucas(_as_int(n)))

    @classmethod
    def lucas2(cls, n: int) -> SequencePair:
        """(L(n), L(n-1)), with L(-1) == -1 for n == 0."""
        current, previous = number_theory.lucas2(_as_int(n))
        return SequencePair(cls._wrap(current), cls._wrap(previous))

    @classmethod
    def fibonacci_sequence(cls, start: int = 0) -> Iterator["ArbitraryInteger"]:
        """F(start), F(start+1), ... with one addition per term."""
        return (cls._wrap(term) for term in number_theory.fibonacci_sequence(start))

    @classmethod
    def lucas_sequence(cls, start: int = 0) -> Iterator["ArbitraryInteger"]:
        return (cls._wrap(term) for term in number_theory.lucas_sequence(start))

    def remove(self, factor: IntegerLike) -> int:
        """
        Divide factor out of self as often as possible, in place.

        Returns:
            Number of divisions performed

        Raises:
            DivisionByZeroError: If factor == 0

        Examples:
            >>> x = ArbitraryInteger(72)
            >>> x.remove(2), x
            (3, ArbitraryInteger(9))
        """
        quotient, count = number_theory.remove_factor(self._value, _as_int(factor))
        self._value = quotient
        return count

    # =========================================================================
    # ROOTS
    # =========================================================================

    def nth_root(self, n: int) -> RootResult:
        """
        Root truncated toward zero and whether it is exact.

        Raises:
            ValueError: If n < 1
            NegativeRootError: If self < 0 and n is even

        Examples:
            >>> ArbitraryInteger(64).nth_root(3)
            RootResult(root=ArbitraryInteger(4), is_exact=True)
        """
        root, remainder = roots.iroot_remainder(self._value, n)
        return RootResult(self._wrap(root), remainder == 0)

    def nth_root_with_remainder(self, n: int) -> RootRemainder:
        """(root, remainder) with self == root**n + remainder."""
        root, remainder = roots.iroot_remainder(self._value, n)
        return RootRemainder(self._wrap(root), self._wrap(remainder))

    def square_root(self) -> "ArbitraryInteger":
        return self.nth_root(2).root

    def square_root_with_remainder(self) -> RootRemainder:
        return self.nth_root_with_remainder(2)

    def is_perfect_square(self) -> bool:
        return roots.is_perfect_square(self._value)

    def is_perfect_power(self) -> bool:
        """self == a**b for some b > 1; true for 0, 1 and -1."""
        return roots.is_perfect_power(self._value)

    # =========================================================================
    # BIT OPERATIONS
    # =========================================================================

    def bitwise_and(self, other: IntegerLike) -> "ArbitraryInteger":
        return self._wrap(self._value & _as_int(other))

    def bitwise_or(self, other: IntegerLike) -> "ArbitraryInteger":
        return self._wrap(self._value | _as_int(other))

    def bitwise_xor(self, other: IntegerLike) -> "ArbitraryInteger":
        return self._wrap(self._value ^ _as_int(other))

    def bitwise_not(self) -> "ArbitraryInteger":
        """One's complement: -self - 1."""
        return self._wrap(~self._value)

    def form_bitwise_and(self, other: IntegerLike) -> None:
        self._value &= _as_int(other)

    def form_bitwise_or(self, other: IntegerLike) -> None:
        self._value |= _as_int(other)

    def form_bitwise_xor(self, other: IntegerLike) -> None:
        self._value ^= _as_int(other)

    def form_bitwise_not(self) -> None:
        self._value = ~self._value

    def left_shifted(self, count: int) -> "ArbitraryInteger":
        """self * 2**count."""
        validate_exponent(count, "count")
        return self._wrap(self._value << count)

    def right_shifted(self, count: int) -> "ArbitraryInteger":
        """floor(self / 2**count), sign preserving."""
        validate_exponent(count, "count")
        return self._wrap(self._value >> count)

    def left_shift(self, count: int) -> None:
        validate_exponent(count, "count")
        self._value <<= count

    def right_shift(self, count: int) -> None:
        validate_exponent(count, "count")
        self._value >>= count

    def __and__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(self._value & value)

    __rand__ = __and__

    def __or__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(self._value | value)

    __ror__ = __or__

    def __xor__(self, other: object) -> "ArbitraryInteger":
        value = _as_int_or_none(other)
        return NotImplemented if value is None else self._wrap(self._value ^ value)

    __rxor__ = __xor__

    def __invert__(self) -> "ArbitraryInteger":
        return self.bitwise_not()

    def __lshift__(self, count: object) -> "ArbitraryInteger":
        value = _as_int_or_none(count)
        return NotImplemented if value is None else self.left_shifted(value)

    def __rshift__(self, count: object) -> "ArbitraryInteger":
        value = _as_int_or_none(count)
        return NotImplemented if value is None else self.right_shifted(value)

    def test_bit(self, index: int) -> bool:
        """Bit at index in the infinite two's-complement view."""
        return bits.test_bit(self._value, index)

    def set_bit(self, index: int) -> None:
        self._value = bits.set_bit(self._value, index)

    def clear_bit(self, index: int) -> None:
        self._value = bits.clear_bit(self._value, index)

    def complement_bit(self, index: int) -> None:
        self._value = bits.complement_bit(self._value, index)

    def scan1(self, start: int = 0) -> int | None:
        """First 1 bit at or after start, or None if there is none."""
        return bits.scan1(self._value, start)

    def scan0(self, start: int = 0) -> int | None:
        """First 0 bit at or after start; None for negative values with no clear bit left."""
        return bits.scan0(self._value, start)

    @property
    def first_set_bit(self) -> int | None:
        return bits.scan1(self._value, 0)

    @property
    def last_set_bit(self) -> int | None:
        """Index of the highest bit of the magnitude; None for zero."""
        return self.bit_count - 1 if self._value else None

    @property
    def population_count(self) -> int | None:
        """Number of 1 bits; None for negative values (infinitely many)."""
        return bits.population_count(self._value)

    def hamming_distance(self, other: IntegerLike) -> int | None:
        """Number of differing bits; None when the signs differ."""
        return bits.hamming_distance(self._value, _as_int(other))

    @property
    def is_odd(self) -> bool:
        return bool(self._value & 1)

    @property
    def is_even(self) -> bool:
        return not self._value & 1

    @property
    def bit_count(self) -> int:
        """Bits in the magnitude (0 for zero)."""
        return self._value.bit_length()

    def bit_length(self) -> int:
        return self._value.bit_length()

    @property
    def limb_count(self) -> int:
        """Number of 64-bit limbs in the magnitude."""
        return bits.limb_count(self._value)

    def get_limb(self, index: int) -> int:
        """64-bit limb of the magnitude at index (least significant first)."""
        return bits.get_limb(self._value, index)

    # =========================================================================
    # RANDOM GENERATION
    # =========================================================================

    @classmethod
    def random_bits(cls, bits_count: int, state: RandomState) -> "ArbitraryInteger":
        """Uniform value in [0, 2**bits_count) drawn from state."""
        return cls._wrap(state.getrandbits(bits_count))

    @classmethod
    def random_below(cls, upper_bound: IntegerLike, state: RandomState) -> "ArbitraryInteger":
        """
        Uniform value in [0, upper_bound) drawn from state.

        Raises:
            ValueError: If upper_bound <= 0
        """
        return cls._wrap(state.random_below(_as_int(upper_bound)))

    @classmethod
    def random_long(cls, bits_count: int, state: RandomState) -> "ArbitraryInteger":
        """Value of bits_count bits made of long runs of ones and zeros."""
        return cls._wrap(state.long_runs(bits_count))

    @classmethod
    def secure_random_bits(
        cls, bits_count: int, source: SecureRandom | None = None
    ) -> "ArbitraryInteger":
        """
        Secure random value with exactly bits_count significant bits.

        Raises:
            ValueError: If bits_count <= 0
        """
        source = source or DEFAULT_SECURE_RANDOM
        return cls._wrap(source.random_bits(bits_count))

    @classmethod
    def secure_random_below(
        cls, upper_bound: IntegerLike, source: SecureRandom | None = None
    ) -> "ArbitraryInteger":
        """
        Secure uniform value in [0, upper_bound); upper_bound == 1 gives 0.

        Raises:
            ValueError: If upper_bound <= 0
        """
        source = source or DEFAULT_SECURE_RANDOM
        return cls._wrap(source.random_below(_as_int(upper_bound)))
