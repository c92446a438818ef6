"""
Error Taxonomy — Recoverable Failures of the Integer Engine

Every failure raised by the engine derives from ArbitraryIntegerError and
from the matching builtin category, so callers may catch either the engine
type or the familiar Python one (ZeroDivisionError, ValueError).

CRITICAL INVARIANTS:
1. No error is fatal: the engine never terminates the process
2. A failing mutating operation leaves the receiver unchanged
3. Parse failures of constructors surface as None/False, not as exceptions
"""


class ArbitraryIntegerError(Exception):
    """Base class for all errors raised by the integer engine."""

    pass


class DivisionByZeroError(ArbitraryIntegerError, ZeroDivisionError):
    """
    Division, remainder or modulo with a zero divisor or modulus.

    Subclasses ZeroDivisionError so that code written against plain ints
    keeps working.
    """

    pass


class InvalidExponentError(ArbitraryIntegerError, ValueError):
    """Negative exponent passed to an operation indexed by a power of two."""

    def __init__(self, exponent: int, name: str = "exponent"):
        self.exponent = exponent
        super().__init__(f"{name} must be non-negative, got {exponent}")


class ParseError(ArbitraryIntegerError, ValueError):
    """Malformed or empty string input."""

    pass


class NoInverseError(ArbitraryIntegerError, ValueError):
    """Modular inverse requested for a non-invertible operand."""

    pass


class InvalidRadixError(ArbitraryIntegerError, ValueError):
    """Radix outside of the supported range."""

    def __init__(self, radix: int, allowed: str):
        self.radix = radix
        super().__init__(f"radix must be {allowed}, got {radix}")


class NegativeRootError(ArbitraryIntegerError, ValueError):
    """Even root of a negative value."""

    pass


class InvalidRandomStateError(ArbitraryIntegerError, ValueError):
    """Random state parameters that cannot produce a generator."""

    pass
