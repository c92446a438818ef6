"""
arbint — arbitrary-precision integer engine.

Exact arithmetic, four division conventions, number theory, bit operations,
fixed-width/float/radix/word-buffer conversions, and deterministic plus
cryptographically secure random sampling on a single mutable integer type.
"""

from arbint.core.domain import (
    ArbitraryInteger,
    DivisionResult,
    Endianness,
    ExtendedGCD,
    Float2Exp,
    PrimeCandidate,
    RandomAlgorithm,
    RandomState,
    RootRemainder,
    RootResult,
    SecureRandom,
    SequencePair,
    WordFormat,
    WordOrder,
)
from arbint.core.errors import (
    ArbitraryIntegerError,
    DivisionByZeroError,
    InvalidExponentError,
    InvalidRadixError,
    InvalidRandomStateError,
    NegativeRootError,
    NoInverseError,
    ParseError,
)
from arbint.core.math.number_theory import Primality

__version__ = "0.1.0"

__all__ = [
    # Integer
    "ArbitraryInteger",
    # Results
    "DivisionResult",
    "ExtendedGCD",
    "Float2Exp",
    "PrimeCandidate",
    "Primality",
    "RootRemainder",
    "RootResult",
    "SequencePair",
    # Word layout
    "Endianness",
    "WordFormat",
    "WordOrder",
    # Random
    "RandomAlgorithm",
    "RandomState",
    "SecureRandom",
    # Errors
    "ArbitraryIntegerError",
    "DivisionByZeroError",
    "InvalidExponentError",
    "InvalidRadixError",
    "InvalidRandomStateError",
    "NegativeRootError",
    "NoInverseError",
    "ParseError",
]
