"""
Domain types of the integer engine: the integer itself, its result tuples,
word layouts and random generator handles.
"""

from arbint.core.domain.integer import DEFAULT_CAPACITY_BITS, ArbitraryInteger, IntegerLike
from arbint.core.domain.random_state import (
    LinearCongruentialParameters,
    RandomAlgorithm,
    RandomState,
)
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
from arbint.core.domain.word_format import Endianness, WordFormat, WordOrder

__all__ = [
    # Integer
    "ArbitraryInteger",
    "IntegerLike",
    "DEFAULT_CAPACITY_BITS",
    # Results
    "DivisionResult",
    "ExtendedGCD",
    "Float2Exp",
    "PrimeCandidate",
    "RootRemainder",
    "RootResult",
    "SequencePair",
    # Word layout
    "Endianness",
    "WordFormat",
    "WordOrder",
    # Random
    "LinearCongruentialParameters",
    "RandomAlgorithm",
    "RandomState",
    "SecureRandom",
    "DEFAULT_SECURE_RANDOM",
]
