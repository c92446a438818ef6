"""
RandomState — Seeded Deterministic Generator Handle

An explicit, copyable generator state passed to every deterministic random
operation. Two algorithms are available:

- MERSENNE_TWISTER: the interpreter's MT19937 (random.Random)
- LINEAR_CONGRUENTIAL: X <- (a*X + c) mod 2**m, emitting the high m//2 bits
  of every step

CRITICAL INVARIANTS:
1. Same algorithm, parameters and seed => identical output sequence
2. copy() produces a state whose future output is independent of the source
3. No hidden global state: every generator lives inside its handle
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Final

from arbint.core.errors import InvalidRandomStateError
from arbint.core.math.numerical_safeguards import (
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Largest size accepted by linear_congruential_size (output bits per step)
MAX_LINEAR_CONGRUENTIAL_SIZE: Final[int] = 128

# Parameters of the size-selected generators: a ≡ 5 (mod 8) and odd c give
# the full period 2**m for every modulus 2**m
LINEAR_CONGRUENTIAL_MULTIPLIER: Final[int] = 6364136223846793005
LINEAR_CONGRUENTIAL_ADDEND: Final[int] = 1442695040888963407

# Largest request of random_bits
MAX_RANDOM_BITS: Final[int] = 64


class RandomAlgorithm(str, Enum):
    """Generator algorithm behind a RandomState"""

    MERSENNE_TWISTER = "mersenne_twister"
    LINEAR_CONGRUENTIAL = "linear_congruential"


@dataclass(frozen=True)
class LinearCongruentialParameters:
    """Parameters of X <- (multiplier*X + addend) mod 2**exponent."""

    multiplier: int
    addend: int
    exponent: int

    def __post_init__(self) -> None:
        validate_non_negative(self.multiplier, "multiplier")
        validate_non_negative(self.addend, "addend")
        validate_in_range(self.exponent, "exponent", min_value=2)

    @property
    def output_bits(self) -> int:
        """Bits emitted per step (the high half of the state)."""
        return self.exponent // 2


class _LinearCongruentialGenerator:
    """Congruential generator exposing the random.Random subset used here."""

    def __init__(self, parameters: LinearCongruentialParameters, seed: int):
        self._parameters = parameters
        self._mask = (1 << parameters.exponent) - 1
        self._x = seed & self._mask

    def seed(self, value: int) -> None:
        self._x = value & self._mask

    def getstate(self) -> int:
        return self._x

    def setstate(self, state: int) -> None:
        self._x = state

    def _step(self) -> int:
        p = self._parameters
        self._x = (p.multiplier * self._x + p.addend) & self._mask
        return self._x >> (p.exponent - p.output_bits)

    def getrandbits(self, k: int) -> int:
        chunk_bits = self._parameters.output_bits
        result = 0
        filled = 0
        while filled < k:
            result |= self._step() << filled
            filled += chunk_bits
        return result & ((1 << k) - 1)


# =============================================================================
# RANDOM STATE
# =============================================================================


class RandomState:
    """
    Deterministic random generator handle.

    RandomState() is a Mersenne Twister seeded with 0, so unseeded use is
    reproducible too.

    Examples:
        >>> a = RandomState.mersenne_twister(42)
        >>> b = RandomState.mersenne_twister(42)
        >>> a.getrandbits(100) == b.getrandbits(100)
        True
    """

    def __init__(
        self,
        seed: int = 0,
        algorithm: RandomAlgorithm = RandomAlgorithm.MERSENNE_TWISTER,
        parameters: LinearCongruentialParameters | None = None,
    ):
        if algorithm == RandomAlgorithm.LINEAR_CONGRUENTIAL:
            if parameters is None:
                raise InvalidRandomStateError("linear congruential state requires parameters")
            self._generator = _LinearCongruentialGenerator(parameters, seed)
        else:
            if parameters is not None:
                raise InvalidRandomStateError("Mersenne Twister state takes no parameters")
            self._generator = random.Random(seed)

        self._algorithm = algorithm
        self._parameters = parameters
        self._seed = seed
        logger.debug("RandomState created: algorithm=%s seed=%d", algorithm.value, seed)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def mersenne_twister(cls, seed: int = 0) -> "RandomState":
        return cls(seed, RandomAlgorithm.MERSENNE_TWISTER)

    @classmethod
    def linear_congruential(
        cls, seed: int, multiplier: int, addend: int, exponent: int
    ) -> "RandomState":
        """
        Congruential state X <- (multiplier*X + addend) mod 2**exponent.

        Raises:
            ValueError: If multiplier or addend is negative, or exponent < 2
        """
        parameters = LinearCongruentialParameters(multiplier, addend, exponent)
        return cls(seed, RandomAlgorithm.LINEAR_CONGRUENTIAL, parameters)

    @classmethod
    def linear_congruential_size(cls, seed: int, size: int) -> "RandomState":
        """
        Congruential state emitting at least `size` bits per step.

        Raises:
            InvalidRandomStateError: Unless 1 <= size <= MAX_LINEAR_CONGRUENTIAL_SIZE
        """
        if not 1 <= size <= MAX_LINEAR_CONGRUENTIAL_SIZE:
            raise InvalidRandomStateError(
                f"size must be in 1..{MAX_LINEAR_CONGRUENTIAL_SIZE}, got {size}"
            )
        parameters = LinearCongruentialParameters(
            LINEAR_CONGRUENTIAL_MULTIPLIER, LINEAR_CONGRUENTIAL_ADDEND, 2 * size
        )
        return cls(seed, RandomAlgorithm.LINEAR_CONGRUENTIAL, parameters)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def seed(self) -> int:
        """Seed of the last (re)seeding."""
        return self._seed

    @property
    def algorithm(self) -> RandomAlgorithm:
        return self._algorithm

    @property
    def parameters(self) -> LinearCongruentialParameters | None:
        return self._parameters

    def reseed(self, value: int) -> None:
        """Restart the sequence from a new seed."""
        self._generator.seed(value)
        self._seed = value
        logger.debug("RandomState reseeded: algorithm=%s seed=%d", self._algorithm.value, value)

    def copy(self) -> "RandomState":
        """Independent state that continues the same sequence."""
        clone = RandomState.__new__(RandomState)
        clone._algorithm = self._algorithm
        clone._parameters = self._parameters
        clone._seed = self._seed
        if self._parameters is not None:
            clone._generator = _LinearCongruentialGenerator(self._parameters, 0)
        else:
            clone._generator = random.Random()
        clone._generator.setstate(self._generator.getstate())
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo) -> "RandomState":
        return self.copy()

    def __repr__(self) -> str:
        return f"RandomState(algorithm={self._algorithm.value}, seed={self._seed})"

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def getrandbits(self, k: int) -> int:
        """Uniform integer in [0, 2**k); k == 0 gives 0."""
        validate_non_negative(k, "k")
        if k == 0:
            return 0
        return self._generator.getrandbits(k)

    def random_bits(self, bits: int) -> int:
        """
        Uniform machine-sized integer of `bits` random bits.

        Raises:
            ValueError: Unless 0 < bits <= MAX_RANDOM_BITS
        """
        validate_in_range(bits, "bits", 1, MAX_RANDOM_BITS)
        return self.getrandbits(bits)

    def random_below(self, upper_bound: int) -> int:
        """
        Uniform integer in [0, upper_bound) by rejection sampling.

        Raises:
            ValueError: If upper_bound <= 0
        """
        validate_positive(upper_bound, "upper_bound")
        bits = (upper_bound - 1).bit_length()
        while True:
            candidate = self.getrandbits(bits)
            if candidate < upper_bound:
                return candidate

    def long_runs(self, bits: int) -> int:
        """
        Integer of exactly `bits` bits made of long runs of ones and zeros.

        The value starts with a run of ones, so its top bit is set. Useful for
        exercising carry and borrow paths that uniform values rarely hit.
        """
        validate_non_negative(bits, "bits")
        result = 0
        position = bits
        ones = True
        max_run = max(bits // 4, 1)
        while position > 0:
            run = min(1 + self.random_below(max_run), position)
            position -= run
            if ones:
                result |= ((1 << run) - 1) << position
            ones = not ones
        return result
