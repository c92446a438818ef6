"""
SecureRandom — Entropy-Backed Sampling Handle

Cryptographically secure sampling over an entropy source that returns n
fresh bytes per call. The default source is secrets.token_bytes, which is
process-wide and thread-safe and carries no caller-visible state.

CRITICAL INVARIANTS:
1. random_bits(b) always has exactly b significant bits (top bit forced)
2. random_below(n) is uniform on [0, n): out-of-range candidates are
   rejected, never folded back into range
3. random_below(1) == 0 without consuming entropy
"""

import logging
import secrets
from typing import Callable

from arbint.core.math.numerical_safeguards import validate_positive

logger = logging.getLogger(__name__)

EntropySource = Callable[[int], bytes]


class SecureRandom:
    """
    Secure sampler over an entropy source.

    Args:
        entropy: Callable returning the requested number of random bytes
    """

    def __init__(self, entropy: EntropySource = secrets.token_bytes):
        self._entropy = entropy

    def _draw(self, bits: int) -> int:
        """Whole bytes of entropy masked down to `bits` bits."""
        data = self._entropy(-(-bits // 8))
        return int.from_bytes(data, "big") & ((1 << bits) - 1)

    def random_bits(self, bits: int) -> int:
        """
        Random integer with exactly `bits` significant bits.

        Raises:
            ValueError: If bits <= 0
        """
        validate_positive(bits, "bits")
        return self._draw(bits) | (1 << (bits - 1))

    def random_below(self, upper_bound: int) -> int:
        """
        Uniform integer in [0, upper_bound).

        Candidates of (upper_bound - 1).bit_length() bits are drawn from
        whole bytes; each is accepted with probability above 1/2.

        Raises:
            ValueError: If upper_bound <= 0
        """
        validate_positive(upper_bound, "upper_bound")
        if upper_bound == 1:
            return 0

        bits = (upper_bound - 1).bit_length()
        attempts = 1
        candidate = self._draw(bits)
        while candidate >= upper_bound:
            attempts += 1
            candidate = self._draw(bits)
        if attempts > 1:
            logger.debug("secure random_below: accepted after %d draws", attempts)
        return candidate


# Shared default; callers may construct their own handle instead
DEFAULT_SECURE_RANDOM = SecureRandom()
