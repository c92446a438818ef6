"""
Core math modules of arbint

State-free integer algorithms on plain Python ints.
"""

# Numerical Safeguards
from arbint.core.math.numerical_safeguards import (
    # Fixed-width bounds
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    LIMB_BITS,
    LIMB_MASK,
    UINT16_MAX,
    UINT32_MAX,
    UINT64_MAX,
    # Range tests and wrapping
    fits_signed,
    fits_unsigned,
    signed_bounds,
    unsigned_bounds,
    wrap_signed,
    wrap_unsigned,
    # Comparison
    compare_values,
    compare_with_float,
    sign_of,
    # Validation
    is_valid_float,
    require_nonzero,
    validate_exponent,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Radix
from arbint.core.math.radix import (
    DEFAULT_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    detect_radix,
    parse,
    render,
    size_in_base,
)

# Division
from arbint.core.math.division import (
    QuotientRemainder,
    ceiling_divmod,
    ceiling_divmod_2exp,
    euclidean_modulo,
    exact_divide,
    floor_divmod,
    floor_divmod_2exp,
    is_congruent,
    is_congruent_2exp,
    is_divisible,
    is_divisible_2exp,
    truncating_divmod,
    truncating_divmod_2exp,
)

# Number Theory
from arbint.core.math.number_theory import (
    DEFAULT_PRIMALITY_REPS,
    DEFINITE_PRIME_LIMIT,
    Primality,
    binomial,
    extended_gcd,
    gcd,
    jacobi,
    kronecker,
    lcm,
    modular_inverse,
    next_prime,
    powm,
    powm_secure,
    previous_prime,
    probable_prime,
)

__all__ = [
    # Numerical Safeguards: Fixed-width bounds
    "INT16_MAX",
    "INT16_MIN",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "LIMB_BITS",
    "LIMB_MASK",
    "UINT16_MAX",
    "UINT32_MAX",
    "UINT64_MAX",
    # Numerical Safeguards: Range tests and wrapping
    "fits_signed",
    "fits_unsigned",
    "signed_bounds",
    "unsigned_bounds",
    "wrap_signed",
    "wrap_unsigned",
    # Numerical Safeguards: Comparison
    "compare_values",
    "compare_with_float",
    "sign_of",
    # Numerical Safeguards: Validation
    "is_valid_float",
    "require_nonzero",
    "validate_exponent",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Radix
    "DEFAULT_RADIX",
    "MAX_RADIX",
    "MIN_RADIX",
    "detect_radix",
    "parse",
    "render",
    "size_in_base",
    # Division
    "QuotientRemainder",
    "ceiling_divmod",
    "ceiling_divmod_2exp",
    "euclidean_modulo",
    "exact_divide",
    "floor_divmod",
    "floor_divmod_2exp",
    "is_congruent",
    "is_congruent_2exp",
    "is_divisible",
    "is_divisible_2exp",
    "truncating_divmod",
    "truncating_divmod_2exp",
    # Number Theory
    "DEFAULT_PRIMALITY_REPS",
    "DEFINITE_PRIME_LIMIT",
    "Primality",
    "binomial",
    "extended_gcd",
    "gcd",
    "jacobi",
    "kronecker",
    "lcm",
    "modular_inverse",
    "next_prime",
    "powm",
    "powm_secure",
    "previous_prime",
    "probable_prime",
]
