"""
primefrac — prime factorization and decimal-to-fraction reduction

Integer-only engine: bounded prime table (sieve), trial division against the
table, exact decimal -> rational conversion, and reduction by cancelling
common prime factors.
"""

from primefrac.core.domain import PrimeTable
from primefrac.core.math import (
    PRIME_BOUND,
    FactorizationIncomplete,
    ParseStatus,
    SieveMethod,
    calculate_product,
    divide_with_primes,
    extract_numerator_denominator,
    generate_primes,
    parse_integer_text,
    remove_common_factors,
)
from primefrac.engine import (
    EngineConfig,
    FactorizationResult,
    FractionResult,
    decimal_to_fraction,
    factorize_number,
)

__version__ = "1.0.0"

__all__ = [
    "PRIME_BOUND",
    "EngineConfig",
    "FactorizationIncomplete",
    "FactorizationResult",
    "FractionResult",
    "ParseStatus",
    "PrimeTable",
    "SieveMethod",
    "calculate_product",
    "decimal_to_fraction",
    "divide_with_primes",
    "extract_numerator_denominator",
    "factorize_number",
    "generate_primes",
    "parse_integer_text",
    "remove_common_factors",
]
