"""
Core math modules для primefrac

Целочисленные алгоритмы ядра: sieve, факторизация, multiset операции, дроби.
Никакой float арифметики.
"""

# Numeric Safeguards
from primefrac.core.math.numeric_safeguards import (
    INT64_MAX,
    MAX_INTEGER_INPUT,
    ParsedInteger,
    ParseStatus,
    fits_int64,
    is_digit_string,
    is_non_decreasing,
    parse_integer_text,
    validate_non_decreasing,
    validate_positive_int,
)

# Sieve
from primefrac.core.math.sieve import (
    PRIME_BOUND,
    TRACE_TAIL_SIZE,
    SieveMethod,
    generate_primes,
    sieve_eratosthenes,
    sieve_multiplicative,
)

# Factorization
from primefrac.core.math.factorization import (
    FactorizationIncomplete,
    calculate_product,
    divide_with_primes,
    ensure_complete_factorization,
    factorization_residue,
    group_exponents,
)

# Multiset
from primefrac.core.math.multiset import (
    multiset_difference,
    multiset_intersection,
)

# Rational
from primefrac.core.math.rational import (
    DECIMAL_POINT,
    MAX_FRACTION_SUFFIX_LENGTH,
    UNIT_FACTORS,
    ParsedDecimal,
    extract_numerator_denominator,
    remove_common_factors,
    to_mixed_number,
)

__all__ = [
    # Numeric Safeguards — Constants
    "INT64_MAX",
    "MAX_INTEGER_INPUT",
    # Numeric Safeguards — Types
    "ParseStatus",
    "ParsedInteger",
    # Numeric Safeguards — Functions
    "fits_int64",
    "is_digit_string",
    "is_non_decreasing",
    "parse_integer_text",
    "validate_non_decreasing",
    "validate_positive_int",
    # Sieve — Constants
    "PRIME_BOUND",
    "TRACE_TAIL_SIZE",
    # Sieve — Types
    "SieveMethod",
    # Sieve — Functions
    "generate_primes",
    "sieve_eratosthenes",
    "sieve_multiplicative",
    # Factorization — Exceptions
    "FactorizationIncomplete",
    # Factorization — Functions
    "calculate_product",
    "divide_with_primes",
    "ensure_complete_factorization",
    "factorization_residue",
    "group_exponents",
    # Multiset
    "multiset_difference",
    "multiset_intersection",
    # Rational — Constants
    "DECIMAL_POINT",
    "MAX_FRACTION_SUFFIX_LENGTH",
    "UNIT_FACTORS",
    # Rational — Types
    "ParsedDecimal",
    # Rational — Functions
    "extract_numerator_denominator",
    "remove_common_factors",
    "to_mixed_number",
]
