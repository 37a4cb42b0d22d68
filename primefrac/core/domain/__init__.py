"""
Domain models and value objects.

Contains the prime table and the machine readable report models.
"""

from primefrac.core.domain.prime_table import PrimeTable, as_prime_list
from primefrac.core.domain.reports import (
    FactorizationReport,
    FractionReport,
    MixedNumber,
    PrimePower,
)

__all__ = [
    # Prime table
    "PrimeTable",
    "as_prime_list",
    # Reports
    "FactorizationReport",
    "FractionReport",
    "MixedNumber",
    "PrimePower",
]
