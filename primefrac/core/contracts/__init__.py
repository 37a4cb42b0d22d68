"""
Contract Validation Module

Модуль для валидации JSON отчётов primefrac.
"""

from .validators import (
    ContractValidator,
    FactorizationReportValidator,
    FractionReportValidator,
    SchemaLoader,
    validate_factorization_report,
    validate_fraction_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FactorizationReportValidator",
    "FractionReportValidator",
    # Functions
    "validate_factorization_report",
    "validate_fraction_report",
]
