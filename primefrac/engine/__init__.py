"""
Engine — операции верхнего уровня

factorize_number и decimal_to_fraction поверх core/math, с явной
конфигурацией (EngineConfig) вместо глобального состояния.
"""

from primefrac.engine.config import DEFAULT_CONFIG, EngineConfig
from primefrac.engine.factorization_pipeline import FactorizationPipeline, factorize_number
from primefrac.engine.fraction_pipeline import FractionPipeline, decimal_to_fraction
from primefrac.engine.results import FactorizationResult, FractionResult

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "EngineConfig",
    # Results
    "FactorizationResult",
    "FractionResult",
    # Pipelines
    "FactorizationPipeline",
    "FractionPipeline",
    "factorize_number",
    "decimal_to_fraction",
]
