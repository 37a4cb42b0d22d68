"""Конфигурация движка primefrac."""

from dataclasses import dataclass

from primefrac.core.math.sieve import PRIME_BOUND, SieveMethod


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка.

    Передаётся явно в каждую операцию верхнего уровня (нет глобального
    состояния trace).
    """

    # Верхняя граница таблицы простых
    bound: int = PRIME_BOUND

    # Метод построения таблицы
    sieve_method: SieveMethod = SieveMethod.ERATOSTHENES

    # Логировать промежуточные шаги (logger.debug)
    trace: bool = False

    # FactorizationIncomplete вместо молчаливого отбрасывания множителя > bound
    strict: bool = False

    def __post_init__(self):
        if self.bound < 2:
            raise ValueError(f"bound must be >= 2, got {self.bound}")
        # "multiplicative" из CLI -> SieveMethod.MULTIPLICATIVE
        object.__setattr__(self, "sieve_method", SieveMethod(self.sieve_method))


DEFAULT_CONFIG = EngineConfig()
