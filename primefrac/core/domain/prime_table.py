"""
PrimeTable — Модель таблицы простых чисел

Immutable Pydantic модель: PrimeList вместе с bound и методом sieve.
Строится один раз за запуск, далее передаётся по ссылке (только чтение).
Итерация, len() и индексация идут по primes, поэтому таблица передаётся
напрямую туда, где ожидается PrimeList.
"""

from typing import Final, Iterator, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from primefrac.core.math.sieve import (
    PRIME_BOUND,
    TRACE_TAIL_SIZE,
    SieveMethod,
    generate_primes,
)

# Сколько простых показывается в repr
_REPR_HEAD: Final[int] = 3


class PrimeTable(BaseModel):
    """
    Таблица всех простых <= bound.

    Immutable модель (frozen=True). Валидация:
    - primes строго возрастают и начинаются с 2
    - наибольшее простое <= bound
    """

    bound: int = Field(..., ge=2, description="Верхняя граница таблицы (включительно)")
    method: SieveMethod = Field(
        default=SieveMethod.ERATOSTHENES, description="Метод sieve, которым построена таблица"
    )
    primes: tuple[int, ...] = Field(..., min_length=1, description="Простые по возрастанию")

    model_config = {"frozen": True}

    @field_validator("primes")
    @classmethod
    def validate_strictly_increasing(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка: начинается с 2, строго возрастает."""
        if v[0] != 2:
            raise ValueError(f"primes must start at 2, got {v[0]}")
        for k in range(len(v) - 1):
            if v[k] >= v[k + 1]:
                raise ValueError(
                    f"primes must be strictly increasing: {v[k]} at {k} >= {v[k + 1]}"
                )
        return v

    @model_validator(mode="after")
    def validate_within_bound(self) -> "PrimeTable":
        """Проверка: все простые <= bound."""
        if self.primes[-1] > self.bound:
            raise ValueError(f"largest prime {self.primes[-1]} exceeds bound {self.bound}")
        return self

    @classmethod
    def generate(
        cls,
        bound: int = PRIME_BOUND,
        method: SieveMethod = SieveMethod.ERATOSTHENES,
        trace: bool = False,
    ) -> "PrimeTable":
        """
        Построение таблицы через generate_primes.

        Args:
            bound: Верхняя граница (default: PRIME_BOUND)
            method: Метод sieve
            trace: Логировать статистику построения

        Returns:
            PrimeTable
        """
        primes = generate_primes(bound, method=method, trace=trace)
        return cls(bound=bound, method=method, primes=primes)

    @property
    def count(self) -> int:
        """Количество простых в таблице."""
        return len(self.primes)

    @property
    def largest(self) -> int:
        """Наибольшее простое в таблице."""
        return self.primes[-1]

    def largest_primes(self, n: int = TRACE_TAIL_SIZE) -> tuple[int, ...]:
        """n наибольших простых, по убыванию."""
        return tuple(reversed(self.primes[-n:])) if n > 0 else ()

    def __iter__(self) -> Iterator[int]:
        return iter(self.primes)

    def __len__(self) -> int:
        return len(self.primes)

    def __getitem__(self, index: int) -> int:
        return self.primes[index]

    def __repr__(self) -> str:
        head = ", ".join(str(p) for p in self.primes[:_REPR_HEAD])
        return (
            f"PrimeTable(bound={self.bound}, method={self.method.value}, "
            f"count={self.count}, primes=({head}, ..., {self.largest}))"
        )


def as_prime_list(primes: PrimeTable | Sequence[int]) -> Sequence[int]:
    """PrimeTable или готовый PrimeList -> PrimeList."""
    if isinstance(primes, PrimeTable):
        return primes.primes
    return primes
