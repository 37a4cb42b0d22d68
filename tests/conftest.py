"""Общие fixtures: таблица простых строится один раз на сессию."""

import pytest

from primefrac.core.domain import PrimeTable
from primefrac.core.math.sieve import PRIME_BOUND


@pytest.fixture(scope="session")
def prime_table() -> PrimeTable:
    """Полная таблица простых <= PRIME_BOUND."""
    return PrimeTable.generate(PRIME_BOUND)


@pytest.fixture(scope="session")
def primes(prime_table: PrimeTable) -> tuple[int, ...]:
    """PrimeList полной таблицы."""
    return prime_table.primes


@pytest.fixture(scope="session")
def small_primes() -> tuple[int, ...]:
    """Простые <= 50 для быстрых тестов."""
    return (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)
