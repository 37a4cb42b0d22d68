"""
Sieve — генерация таблицы простых чисел

Модуль строит упорядоченный список всех простых <= bound. Таблица строится
один раз за запуск и далее только читается (factorization, rational).

Методы:
- MULTIPLICATIVE: мультипликативный sieve. Двумерная таблица произведений
  i * j (i, j >= 2); число, не являющееся ни одним произведением, — простое.
  Внутренний цикл по j прерывается на первом i * j > bound (произведения
  монотонно растут по j). Ни j не начинается с i, ни i не ограничен
  sqrt(bound), поэтому метод медленнее классического, но даёт тот же результат.

      Пример для bound = 10:

       i\\j  2  3  4  5
        2    4  6  8 10
        3    9  .
        4    .

      Вычёркиваются 4, 6, 8, 9, 10; остаются 2, 3, 5, 7 (1 — не простое).

- ERATOSTHENES: классическое решето Эратосфена (i <= isqrt(bound), отметки
  с i * i, только для ещё не вычеркнутых i).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат строго возрастает и начинается с 2
2. Результат содержит ровно простые <= bound (оба метода дают одинаковый список)
3. Чистая функция от bound; trace — только наблюдение, на результат не влияет
"""

import logging
import math
import time
from enum import Enum
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Верхняя граница таблицы простых
PRIME_BOUND: Final[int] = 999_999

# Сколько наибольших простых выводится в trace
TRACE_TAIL_SIZE: Final[int] = 10


class SieveMethod(str, Enum):
    """Метод построения таблицы простых."""

    MULTIPLICATIVE = "multiplicative"
    ERATOSTHENES = "eratosthenes"


# =============================================================================
# SIEVES
# =============================================================================


def sieve_multiplicative(bound: int) -> tuple[int, ...]:
    """
    Мультипликативный sieve: вычёркивает все произведения i * j <= bound.

    Args:
        bound: Верхняя граница (включительно)

    Returns:
        Простые <= bound по возрастанию
    """
    # candidates[v - 1] == v для ещё не вычеркнутых v
    candidates = list(range(1, bound + 1))

    for i in range(2, bound + 1):
        for j in range(2, bound + 1):
            product = i * j
            if product > bound:
                break
            candidates[product - 1] = 0

    # 1 не простое
    return tuple(n for n in candidates if n > 1)


def sieve_eratosthenes(bound: int) -> tuple[int, ...]:
    """
    Классическое решето Эратосфена.

    Args:
        bound: Верхняя граница (включительно)

    Returns:
        Простые <= bound по возрастанию
    """
    is_prime = bytearray([1]) * (bound + 1)
    is_prime[0] = 0
    is_prime[1] = 0

    for i in range(2, math.isqrt(bound) + 1):
        if is_prime[i]:
            start = i * i
            is_prime[start::i] = bytes(len(range(start, bound + 1, i)))

    return tuple(n for n, flag in enumerate(is_prime) if flag)


_SIEVES = {
    SieveMethod.MULTIPLICATIVE: sieve_multiplicative,
    SieveMethod.ERATOSTHENES: sieve_eratosthenes,
}


# =============================================================================
# GENERATE PRIMES
# =============================================================================


def generate_primes(
    bound: int = PRIME_BOUND,
    method: SieveMethod = SieveMethod.ERATOSTHENES,
    trace: bool = False,
) -> tuple[int, ...]:
    """
    Генерация всех простых <= bound.

    Args:
        bound: Верхняя граница (default: PRIME_BOUND)
        method: Метод sieve (default: ERATOSTHENES)
        trace: Логировать количество простых, время и TRACE_TAIL_SIZE наибольших

    Returns:
        PrimeList: строго возрастающий tuple простых, начиная с 2

    Raises:
        ValueError: Если bound < 2

    Examples:
        >>> generate_primes(30)
        (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)
        >>> generate_primes(30, SieveMethod.MULTIPLICATIVE) == generate_primes(30)
        True
    """
    if bound < 2:
        raise ValueError(f"bound must be >= 2, got {bound}")

    sieve = _SIEVES[SieveMethod(method)]

    start = time.perf_counter()
    primes = sieve(bound)
    elapsed_ms = (time.perf_counter() - start) * 1000

    if trace:
        logger.debug(
            "Calculated %d prime numbers using '%s' sieve which took %.0f ms",
            len(primes),
            SieveMethod(method).value,
            elapsed_ms,
        )
        logger.debug(
            "Last ten: %s",
            " ".join(str(p) for p in reversed(primes[-TRACE_TAIL_SIZE:])),
        )

    return primes
