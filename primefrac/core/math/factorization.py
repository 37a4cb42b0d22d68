"""
Factorization — разложение на простые делением по таблице

Модуль раскладывает число в factor multiset пробным делением на простые из
таблицы (см. sieve.generate_primes):
- divide_with_primes: factor multiset по возрастанию
- calculate_product: обратная сборка числа из multiset
- group_exponents: prime -> exponent для экспоненциальной записи
- Детекция неполной факторизации (простой множитель > bound)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Если все простые множители number <= max(primes):
   calculate_product(divide_with_primes(number, primes)) == number
2. Результат упорядочен по неубыванию
3. divide_with_primes(1, primes) == (1,) — 1 считается своей тривиальной
   факторизацией, чтобы product/reduction никогда не работали с пустым multiset
4. Простой множитель > max(primes) молча отбрасывается (ограничение таблицы);
   factorization_residue возвращает отброшенный остаток
"""

import math
from typing import Sequence

from primefrac.core.math.numeric_safeguards import validate_positive_int

# =============================================================================
# EXCEPTIONS
# =============================================================================


class FactorizationIncomplete(Exception):
    """
    Факторизация неполна: у числа есть простой множитель больше bound таблицы.

    Attributes:
        number: Исходное число
        factors: Найденные множители
        residue: Отброшенный остаток (произведение множителей > bound)
    """

    def __init__(self, number: int, factors: Sequence[int], residue: int):
        self.number = number
        self.factors = tuple(factors)
        self.residue = residue
        super().__init__(
            f"Incomplete factorization of {number}: residue {residue} "
            f"has a prime factor above the prime table bound"
        )


# =============================================================================
# FACTORIZATION
# =============================================================================


def divide_with_primes(number: int, primes: Sequence[int]) -> tuple[int, ...]:
    """
    Разложение number на простые делением по упорядоченной таблице.

    Args:
        number: Положительное целое
        primes: PrimeList (строго возрастающий, начиная с 2) или PrimeTable

    Returns:
        FactorMultiset по неубыванию; (1,) для number == 1

    Raises:
        ValueError: Если number < 1 (ноль делится на всё и цикл не завершится)

    Examples:
        >>> primes = (2, 3, 5, 7, 11, 13)
        >>> divide_with_primes(360, primes)
        (2, 2, 2, 3, 3, 5)
        >>> divide_with_primes(1, primes)
        (1,)
        >>> divide_with_primes(2 * 17, primes)  # 17 > max(primes): отброшено
        (2,)
    """
    validate_positive_int(number, "number")

    if number == 1:
        return (1,)

    factors: list[int] = []

    for p in primes:
        if number == 1:
            break
        while number % p == 0 and number != 1:
            factors.append(p)
            number //= p

    return tuple(factors)


def calculate_product(factors: Sequence[int]) -> int:
    """
    Произведение factor multiset (identity = 1, поэтому (1,) -> 1).

    Examples:
        >>> calculate_product((2, 2, 2, 11, 149))
        13112
        >>> calculate_product((1,))
        1
    """
    return math.prod(factors, start=1)


def group_exponents(factors: Sequence[int]) -> dict[int, int]:
    """
    Группировка factor multiset в prime -> exponent.

    Ключи идут по возрастанию (порядок вставки совпадает с порядком multiset).

    Examples:
        >>> group_exponents((2, 2, 2, 11, 149))
        {2: 3, 11: 1, 149: 1}
    """
    exponents: dict[int, int] = {}
    for p in sorted(factors):
        exponents[p] = exponents.get(p, 0) + 1
    return exponents


# =============================================================================
# COMPLETENESS
# =============================================================================


def factorization_residue(number: int, factors: Sequence[int]) -> int:
    """
    Остаток, не покрытый найденными множителями.

    Returns:
        number // product(factors); 1 — факторизация полная
    """
    return number // calculate_product(factors)


def ensure_complete_factorization(number: int, factors: Sequence[int]) -> tuple[int, ...]:
    """
    Проверка полноты факторизации.

    Returns:
        factors без изменений, если факторизация полная

    Raises:
        FactorizationIncomplete: Если остался простой множитель > bound
    """
    residue = factorization_residue(number, factors)
    if residue != 1:
        raise FactorizationIncomplete(number, factors, residue)
    return tuple(factors)
