"""
Тесты для Sieve — генерация таблицы простых

Проверяемые инварианты:
1. Результат строго возрастает и начинается с 2
2. Ровно простые <= bound: без составных, без пропусков
3. MULTIPLICATIVE и ERATOSTHENES дают одинаковый список
4. Trace не влияет на результат
"""

import logging

import pytest

from primefrac.core.math.sieve import (
    PRIME_BOUND,
    TRACE_TAIL_SIZE,
    SieveMethod,
    generate_primes,
    sieve_eratosthenes,
    sieve_multiplicative,
)

FIRST_TEN = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)

# Десять наибольших простых < 1 000 000
LAST_TEN = (999863, 999883, 999907, 999917, 999931, 999953, 999959, 999961, 999979, 999983)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


# =============================================================================
# ТЕСТЫ: Полная таблица
# =============================================================================


class TestFullPrimeTable:
    """Таблица для PRIME_BOUND = 999 999."""

    def test_bound(self) -> None:
        assert PRIME_BOUND == 999_999

    def test_first_ten(self, primes) -> None:
        assert primes[:10] == FIRST_TEN

    def test_last_ten(self, primes) -> None:
        assert primes[-10:] == LAST_TEN

    def test_count(self, primes) -> None:
        """pi(10^6) = 78498"""
        assert len(primes) == 78498

    def test_strictly_increasing(self, primes) -> None:
        assert all(a < b for a, b in zip(primes, primes[1:]))

    def test_no_composites_spot_check(self, primes) -> None:
        table = set(primes)
        for composite in (1, 4, 9, 1000, 1230, 13112, 999999, 999997):
            assert composite not in table

    def test_primes_in_table(self, primes) -> None:
        table = set(primes)
        for p in (1231, 149, 9721, 3607, 3803, 999983):
            assert p in table

    def test_every_small_entry_is_prime(self, primes) -> None:
        small = [p for p in primes if p < 20_000]
        assert all(_is_prime(p) for p in small)
        assert small == [n for n in range(20_000) if _is_prime(n)]

    def test_tuple_immutable(self, primes) -> None:
        assert isinstance(primes, tuple)


# =============================================================================
# ТЕСТЫ: Методы sieve
# =============================================================================


class TestSieveMethods:
    """MULTIPLICATIVE и ERATOSTHENES эквивалентны."""

    @pytest.mark.parametrize("bound", [2, 3, 4, 10, 30, 97, 100, 1000, 10_007])
    def test_methods_agree(self, bound: int) -> None:
        assert sieve_multiplicative(bound) == sieve_eratosthenes(bound)

    @pytest.mark.parametrize("bound", [2, 10, 100, 1000])
    def test_matches_trial_division(self, bound: int) -> None:
        expected = tuple(n for n in range(bound + 1) if _is_prime(n))
        assert sieve_multiplicative(bound) == expected
        assert sieve_eratosthenes(bound) == expected

    def test_multiplicative_example_bound_ten(self) -> None:
        """4, 6, 8, 9, 10 вычеркнуты; 1 не простое"""
        assert sieve_multiplicative(10) == (2, 3, 5, 7)

    def test_multiplicative_full_bound(self, primes) -> None:
        """Умножающий sieve на PRIME_BOUND совпадает с таблицей Eratosthenes"""
        assert sieve_multiplicative(PRIME_BOUND) == primes

    def test_bound_inclusive(self) -> None:
        assert sieve_eratosthenes(13)[-1] == 13
        assert sieve_multiplicative(13)[-1] == 13


# =============================================================================
# ТЕСТЫ: generate_primes
# =============================================================================


class TestGeneratePrimes:
    """Тесты generate_primes."""

    def test_default_method_small_bound(self) -> None:
        assert generate_primes(30) == FIRST_TEN

    def test_method_as_string(self) -> None:
        assert generate_primes(30, method="multiplicative") == FIRST_TEN

    def test_deterministic(self) -> None:
        assert generate_primes(5000) == generate_primes(5000)

    @pytest.mark.parametrize("bound", [1, 0, -10])
    def test_invalid_bound(self, bound: int) -> None:
        with pytest.raises(ValueError, match="bound must be >= 2"):
            generate_primes(bound)

    def test_unknown_method(self) -> None:
        with pytest.raises(ValueError):
            generate_primes(30, method="wheel")

    def test_trace_logs_count_and_tail(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="primefrac.core.math.sieve")

        primes = generate_primes(100, trace=True)

        assert primes == generate_primes(100)
        assert "Calculated 25 prime numbers" in caplog.text
        assert "Last ten: 97 89 83 79 73 71 67 61 59 53" in caplog.text

    def test_no_trace_no_logs(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="primefrac.core.math.sieve")
        generate_primes(100)
        assert caplog.records == []

    def test_trace_tail_shorter_than_ten(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="primefrac.core.math.sieve")
        generate_primes(10, method=SieveMethod.MULTIPLICATIVE, trace=True)
        assert "Last ten: 7 5 3 2" in caplog.text
        assert TRACE_TAIL_SIZE == 10
