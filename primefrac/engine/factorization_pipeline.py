"""Factorization pipeline: текст целого числа -> prime -> exponent

Порядок:
1. Разбор текста (parse_integer_text; вызывающая сторона уже проверила ввод)
2. divide_with_primes по таблице
3. Проверка полноты (strict -> FactorizationIncomplete, иначе warning)
4. Группировка в prime -> exponent
5. Опциональный вывод через ReportFormatter
"""

import logging
from typing import Sequence

from primefrac.core.domain.prime_table import PrimeTable, as_prime_list
from primefrac.core.math.factorization import (
    FactorizationIncomplete,
    divide_with_primes,
    ensure_complete_factorization,
    group_exponents,
)
from primefrac.core.math.numeric_safeguards import parse_integer_text
from primefrac.engine.config import DEFAULT_CONFIG, EngineConfig
from primefrac.engine.results import FactorizationResult
from primefrac.report import ReportFormatter

logger = logging.getLogger(__name__)


class FactorizationPipeline:
    """Разложение целого числа на простые с группировкой по степеням."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        formatter: ReportFormatter | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.formatter = formatter or ReportFormatter()

    def evaluate(
        self,
        number: int | str,
        primes: PrimeTable | Sequence[int],
        emit_output: bool = False,
    ) -> FactorizationResult:
        """Факторизация number.

        Args:
            number: Положительное целое или его текст
            primes: Таблица простых
            emit_output: Вывести результат через ReportFormatter

        Returns:
            FactorizationResult

        Raises:
            ValueError: Если текст не является допустимым целым
            FactorizationIncomplete: strict и простой множитель > bound
        """
        value = self._parse(number)
        factors = divide_with_primes(value, as_prime_list(primes))

        if self.config.trace:
            logger.debug("factors of %d:%s", value, ReportFormatter.render_factors(factors))

        residue = 1
        try:
            ensure_complete_factorization(value, factors)
        except FactorizationIncomplete as e:
            if self.config.strict:
                raise
            residue = e.residue
            logger.warning(
                "Incomplete factorization of %d: residue %d dropped (prime factor above bound)",
                value,
                residue,
            )

        result = FactorizationResult(
            number=value,
            factors=factors,
            powers=tuple(group_exponents(factors).items()),
            complete=residue == 1,
            residue=residue,
        )

        if emit_output:
            self.formatter.emit_factorization(result)

        return result

    @staticmethod
    def _parse(number: int | str) -> int:
        if isinstance(number, int):
            return number

        parsed = parse_integer_text(number)
        if not parsed.ok:
            raise ValueError(f"please specify an integer value: {parsed.reason}")
        return parsed.value


def factorize_number(
    text: int | str,
    primes: PrimeTable | Sequence[int],
    emit_output: bool = True,
    config: EngineConfig | None = None,
) -> FactorizationResult:
    """
    Разложение числа на простые (операция верхнего уровня).

    Examples:
        >>> primes = generate_primes()  # doctest: +SKIP
        >>> factorize_number("13112", primes, emit_output=False).exponents  # doctest: +SKIP
        {2: 3, 11: 1, 149: 1}
    """
    return FactorizationPipeline(config).evaluate(text, primes, emit_output=emit_output)
