"""Fraction pipeline: десятичный текст -> несократимая дробь

Порядок:
1. extract_numerator_denominator: "0.12" -> 12/100 (ошибка -> FractionResult со статусом)
2. divide_with_primes для числителя и знаменателя независимо
3. Проверка полноты обеих факторизаций (strict -> FactorizationIncomplete)
4. remove_common_factors: (2, 2, 3) / (2, 2, 5, 5) -> (3,) / (5, 5)
5. calculate_product: 3/25
6. Опциональный вывод: t/n или t/n ==> whole remainder/n при t > n
"""

import logging
from typing import Sequence

from primefrac.core.domain.prime_table import PrimeTable, as_prime_list
from primefrac.core.math.factorization import (
    FactorizationIncomplete,
    calculate_product,
    divide_with_primes,
    ensure_complete_factorization,
)
from primefrac.core.math.numeric_safeguards import ParseStatus
from primefrac.core.math.rational import (
    ParsedDecimal,
    extract_numerator_denominator,
    remove_common_factors,
)
from primefrac.engine.config import DEFAULT_CONFIG, EngineConfig
from primefrac.engine.results import FractionResult
from primefrac.report import ReportFormatter

logger = logging.getLogger(__name__)


class FractionPipeline:
    """Преобразование десятичного значения в несократимую дробь."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        formatter: ReportFormatter | None = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.formatter = formatter or ReportFormatter()

    def evaluate(
        self,
        text: str,
        primes: PrimeTable | Sequence[int],
        emit_output: bool = False,
    ) -> FractionResult:
        """Преобразование text в несократимую дробь.

        Args:
            text: Десятичный текст ("0.12", "2.25", ".5")
            primes: Таблица простых
            emit_output: Вывести результат через ReportFormatter

        Returns:
            FractionResult; при ошибке разбора status != OK и as_pair() == (0, 0)

        Raises:
            FactorizationIncomplete: strict и простой множитель > bound
        """
        parsed = extract_numerator_denominator(text)

        if not parsed.ok:
            logger.debug("decimal %r rejected: %s", text, parsed.reason)
            result = self._failed_result(text, parsed)
        elif parsed.numerator == 0:
            # 0 делится на все простые: без факторизации, 0/1
            result = FractionResult(
                text=text,
                status=ParseStatus.OK,
                reason="",
                numerator=0,
                denominator=1,
                unreduced_numerator=0,
                unreduced_denominator=parsed.denominator,
            )
        else:
            result = self._reduce(text, parsed, as_prime_list(primes))

        if emit_output:
            self.formatter.emit_fraction(result)

        return result

    def _reduce(
        self,
        text: str,
        parsed: ParsedDecimal,
        primes: Sequence[int],
    ) -> FractionResult:
        trace = self.config.trace

        if trace:
            logger.debug("remove decimal point by multiplication: %d/%d", parsed.numerator, parsed.denominator)

        numerator_factors = divide_with_primes(parsed.numerator, primes)
        denominator_factors = divide_with_primes(parsed.denominator, primes)

        if trace:
            logger.debug("calculate prime numbers for numerator and denominator")
            logger.debug("numerator:%s", ReportFormatter.render_factors(numerator_factors))
            logger.debug("denominator:%s", ReportFormatter.render_factors(denominator_factors))

        numerator_complete = self._check_complete(parsed.numerator, numerator_factors)
        denominator_complete = self._check_complete(parsed.denominator, denominator_factors)

        num, den = remove_common_factors(numerator_factors, denominator_factors, trace=trace)

        t = calculate_product(num)
        n = calculate_product(den)

        if trace:
            logger.debug("reduced: %d/%d", t, n)

        return FractionResult(
            text=text,
            status=ParseStatus.OK,
            reason="",
            numerator=t,
            denominator=n,
            unreduced_numerator=parsed.numerator,
            unreduced_denominator=parsed.denominator,
            numerator_factors=num,
            denominator_factors=den,
            complete=numerator_complete and denominator_complete,
        )

    def _check_complete(self, number: int, factors: tuple[int, ...]) -> bool:
        try:
            ensure_complete_factorization(number, factors)
        except FactorizationIncomplete as e:
            if self.config.strict:
                raise
            logger.warning(
                "Incomplete factorization of %d: residue %d dropped, fraction may not be fully reduced",
                number,
                e.residue,
            )
            return False
        return True

    @staticmethod
    def _failed_result(text: str, parsed: ParsedDecimal) -> FractionResult:
        return FractionResult(
            text=text,
            status=parsed.status,
            reason=parsed.reason,
            numerator=0,
            denominator=0,
            unreduced_numerator=0,
            unreduced_denominator=0,
        )


def decimal_to_fraction(
    text: str,
    primes: PrimeTable | Sequence[int],
    emit_output: bool = True,
    config: EngineConfig | None = None,
) -> FractionResult:
    """
    Десятичный текст -> несократимая дробь (операция верхнего уровня).

    Examples:
        >>> decimal_to_fraction("0.12", primes, emit_output=False).as_pair()  # doctest: +SKIP
        (3, 25)
    """
    return FractionPipeline(config).evaluate(text, primes, emit_output=emit_output)
