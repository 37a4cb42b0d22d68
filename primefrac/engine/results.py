"""
Results — результаты операций верхнего уровня

Frozen dataclass результаты factorize_number / decimal_to_fraction.
to_report() строит Pydantic модель для JSON контракта.
"""

from dataclasses import dataclass

from primefrac.core.domain.reports import (
    FactorizationReport,
    FractionReport,
    MixedNumber,
    PrimePower,
)
from primefrac.core.math.numeric_safeguards import ParseStatus
from primefrac.core.math.rational import to_mixed_number


# =============================================================================
# FACTORIZATION
# =============================================================================


@dataclass(frozen=True)
class FactorizationResult:
    """Результат factorize_number."""

    number: int

    # FactorMultiset по неубыванию
    factors: tuple[int, ...]

    # (prime, exponent) по возрастанию prime
    powers: tuple[tuple[int, int], ...]

    # Произведение factors == number
    complete: bool

    # Отброшенный остаток (1: факторизация полная)
    residue: int

    @property
    def exponents(self) -> dict[int, int]:
        """prime -> exponent, ключи по возрастанию."""
        return dict(self.powers)

    def to_report(self) -> FactorizationReport:
        return FactorizationReport(
            number=self.number,
            factors=self.factors,
            powers=tuple(PrimePower(prime=p, exponent=e) for p, e in self.powers),
            complete=self.complete,
            residue=self.residue,
        )


# =============================================================================
# FRACTION
# =============================================================================


@dataclass(frozen=True)
class FractionResult:
    """Результат decimal_to_fraction.

    При status != OK все числовые поля равны 0, а factor multiset пусты.
    """

    text: str
    status: ParseStatus
    reason: str

    # Несократимая дробь
    numerator: int
    denominator: int

    # Дробь до сокращения (10**digits в знаменателе)
    unreduced_numerator: int
    unreduced_denominator: int

    # Factor multiset после сокращения
    numerator_factors: tuple[int, ...] = ()
    denominator_factors: tuple[int, ...] = ()

    # Обе факторизации полные
    complete: bool = True

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    @property
    def is_mixed(self) -> bool:
        """Дробь неправильная: t > n, показывается как whole remainder/n."""
        return self.ok and self.numerator > self.denominator

    @property
    def mixed(self) -> tuple[int, int] | None:
        """(whole, remainder) для неправильной дроби, иначе None."""
        if not self.is_mixed:
            return None
        return to_mixed_number(self.numerator, self.denominator)

    def as_pair(self) -> tuple[int, int]:
        """(numerator, denominator); (0, 0) при ошибке разбора."""
        return self.numerator, self.denominator

    def to_report(self) -> FractionReport:
        mixed = None
        if self.is_mixed:
            whole, remainder = to_mixed_number(self.numerator, self.denominator)
            mixed = MixedNumber(whole=whole, remainder=remainder, denominator=self.denominator)

        return FractionReport(
            text=self.text,
            status=self.status,
            reason=self.reason,
            numerator=self.numerator,
            denominator=self.denominator,
            unreduced_numerator=self.unreduced_numerator,
            unreduced_denominator=self.unreduced_denominator,
            complete=self.complete,
            mixed=mixed,
        )
