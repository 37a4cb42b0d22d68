"""
Reports — Модели отчётов о факторизации и дроби

Immutable Pydantic модели машиночитаемых результатов.
Полная совместимость с JSON Schema (core/contracts/schema/*.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from primefrac.core.math.numeric_safeguards import ParseStatus


# =============================================================================
# NESTED MODELS
# =============================================================================


class PrimePower(BaseModel):
    """Простое в степени: p^e."""

    prime: int = Field(..., ge=1, description="Простой множитель (1 — тривиальная факторизация)")
    exponent: int = Field(..., ge=1, description="Кратность")

    model_config = {"frozen": True}

    def render(self) -> str:
        """'p^e', степень опускается при e == 1."""
        if self.exponent == 1:
            return str(self.prime)
        return f"{self.prime}^{self.exponent}"


class MixedNumber(BaseModel):
    """Смешанная запись t/n = whole remainder/n (только для t > n)."""

    whole: int = Field(..., ge=1, description="Целая часть")
    remainder: int = Field(..., ge=0, description="Остаток числителя")
    denominator: int = Field(..., ge=1, description="Знаменатель")

    model_config = {"frozen": True}


# =============================================================================
# FACTORIZATION REPORT
# =============================================================================


class FactorizationReport(BaseModel):
    """
    Отчёт о разложении числа на простые.

    powers упорядочены по возрастанию prime.
    """

    number: int = Field(..., ge=1, description="Исходное число")
    factors: tuple[int, ...] = Field(..., description="FactorMultiset по неубыванию (пуст, если все множители > bound)")
    powers: tuple[PrimePower, ...] = Field(..., description="prime -> exponent")
    complete: bool = Field(..., description="Произведение factors равно number")
    residue: int = Field(
        default=1, ge=1, description="Остаток с простым множителем выше bound (1 — нет остатка)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_powers_ascending(self) -> "FactorizationReport":
        """Проверка: prime в powers строго возрастают."""
        primes = [p.prime for p in self.powers]
        if primes != sorted(set(primes)):
            raise ValueError(f"powers must be strictly ascending by prime, got {primes}")
        return self

    def exponents(self) -> dict[int, int]:
        """prime -> exponent."""
        return {p.prime: p.exponent for p in self.powers}


# =============================================================================
# FRACTION REPORT
# =============================================================================


class FractionReport(BaseModel):
    """
    Отчёт о преобразовании десятичного текста в несократимую дробь.

    При status != OK все числовые поля равны 0.
    """

    text: str = Field(..., description="Исходный десятичный текст")
    status: ParseStatus = Field(..., description="Статус разбора")
    reason: str = Field(default="", description="Причина отказа (пусто при OK)")
    numerator: int = Field(..., ge=0, description="Числитель после сокращения")
    denominator: int = Field(..., ge=0, description="Знаменатель после сокращения")
    unreduced_numerator: int = Field(..., ge=0, description="Числитель до сокращения")
    unreduced_denominator: int = Field(..., ge=0, description="Знаменатель до сокращения")
    complete: bool = Field(default=True, description="Обе факторизации полные")
    mixed: Optional[MixedNumber] = Field(
        default=None, description="Смешанная запись (только при numerator > denominator)"
    )

    model_config = {"frozen": True}
