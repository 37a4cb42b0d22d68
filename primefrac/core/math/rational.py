"""
Rational — десятичная дробь -> несократимая дробь

Модуль обеспечивает точное (без float) преобразование десятичного текста в дробь:
- extract_numerator_denominator: "2.25" -> 225/100 (tagged result, без exception)
- remove_common_factors: сокращение общих простых множителей с учётом кратности
- to_mixed_number: 9/4 -> 2 1/4

ФОРМУЛЫ:
    denominator = 10 ** len(fracpart)
    numerator   = int(intpart) * denominator + int(fracpart)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. numerator / denominator в точности равно десятичному значению
2. Дробная часть (вместе с точкой) длиной >= MAX_FRACTION_SUFFIX_LENGTH
   отклоняется, если точка не на позиции 0
3. После remove_common_factors у сторон нет общих простых (при полной факторизации)
4. Сторона, сократившаяся полностью, нормализуется в (1,)
"""

import logging
from dataclasses import dataclass
from typing import Final, Sequence

from primefrac.core.math.multiset import multiset_difference, multiset_intersection
from primefrac.core.math.numeric_safeguards import (
    INT64_MAX,
    ParseStatus,
    fits_int64,
    is_digit_string,
)

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

DECIMAL_POINT: Final[str] = "."

# Максимальная длина дробной части вместе с точкой (не включительно):
# ".1234567" (7 цифр) допустимо, ".12345678" (8 цифр) нет
MAX_FRACTION_SUFFIX_LENGTH: Final[int] = 9

# Нормализованная сторона дроби после полного сокращения
UNIT_FACTORS: Final[tuple[int, ...]] = (1,)


# =============================================================================
# FRACTION BUILDER
# =============================================================================


@dataclass(frozen=True)
class ParsedDecimal:
    """Несокращённая дробь, полученная из десятичного текста."""

    status: ParseStatus
    numerator: int
    denominator: int
    reason: str

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


def _failed(status: ParseStatus, reason: str) -> ParsedDecimal:
    return ParsedDecimal(status=status, numerator=0, denominator=0, reason=reason)


def extract_numerator_denominator(text: str) -> ParsedDecimal:
    """
    Разбор десятичного текста [intpart].[fracpart] в (numerator, denominator).

    Args:
        text: Десятичный текст; intpart может быть пустым (= 0),
              fracpart обязателен

    Returns:
        ParsedDecimal:
        - OK: numerator/denominator — точная несокращённая дробь
        - PARSE_ERROR: нет точки, несколько точек, нецифровые символы,
          пустая дробная часть, слишком длинная дробная часть
        - OVERFLOW_RISK: numerator или denominator > INT64_MAX

    Examples:
        >>> p = extract_numerator_denominator("2.25")
        >>> (p.numerator, p.denominator)
        (225, 100)
        >>> extract_numerator_denominator(".5").numerator
        5
        >>> extract_numerator_denominator("0.12345678").status
        <ParseStatus.PARSE_ERROR: 'PARSE_ERROR'>
    """
    line = text.strip()
    pos = line.find(DECIMAL_POINT)

    if pos < 0:
        return _failed(ParseStatus.PARSE_ERROR, f"missing_decimal_point: {text!r}")

    # Guard по количеству цифр, только если точка не в начале
    if pos != 0 and len(line) - pos >= MAX_FRACTION_SUFFIX_LENGTH:
        return _failed(
            ParseStatus.PARSE_ERROR,
            f"too_many_digits: {len(line) - pos - 1} fractional digits "
            f"(max {MAX_FRACTION_SUFFIX_LENGTH - 2})",
        )

    int_part = line[:pos]
    frac_part = line[pos + 1:]

    if int_part and not is_digit_string(int_part):
        return _failed(ParseStatus.PARSE_ERROR, f"invalid_integer_part: {int_part!r}")

    if not is_digit_string(frac_part):
        return _failed(ParseStatus.PARSE_ERROR, f"invalid_fractional_part: {frac_part!r}")

    denominator = 10 ** len(frac_part)
    numerator = int(frac_part) + denominator * (int(int_part) if int_part else 0)

    if not (fits_int64(numerator) and fits_int64(denominator)):
        return _failed(
            ParseStatus.OVERFLOW_RISK,
            f"too_large: {numerator}/{denominator} exceeds {INT64_MAX}",
        )

    return ParsedDecimal(
        status=ParseStatus.OK,
        numerator=numerator,
        denominator=denominator,
        reason="",
    )


# =============================================================================
# FRACTION REDUCER
# =============================================================================


def remove_common_factors(
    numerator_factors: Sequence[int],
    denominator_factors: Sequence[int],
    trace: bool = False,
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Сокращение общих простых множителей числителя и знаменателя.

    Общие множители — пересечение multiset (с кратностью). Оно вычитается из
    каждой стороны; пустая сторона нормализуется в (1,).

    Args:
        numerator_factors: FactorMultiset числителя (по неубыванию)
        denominator_factors: FactorMultiset знаменателя (по неубыванию)
        trace: Логировать пересечение и новые стороны

    Returns:
        (reduced_numerator_factors, reduced_denominator_factors);
        при пустом пересечении — входы без изменений

    Raises:
        ValueError: Если вход не упорядочен

    Examples:
        >>> remove_common_factors((2, 2, 3), (2, 2, 5, 5))
        ((3,), (5, 5))
        >>> remove_common_factors((2, 5), (2, 5))
        ((1,), (1,))
    """
    common = multiset_intersection(numerator_factors, denominator_factors)

    if trace:
        logger.debug("remove common numbers, intersection: %s", _join(common))

    if not common:
        return tuple(numerator_factors), tuple(denominator_factors)

    left_numerator = multiset_difference(numerator_factors, common) or UNIT_FACTORS
    left_denominator = multiset_difference(denominator_factors, common) or UNIT_FACTORS

    if trace:
        logger.debug("new numerator: %s", _join(left_numerator))
        logger.debug("new denominator: %s", _join(left_denominator))

    return left_numerator, left_denominator


def to_mixed_number(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Выделение целой части: t/n -> (t // n, t - (t // n) * n).

    Raises:
        ValueError: Если denominator < 1

    Examples:
        >>> to_mixed_number(9, 4)
        (2, 1)
    """
    if denominator < 1:
        raise ValueError(f"denominator must be positive, got {denominator}")
    return divmod(numerator, denominator)


def _join(factors: Sequence[int]) -> str:
    return " ".join(str(f) for f in factors)
