"""
Numeric Safeguards — границы целочисленного домена

Модуль задаёт допустимый числовой домен движка и проверяет входной текст
до того, как он попадёт в ядро (sieve / factorization / rational):
- Границы signed 64-bit (все входы и промежуточные значения в них помещаются)
- Разбор целого числа из текста в tagged result (OK / PARSE_ERROR / OVERFLOW_RISK)
- Валидация упорядоченности factor multiset

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Разбор текста никогда не бросает exception — ошибка возвращается как статус
2. Ядро получает только положительные целые <= MAX_INTEGER_INPUT
3. Все операции детерминированы и воспроизводимы
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Sequence

# =============================================================================
# ГРАНИЦЫ ДОМЕНА
# =============================================================================

# Максимум signed 64-bit
INT64_MAX: Final[int] = 2**63 - 1

# Максимальное целое, принимаемое на вход факторизации.
# INT64_MAX сам по себе отклоняется (резерв под переполнение при делении).
MAX_INTEGER_INPUT: Final[int] = INT64_MAX - 1

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# TAGGED RESULT
# =============================================================================


class ParseStatus(str, Enum):
    """Статус разбора числового текста."""

    OK = "OK"
    PARSE_ERROR = "PARSE_ERROR"
    OVERFLOW_RISK = "OVERFLOW_RISK"


@dataclass(frozen=True)
class ParsedInteger:
    """Результат разбора целого числа."""

    status: ParseStatus
    value: int
    reason: str

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


def is_digit_string(text: str) -> bool:
    """
    Проверка, что строка непустая и состоит только из ASCII цифр.

    str.isdigit() не подходит: он принимает unicode цифры ('²', '٣').
    """
    return bool(text) and all(ch in _DIGITS for ch in text)


def fits_int64(value: int) -> bool:
    """Значение помещается в signed 64-bit."""
    return -INT64_MAX - 1 <= value <= INT64_MAX


def parse_integer_text(text: str) -> ParsedInteger:
    """
    Разбор положительного целого числа из текста.

    Граница между пользовательским вводом и ядром: ноль, знаки, нецифровые
    символы и значения вне домена отклоняются статусом, а не exception.

    Args:
        text: Текст числа (пробелы по краям игнорируются)

    Returns:
        ParsedInteger:
        - OK: value — разобранное число (1 <= value <= MAX_INTEGER_INPUT)
        - PARSE_ERROR: пустой текст, нецифровые символы, ноль
        - OVERFLOW_RISK: value > MAX_INTEGER_INPUT

    Examples:
        >>> parse_integer_text("13112").value
        13112
        >>> parse_integer_text("0").status
        <ParseStatus.PARSE_ERROR: 'PARSE_ERROR'>
        >>> parse_integer_text("9223372036854775807").status
        <ParseStatus.OVERFLOW_RISK: 'OVERFLOW_RISK'>
    """
    stripped = text.strip()

    if not is_digit_string(stripped):
        return ParsedInteger(
            status=ParseStatus.PARSE_ERROR,
            value=0,
            reason=f"not_an_integer: {text!r}",
        )

    value = int(stripped)

    if value == 0:
        return ParsedInteger(
            status=ParseStatus.PARSE_ERROR,
            value=0,
            reason="zero_value: integer must be != 0",
        )

    if value > MAX_INTEGER_INPUT:
        return ParsedInteger(
            status=ParseStatus.OVERFLOW_RISK,
            value=0,
            reason=f"too_large: {len(stripped)} digits exceed {MAX_INTEGER_INPUT}",
        )

    return ParsedInteger(status=ParseStatus.OK, value=value, reason="")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что значение — положительное целое в домене.

    Raises:
        ValueError: Если value < 1 или value > INT64_MAX
    """
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")

    if value > INT64_MAX:
        raise ValueError(f"{name} must be <= {INT64_MAX}, got {value}")


def is_non_decreasing(values: Sequence[int]) -> bool:
    """Последовательность упорядочена по неубыванию."""
    return all(values[k] <= values[k + 1] for k in range(len(values) - 1))


def validate_non_decreasing(values: Sequence[int], name: str) -> None:
    """
    Валидация упорядоченности factor multiset.

    Raises:
        ValueError: Если последовательность не упорядочена по неубыванию
    """
    if not is_non_decreasing(values):
        raise ValueError(f"{name} must be sorted in non-decreasing order, got {list(values)}")
