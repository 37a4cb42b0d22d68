"""
Тесты Fraction pipeline — decimal_to_fraction

Проверяет:
1. 0.12 -> 3/25 и другие известные значения
2. Смешанную запись при t > n
3. Ошибки разбора -> status, as_pair() == (0, 0), без exception
4. Множитель > bound: warning (по умолчанию) или FactorizationIncomplete (strict)
5. Вывод через ReportFormatter и trace через logging
"""

import io
import logging
import math

import pytest

from primefrac.core.math.factorization import FactorizationIncomplete
from primefrac.core.math.numeric_safeguards import ParseStatus
from primefrac.engine import EngineConfig, FractionPipeline, decimal_to_fraction
from primefrac.report import ReportFormatter


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def pipeline(stream):
    return FractionPipeline(formatter=ReportFormatter(stream))


# =============================================================================
# ТЕСТЫ: значения
# =============================================================================


class TestDecimalToFraction:
    """Тесты decimal_to_fraction."""

    def test_0_12(self, primes) -> None:
        result = decimal_to_fraction("0.12", primes, emit_output=False)
        assert result.as_pair() == (3, 25)
        assert result.ok
        assert result.status is ParseStatus.OK
        assert (result.unreduced_numerator, result.unreduced_denominator) == (12, 100)
        assert result.numerator_factors == (3,)
        assert result.denominator_factors == (5, 5)
        assert result.complete

    @pytest.mark.parametrize(
        "text,pair",
        [
            ("2.25", (9, 4)),
            ("12.25", (49, 4)),
            (".5", (1, 2)),
            ("0.5", (1, 2)),
            ("0.125", (1, 8)),
            ("0.1", (1, 10)),
            ("3.75", (15, 4)),
            ("1.0", (1, 1)),
            ("2.0", (2, 1)),
            ("0.1234567", (1234567, 10_000_000)),
            (".123456789", (123456789, 1_000_000_000)),
        ],
    )
    def test_known_values(self, primes, text: str, pair: tuple[int, int]) -> None:
        result = decimal_to_fraction(text, primes, emit_output=False)
        assert result.as_pair() == pair
        assert math.gcd(*pair) == 1

    def test_accepts_prime_table(self, prime_table) -> None:
        assert decimal_to_fraction("0.12", prime_table, emit_output=False).as_pair() == (3, 25)

    def test_zero_value(self, primes) -> None:
        result = decimal_to_fraction("0.0", primes, emit_output=False)
        assert result.ok
        assert result.as_pair() == (0, 1)
        assert result.unreduced_denominator == 10
        assert result.mixed is None


class TestMixedNumber:
    """t > n -> whole remainder/n."""

    def test_2_25(self, primes) -> None:
        result = decimal_to_fraction("2.25", primes, emit_output=False)
        assert result.is_mixed
        assert result.mixed == (2, 1)

    def test_12_25(self, primes) -> None:
        assert decimal_to_fraction("12.25", primes, emit_output=False).mixed == (12, 1)

    def test_proper_fraction_not_mixed(self, primes) -> None:
        result = decimal_to_fraction("0.12", primes, emit_output=False)
        assert not result.is_mixed
        assert result.mixed is None

    def test_one_not_mixed(self, primes) -> None:
        assert decimal_to_fraction("1.0", primes, emit_output=False).mixed is None

    def test_whole_number(self, primes) -> None:
        assert decimal_to_fraction("2.0", primes, emit_output=False).mixed == (2, 0)


# =============================================================================
# ТЕСТЫ: ошибки разбора
# =============================================================================


class TestParseFailures:
    """Ошибки разбора возвращаются как результат."""

    def test_too_many_digits(self, primes) -> None:
        result = decimal_to_fraction("0.12345678", primes, emit_output=False)
        assert not result.ok
        assert result.status is ParseStatus.PARSE_ERROR
        assert result.as_pair() == (0, 0)
        assert result.reason.startswith("too_many_digits")
        assert result.mixed is None

    @pytest.mark.parametrize("text", ["1.2.3", "abc", "12.", "-0.5", ""])
    def test_malformed(self, primes, text: str) -> None:
        result = decimal_to_fraction(text, primes, emit_output=False)
        assert result.status is ParseStatus.PARSE_ERROR
        assert result.as_pair() == (0, 0)

    def test_overflow(self, primes) -> None:
        result = decimal_to_fraction(".12345678901234567890", primes, emit_output=False)
        assert result.status is ParseStatus.OVERFLOW_RISK
        assert result.as_pair() == (0, 0)


# =============================================================================
# ТЕСТЫ: множитель > bound
# =============================================================================


class TestIncompleteFactorization:
    """100000.3 = 1000003/10, 1000003 — простое > bound."""

    def test_silent_truncation_by_default(self, primes, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="primefrac")
        result = decimal_to_fraction("100000.3", primes, emit_output=False)

        assert not result.complete
        assert result.as_pair() == (1, 10)
        assert "Incomplete factorization of 1000003" in caplog.text

    def test_strict_raises(self, primes) -> None:
        config = EngineConfig(strict=True)
        with pytest.raises(FactorizationIncomplete) as exc_info:
            decimal_to_fraction("100000.3", primes, emit_output=False, config=config)
        assert exc_info.value.residue == 1_000_003

    def test_strict_complete_passes(self, primes) -> None:
        config = EngineConfig(strict=True)
        assert decimal_to_fraction("0.12", primes, emit_output=False, config=config).as_pair() == (3, 25)


# =============================================================================
# ТЕСТЫ: вывод и trace
# =============================================================================


class TestOutput:
    """emit_output и trace."""

    def test_emit_proper(self, pipeline, stream, primes) -> None:
        pipeline.evaluate("0.12", primes, emit_output=True)
        assert stream.getvalue() == "0.12 = 3/25\n"

    def test_emit_mixed(self, pipeline, stream, primes) -> None:
        pipeline.evaluate("2.25", primes, emit_output=True)
        assert stream.getvalue() == "2.25 = 9/4 ==> 2 1/4\n"

    def test_emit_failure(self, pipeline, stream, primes) -> None:
        pipeline.evaluate("0.12345678", primes, emit_output=True)
        assert stream.getvalue().startswith("invalid decimal value '0.12345678': too_many_digits")

    def test_no_emit(self, pipeline, stream, primes) -> None:
        pipeline.evaluate("0.12", primes)
        assert stream.getvalue() == ""

    def test_default_emits_to_stdout(self, primes, capsys) -> None:
        decimal_to_fraction("0.12", primes)
        assert capsys.readouterr().out == "0.12 = 3/25\n"

    def test_trace(self, primes, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="primefrac")
        decimal_to_fraction("0.12", primes, emit_output=False, config=EngineConfig(trace=True))

        assert "remove decimal point by multiplication: 12/100" in caplog.text
        assert "numerator: 2*2*3" in caplog.text
        assert "denominator: 2*2*5*5" in caplog.text
        assert "intersection: 2 2" in caplog.text
        assert "reduced: 3/25" in caplog.text

    def test_no_trace(self, primes, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="primefrac")
        decimal_to_fraction("0.12", primes, emit_output=False)
        assert "remove decimal point" not in caplog.text
