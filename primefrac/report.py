"""
ReportFormatter — текстовое представление результатов

Форматы:
    факторизация:  "     13112 = 2^3 * 11 * 149"
    дробь:         "0.12 = 3/25"
                   "2.25 = 9/4 ==> 2 1/4"
    multiset:      " 2*2*3"
"""

import sys
from typing import TYPE_CHECKING, Sequence, TextIO

from primefrac.core.math.numeric_safeguards import ParseStatus

if TYPE_CHECKING:
    from primefrac.engine.results import FactorizationResult, FractionResult

# Ширина поля числа в строке факторизации
NUMBER_WIDTH = 10

_FAILURE_PREFIX = {
    ParseStatus.PARSE_ERROR: "invalid decimal value",
    ParseStatus.OVERFLOW_RISK: "too large decimal value",
}


class ReportFormatter:
    """Рендеринг результатов движка для человека."""

    def __init__(self, stream: TextIO | None = None):
        # None -> sys.stdout на момент вывода (работает с подменой stdout в тестах)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    @staticmethod
    def render_factors(factors: Sequence[int]) -> str:
        """Factor multiset через '*': (2, 2, 3) -> ' 2*2*3'."""
        return " " + "*".join(str(f) for f in factors)

    @staticmethod
    def render_factorization(result: "FactorizationResult") -> str:
        terms = " * ".join(power.render() for power in result.to_report().powers)
        line = f"{result.number:>{NUMBER_WIDTH}} = {terms}"
        if not result.complete:
            line += f"  (incomplete: residue {result.residue} above prime table bound)"
        return line

    @staticmethod
    def render_fraction(result: "FractionResult") -> str:
        if not result.ok:
            return f"{_FAILURE_PREFIX[result.status]} {result.text!r}: {result.reason}"

        t, n = result.numerator, result.denominator
        line = f"{result.text} = {t}/{n}"
        if result.is_mixed:
            whole, remainder = result.mixed
            line += f" ==> {whole} {remainder}/{n}"
        if not result.complete:
            line += "  (incomplete: prime factor above prime table bound)"
        return line

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def emit(self, line: str) -> None:
        print(line, file=self.stream)

    def emit_factorization(self, result: "FactorizationResult") -> None:
        self.emit(self.render_factorization(result))

    def emit_fraction(self, result: "FractionResult") -> None:
        self.emit(self.render_fraction(result))
