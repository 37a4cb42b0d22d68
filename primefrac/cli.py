"""
Command line interface.

    primefrac 1234          -> 2 * 617 (prime numbers)
    primefrac 12.25         -> 12.25 = 49/4 ==> 12 1/4 (fractions)
    primefrac               -> interactive prompt
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from primefrac.core.contracts import validate_factorization_report, validate_fraction_report
from primefrac.core.domain.prime_table import PrimeTable
from primefrac.core.math.factorization import FactorizationIncomplete
from primefrac.core.math.numeric_safeguards import ParseStatus, parse_integer_text
from primefrac.core.math.rational import DECIMAL_POINT
from primefrac.core.math.sieve import PRIME_BOUND, SieveMethod
from primefrac.engine.config import EngineConfig
from primefrac.engine.factorization_pipeline import FactorizationPipeline
from primefrac.engine.fraction_pipeline import FractionPipeline

logger = logging.getLogger(__name__)

PROMPT = "Enter an integer number to factorize into prime numbers:"

EXIT_OK = 0
EXIT_INVALID = 1
# argparse exits with 2 on usage errors
EXIT_USAGE = 2
EXIT_OVERFLOW = 3
EXIT_INCOMPLETE = 4

_EXIT_BY_STATUS = {
    ParseStatus.OK: EXIT_OK,
    ParseStatus.PARSE_ERROR: EXIT_INVALID,
    ParseStatus.OVERFLOW_RISK: EXIT_OVERFLOW,
}

_EPILOG = """\
n   == integer != 0
x.y == decimal value

E.g.
  primefrac 1234 will give 2 * 617 (prime numbers)
  primefrac 12.25 will give 12 1/4 (fractions)

Exit codes:
  0 ok, 1 invalid value, 2 usage error, 3 too large value,
  4 incomplete factorization (--strict)
"""


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for primefrac."""
    parser = argparse.ArgumentParser(
        prog="primefrac",
        description="Factorize an integer into primes or reduce a decimal to a lowest-terms fraction",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("number", nargs="?", help="Integer to factorize or decimal (x.y) to reduce")
    parser.add_argument("-t", "-v", "--trace", "--verbose", dest="trace", action="store_true",
                        help="Trace intermediate steps")
    parser.add_argument("--strict", action="store_true",
                        help="Fail when a prime factor exceeds the prime table bound")
    parser.add_argument("--json", dest="json_output", action="store_true",
                        help="Print a machine readable JSON report")
    parser.add_argument("--sieve", choices=[m.value for m in SieveMethod],
                        default=SieveMethod.ERATOSTHENES.value,
                        help="Prime table sieve method (default: eratosthenes)")
    parser.add_argument("--bound", type=int, default=PRIME_BOUND,
                        help=f"Prime table upper bound (default: {PRIME_BOUND})")

    return parser


def configure_logging(trace: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if trace else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _print_json(data: dict) -> None:
    print(json.dumps(data, indent=2))


def run_factorization(text: str, config: EngineConfig, json_output: bool = False) -> int:
    """Factorize integer text; returns an exit code."""
    parsed = parse_integer_text(text)
    if parsed.status is ParseStatus.OVERFLOW_RISK:
        print(f"too large int {parsed.reason}", file=sys.stderr)
        return EXIT_OVERFLOW
    if not parsed.ok:
        print(f"please specify an integer value {parsed.reason}", file=sys.stderr)
        return EXIT_INVALID

    table = PrimeTable.generate(config.bound, method=config.sieve_method, trace=config.trace)

    try:
        result = FactorizationPipeline(config).evaluate(parsed.value, table, emit_output=not json_output)
    except FactorizationIncomplete as e:
        print(str(e), file=sys.stderr)
        return EXIT_INCOMPLETE

    if json_output:
        data = result.to_report().model_dump(mode="json")
        validate_factorization_report(data)
        _print_json(data)

    return EXIT_OK


def run_fraction(text: str, config: EngineConfig, json_output: bool = False) -> int:
    """Reduce decimal text to a fraction; returns an exit code."""
    table = PrimeTable.generate(config.bound, method=config.sieve_method, trace=config.trace)

    try:
        result = FractionPipeline(config).evaluate(text, table, emit_output=not json_output)
    except FactorizationIncomplete as e:
        print(str(e), file=sys.stderr)
        return EXIT_INCOMPLETE

    if json_output:
        data = result.to_report().model_dump(mode="json")
        validate_fraction_report(data)
        _print_json(data)

    return _EXIT_BY_STATUS[result.status]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.trace)

    try:
        config = EngineConfig(
            bound=args.bound,
            sieve_method=SieveMethod(args.sieve),
            trace=args.trace,
            strict=args.strict,
        )
    except ValueError as e:
        parser.error(str(e))

    number = args.number
    if number is None:
        print(PROMPT, end="", flush=True)
        try:
            number = input()
        except EOFError:
            print(file=sys.stderr)
            print("please specify an integer value", file=sys.stderr)
            return EXIT_INVALID

    logger.debug("input %r, config %s", number, config)

    if DECIMAL_POINT in number:
        return run_fraction(number, config, json_output=args.json_output)
    return run_factorization(number, config, json_output=args.json_output)


if __name__ == "__main__":
    sys.exit(main())
