import argparse
import logging
import sys
from dataclasses import dataclass

from fraction_calculator.config import CALCULATOR_CONFIG
from fraction_calculator.fraction import Fraction
from fraction_calculator.runtime import evaluate
from fraction_calculator.utils import CalculatorError

logger = logging.getLogger(__name__)


@dataclass
class ResultFormatError(CalculatorError):
    errmsg: str

    def __str__(self) -> str:
        return f"[Format error] {self.errmsg}"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exact fraction calculator. Tokens are separated by single spaces, e.g. '1/2 + 2 * -1/8'",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-e", "--expression", help="evaluate a single expression and exit")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="print results as computed, without reducing to lowest terms",
    )
    parser.add_argument(
        "--normalize-intermediate",
        action="store_true",
        default=CALCULATOR_CONFIG["normalize_intermediate"],
        help="reduce every intermediate result to lowest terms",
    )
    parser.add_argument("--log-level", default=CALCULATOR_CONFIG["log_level"], help="logging level")
    return parser


def format_result(result: Fraction, normalize: bool) -> str:
    try:
        return str(result.normalized() if normalize else result)
    except ValueError as e:
        # terms longer than sys.get_int_max_str_digits()
        raise ResultFormatError(str(e)) from e


def run_line(code: str, normalize_intermediate: bool, normalize_output: bool) -> tuple[bool, str]:
    try:
        result = evaluate(code, normalize_intermediate=normalize_intermediate)
        return True, format_result(result, normalize_output)
    except CalculatorError as e:
        logger.debug("Rejected %r: %s", code, type(e).__name__)
        return False, str(e)


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    normalize_output = CALCULATOR_CONFIG["normalize_output"] and not args.raw

    if args.expression is not None:
        ok, output = run_line(args.expression, args.normalize_intermediate, normalize_output)
        print(output)
        return 0 if ok else 1

    while True:
        try:
            code = input(CALCULATOR_CONFIG["prompt"])
        except EOFError:
            break

        if code == CALCULATOR_CONFIG["exit_command"]:
            break
        if not code:
            continue

        _, output = run_line(code, args.normalize_intermediate, normalize_output)
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
