import logging
from dataclasses import dataclass

from fraction_calculator.fraction import Fraction, FractionParseError
from fraction_calculator.operators import OperatorKind
from fraction_calculator.utils import CalculatorError

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(CalculatorError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


@dataclass(frozen=True)
class Number:
    value: Fraction

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind

    def __str__(self) -> str:
        return self.kind.symbol


Token = Number | Operator

SEPARATOR = " "


def tokenize(code: str) -> list[Token]:
    """Splits a line on single spaces, the only separator the grammar allows

    An operator must directly follow a number, otherwise it has no left operand.
    """
    if not code:
        return []

    tokens: list[Token] = []
    char_idx = 0
    for lexeme in code.split(SEPARATOR):
        operator = OperatorKind.from_symbol(lexeme)
        if operator is not None:
            if not tokens or not isinstance(tokens[-1], Number):
                raise TokenizerError(
                    f"Operator {lexeme!r} has no left operand", code=code, error_char_idx=char_idx
                )
            tokens.append(Operator(operator))
        else:
            try:
                tokens.append(Number(Fraction.parse(lexeme)))
            except FractionParseError:
                shown = lexeme if len(lexeme) <= 20 else lexeme[:20] + "..."
                errmsg = "Unexpected separator" if not lexeme else f"Invalid number: {shown!r}"
                raise TokenizerError(errmsg, code=code, error_char_idx=char_idx) from None
        char_idx += len(lexeme) + len(SEPARATOR)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Tokenized %r into %s", code, untokenize(tokens))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    return SEPARATOR.join(str(t) for t in tokens)
