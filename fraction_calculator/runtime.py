import logging
from dataclasses import dataclass
from typing import Callable

from fraction_calculator.config import CALCULATOR_CONFIG
from fraction_calculator.fraction import Fraction
from fraction_calculator.operators import OperatorKind
from fraction_calculator.shunting_yard import to_postfix
from fraction_calculator.tokenizer import Number, Operator, Token, tokenize, untokenize
from fraction_calculator.utils import CalculatorError

logger = logging.getLogger(__name__)


@dataclass
class EvaluationError(CalculatorError):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        # tokens are in postfix order, which differs from the line the user typed
        prefix = "postfix: "
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * (len(prefix) + len(untokenize(parsed_tokens))) + (" " if parsed_tokens else "")
        return "\n".join(
            [f"Evaluation error: {self.errmsg}", prefix + untokenize(self.tokens), filler_whitespace + "^"]
        )


class DivisionByZeroError(EvaluationError):
    pass


BinaryOperationImpl = Callable[[Fraction, Fraction], Fraction]

binary_impls: dict[OperatorKind, BinaryOperationImpl] = {
    OperatorKind.ADD: Fraction.add,
    OperatorKind.SUB: Fraction.subtract,
    OperatorKind.MUL: Fraction.multiply,
    OperatorKind.DIV: Fraction.divide,
}


def evaluate(code: str, normalize_intermediate: bool | None = None) -> Fraction:
    if normalize_intermediate is None:
        normalize_intermediate = CALCULATOR_CONFIG["normalize_intermediate"]
    tokens = tokenize(code)
    postfix = to_postfix(tokens)
    result = evaluate_postfix(postfix, normalize_intermediate=normalize_intermediate)
    logger.debug("%r = %s", code, result)
    return result


def evaluate_postfix(tokens: list[Token], normalize_intermediate: bool = False) -> Fraction:
    stack: list[Fraction] = []
    for i, token in enumerate(tokens):
        if isinstance(token, Number):
            # copied so that normalizing the result never touches the token
            stack.append(Fraction(token.value.numerator, token.value.denominator))
        elif isinstance(token, Operator):
            if len(stack) < 2:
                raise EvaluationError(
                    f"Insufficient operands for {token.kind.symbol!r}", tokens=tokens, error_token_idx=i
                )
            right = stack.pop()
            left = stack.pop()
            if token.kind is OperatorKind.DIV and right.is_zero():
                raise DivisionByZeroError("Division by zero", tokens=tokens, error_token_idx=i)
            result = binary_impls[token.kind](left, right)
            if normalize_intermediate:
                result.normalize()
            stack.append(result)
        else:
            raise EvaluationError(f"Unexpected token: {token!r}", tokens=tokens, error_token_idx=i)

    if not stack:
        raise EvaluationError("Empty expression", tokens=tokens, error_token_idx=0)
    if len(stack) > 1:
        raise EvaluationError(
            f"{len(stack) - 1} operand(s) left without an operator", tokens=tokens, error_token_idx=len(tokens)
        )
    return stack[0]
