import logging
from dataclasses import dataclass

from fraction_calculator.tokenizer import Number, Operator, Token, untokenize
from fraction_calculator.utils import CalculatorError

logger = logging.getLogger(__name__)


@dataclass
class ConversionError(CalculatorError):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens)) + (" " if parsed_tokens else "")
        return "\n".join([f"Conversion error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorders infix tokens into postfix (RPN) order

    Operators of equal precedence are popped before the new one is pushed, so every
    operator is left-associative.
    """
    output: list[Token] = []
    operator_stack: list[Token] = []
    for i, token in enumerate(tokens):
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            while operator_stack:
                top = operator_stack[-1]
                if not isinstance(top, Operator):
                    raise ConversionError(f"Operator stack holds a non-operator {top}", tokens=tokens, error_token_idx=i)
                if token.kind.precedence > top.kind.precedence:
                    break
                output.append(operator_stack.pop())
            operator_stack.append(token)
        else:
            raise ConversionError(f"Unexpected token: {token!r}", tokens=tokens, error_token_idx=i)

    while operator_stack:
        output.append(operator_stack.pop())

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Postfix form: %s", untokenize(output))
    return output
