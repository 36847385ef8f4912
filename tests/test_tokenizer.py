import pytest

from fraction_calculator.fraction import Fraction
from fraction_calculator.operators import OperatorKind
from fraction_calculator.tokenizer import Number, Operator, TokenizerError, tokenize, untokenize


def test_tokenize() -> None:
    assert tokenize("1/2 + 2 * -1/8") == [
        Number(Fraction(1, 2)),
        Operator(OperatorKind.ADD),
        Number(Fraction(2)),
        Operator(OperatorKind.MUL),
        Number(Fraction(-1, 8)),
    ]


def test_tokenize_keeps_literals_unnormalized() -> None:
    [token] = tokenize("6/18")
    assert isinstance(token, Number)
    assert token.value.is_same_as(Fraction(6, 18))


def test_tokenize_empty_line() -> None:
    assert tokenize("") == []


@pytest.mark.parametrize(
    "code, error_char_idx",
    [
        pytest.param("3 ? 4", 2),
        pytest.param("3 + 4.5", 4),
        pytest.param("3  + 4", 2),  # double space
        pytest.param("3+4", 0),  # missing spaces
        pytest.param("3 + 4 ", 6),  # trailing space
        pytest.param(" 3", 0),
        pytest.param("+ 3 4", 0),  # no left operand
        pytest.param("3 + * 4", 4),
        pytest.param("1/2/3", 0),
    ],
)
def test_tokenize_invalid(code: str, error_char_idx: int) -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize(code)
    assert exc_info.value.error_char_idx == error_char_idx
    assert exc_info.value.code == code


def test_tokenizer_error_message_points_at_token() -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize("3 ? 4")
    assert str(exc_info.value) == "\n".join(["[Tokenizer error] Invalid number: '?'", "3 ? 4", "  ^"])


def test_operator_kinds() -> None:
    assert [k.symbol for k in OperatorKind] == ["+", "-", "*", "/"]
    assert OperatorKind.ADD.precedence == OperatorKind.SUB.precedence == 0
    assert OperatorKind.MUL.precedence == OperatorKind.DIV.precedence == 1
    assert OperatorKind.from_symbol("/") is OperatorKind.DIV
    assert OperatorKind.from_symbol("^") is None


def test_untokenize() -> None:
    assert untokenize(tokenize("3 + 4/5 * -6")) == "3 + 4/5 * -6"
    assert untokenize([]) == ""


def test_tokenize_literal_beyond_int_digit_limit(int_str_digit_limit: int) -> None:
    code = "9" * (int_str_digit_limit + 1) + " + 1"
    with pytest.raises(TokenizerError) as exc_info:
        tokenize(code)
    assert exc_info.value.error_char_idx == 0
    assert exc_info.value.errmsg == "Invalid number: '99999999999999999999...'"
