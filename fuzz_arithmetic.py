"""Compares the calculator against the standard library's fractions on random expressions"""
import fractions
import random

from fraction_calculator.runtime import DivisionByZeroError, evaluate

OPERATORS = ["+", "-", "*", "/"]


def eval_py(code: str) -> fractions.Fraction | str:
    # every literal becomes a Fraction call so that "/" inside a literal stays exact
    py_code = " ".join(t if t in OPERATORS else f"fractions.Fraction({t!r})" for t in code.split(" "))
    try:
        return eval(py_code)
    except ZeroDivisionError as e:
        return str(e)


def eval_my(code: str, normalize_intermediate: bool) -> fractions.Fraction | str:
    try:
        result = evaluate(code, normalize_intermediate=normalize_intermediate).normalized()
    except DivisionByZeroError as e:
        return str(e)
    return fractions.Fraction(result.numerator, result.denominator)


def generate_literal() -> str:
    numerator = random.randint(-20, 20)
    if random.random() < 0.5:
        return str(numerator)
    return f"{numerator}/{random.randint(1, 20)}"


def generate(operand_count: int) -> str:
    parts = [generate_literal()]
    for _ in range(operand_count - 1):
        parts.append(random.choice(OPERATORS))
        parts.append(generate_literal())
    return " ".join(parts)


if __name__ == "__main__":
    while True:
        code = generate(random.randint(1, 8))
        res_py = eval_py(code)
        for normalize_intermediate in (False, True):
            res_my = eval_my(code, normalize_intermediate)
            if isinstance(res_py, str) and isinstance(res_my, str):
                continue
            if res_py == res_my:
                continue
            print(f"{code!r} (normalize_intermediate={normalize_intermediate})\npy: {res_py}\nmy: {res_my}\n\n")
