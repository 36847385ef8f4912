from fraction_calculator.runtime import EvaluationError, evaluate_postfix
from fraction_calculator.shunting_yard import ConversionError, to_postfix
from fraction_calculator.tokenizer import TokenizerError, tokenize, untokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "3 + 4",
    "1/2 - 2 * 7/8",
    "1/2 + 2 * -1/8",
    "2/3 + 5/8 * -8/7",
    "3 + 4/5 * 6/7 + 1/2 - 2 * 3",
    "10 / 5 / 2",
    "1/2 / 0",
    "3 ? 4",
    "3  + 4",
    "+ 3 4",
    "3 +",
    "3 4",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {untokenize(tokens)}")

    try:
        postfix = to_postfix(tokens)
    except ConversionError as e:
        print(e)
        continue
    print(f"postfix: {untokenize(postfix)}")

    try:
        result = evaluate_postfix(postfix)
    except EvaluationError as e:
        print(e)
        continue
    print(f"result: {result} (lowest terms: {result.normalized()})")
