import sys
from typing import Iterator

import pytest


@pytest.fixture
def int_str_digit_limit() -> Iterator[int]:
    """Pins the interpreter's int <-> str conversion limit for the duration of a test"""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str conversion limit")
    old_limit = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(old_limit)
