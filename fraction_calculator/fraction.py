import math
import re
from dataclasses import dataclass


class FractionParseError(ValueError):
    pass


_SIGNED_INT_PATT = re.compile(r"[+-]?[0-9]+")


def _parse_signed_int(s: str) -> int:
    if not _SIGNED_INT_PATT.fullmatch(s):
        raise FractionParseError(f"Not an integer: {s!r}")
    try:
        return int(s)
    except ValueError as e:
        # longer than sys.get_int_max_str_digits()
        raise FractionParseError(str(e)) from e


@dataclass(eq=False)
class Fraction:
    """Exact rational number.

    Terms are stored verbatim: a zero or negative denominator is allowed and nothing is
    reduced until normalize() is called. Arithmetic works on the raw terms and returns
    unnormalized results, so "2/4" and "1/2" print differently but compare equal.
    """

    numerator: int
    denominator: int = 1

    @classmethod
    def parse(cls, s: str) -> "Fraction":
        """Parses "<int>" or "<int>/<int>", both terms optionally signed"""
        numerator, slash, denominator = s.partition("/")
        if not slash:
            return cls(_parse_signed_int(s))
        return cls(_parse_signed_int(numerator), _parse_signed_int(denominator))

    def normalize(self) -> None:
        if self.is_zero() or self.is_undefined():
            return
        gcd = math.gcd(self.numerator, self.denominator)
        self.numerator //= gcd
        self.denominator //= gcd
        if self.denominator < 0:
            self.numerator = -self.numerator
            self.denominator = -self.denominator

    def normalized(self) -> "Fraction":
        f = Fraction(self.numerator, self.denominator)
        f.normalize()
        return f

    def reciprocal(self) -> "Fraction":
        return Fraction(self.denominator, self.numerator)

    def is_same_as(self, other: "Fraction") -> bool:
        return self.numerator == other.numerator and self.denominator == other.denominator

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_undefined(self) -> bool:
        return self.denominator == 0

    def add(self, other: "Fraction") -> "Fraction":
        if self.denominator == other.denominator:
            return Fraction(self.numerator + other.numerator, self.denominator)
        return Fraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def subtract(self, other: "Fraction") -> "Fraction":
        return self.add(other.negate())

    def multiply(self, other: "Fraction") -> "Fraction":
        return Fraction(self.numerator * other.numerator, self.denominator * other.denominator)

    def divide(self, other: "Fraction") -> "Fraction":
        # no zero check: dividing by zero yields an undefined fraction
        return self.multiply(other.reciprocal())

    def negate(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    def _value_key(self) -> tuple[int, int]:
        if self.is_undefined():
            return self.numerator, self.denominator
        if self.is_zero():
            return 0, 1
        f = self.normalized()
        return f.numerator, f.denominator

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        if self.is_same_as(other):
            return True
        return self._value_key() == other._value_key()

    def __hash__(self) -> int:
        numerator, denominator = self._value_key()
        # integral values hash like the int they are equal to
        if denominator == 1:
            return hash(numerator)
        return hash((numerator, denominator))

    def _compare_key(self, other: "FractionLike") -> tuple[int, int]:
        other = _coerce(other)
        if self.is_undefined() or other.is_undefined():
            raise ValueError(f"Undefined fraction can't be ordered: {self} vs {other}")
        a, b = self._value_key()
        c, d = other._value_key()
        return a * d, c * b

    def __lt__(self, other: "FractionLike") -> bool:
        left, right = self._compare_key(other)
        return left < right

    def __le__(self, other: "FractionLike") -> bool:
        left, right = self._compare_key(other)
        return left <= right

    def __gt__(self, other: "FractionLike") -> bool:
        left, right = self._compare_key(other)
        return left > right

    def __ge__(self, other: "FractionLike") -> bool:
        left, right = self._compare_key(other)
        return left >= right

    def __add__(self, other: "FractionLike") -> "Fraction":
        return self.add(_coerce(other))

    def __radd__(self, other: "FractionLike") -> "Fraction":
        return _coerce(other).add(self)

    def __sub__(self, other: "FractionLike") -> "Fraction":
        return self.subtract(_coerce(other))

    def __rsub__(self, other: "FractionLike") -> "Fraction":
        return _coerce(other).subtract(self)

    def __mul__(self, other: "FractionLike") -> "Fraction":
        return self.multiply(_coerce(other))

    def __rmul__(self, other: "FractionLike") -> "Fraction":
        return _coerce(other).multiply(self)

    def __truediv__(self, other: "FractionLike") -> "Fraction":
        return self.divide(_coerce(other))

    def __rtruediv__(self, other: "FractionLike") -> "Fraction":
        return _coerce(other).divide(self)

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


FractionLike = Fraction | int


def _coerce(value: FractionLike) -> Fraction:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    raise TypeError(f"Expected Fraction or int, got {type(value).__name__}")
