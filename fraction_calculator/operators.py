import enum

from fraction_calculator.utils import PrintableEnum


class OperatorKind(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, s: str) -> "OperatorKind | None":
        for kind, symbol in _SYMBOLS.items():
            if symbol == s:
                return kind
        return None


_PRECEDENCE = {
    OperatorKind.ADD: 0,
    OperatorKind.SUB: 0,
    OperatorKind.MUL: 1,
    OperatorKind.DIV: 1,
}

_SYMBOLS = {
    OperatorKind.ADD: "+",
    OperatorKind.SUB: "-",
    OperatorKind.MUL: "*",
    OperatorKind.DIV: "/",
}
