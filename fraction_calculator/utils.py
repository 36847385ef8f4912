import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class CalculatorError(Exception):
    """Base for errors raised by any stage of the expression pipeline"""
