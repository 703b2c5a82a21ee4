"""
Exceptions raised by the calculator engine.

Every failure maps to the single "Error" display state; the concrete class
only matters for logging and tests.
"""


class CalculatorError(Exception):
    """Base class for calculation failures."""


class ParseError(CalculatorError):
    """An operand could not be read as a number."""


class DivideByZeroError(CalculatorError):
    """Division with a zero right-hand operand."""


class DomainError(CalculatorError):
    """A unary function was applied outside its valid domain."""


class ResultOverflowError(CalculatorError):
    """The result is not a finite number."""


__all__ = [
    "CalculatorError",
    "ParseError",
    "DivideByZeroError",
    "DomainError",
    "ResultOverflowError",
]
