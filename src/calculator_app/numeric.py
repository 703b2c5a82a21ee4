"""
Arithmetic helpers for the calculator engine.

Floats are rounded to a fixed number of significant digits after every
operation so results like 0.1 + 0.2 display as 0.3.
"""

import math
from decimal import Decimal
from typing import Callable, Dict, Optional

from .config import SIGNIFICANT_DIGITS
from .errors import DivideByZeroError, DomainError, ParseError, ResultOverflowError
from .events import Operator, UnaryFunction


def round_significant(value: float, digits: int = SIGNIFICANT_DIGITS) -> float:
    """Round to `digits` significant decimal digits. Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return float(f"{value:.{digits}g}")


def positional(value: float) -> str:
    """Shortest round-tripping decimal string, never in exponent form."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def to_literal(value: float) -> str:
    """
    Convert a number to the string stored as the calculator's input.

    The result is plain decimal digits so further digit and decimal-point
    presses extend it as a number. Negative zero collapses to "0".
    """
    return positional(value)


def parse_operand(text: Optional[str]) -> float:
    """
    Read an operand string as a float.

    Raises:
        ParseError: If the text is missing or not numeric
    """
    if text is None:
        raise ParseError("Missing operand")
    try:
        value = float(text)
    except ValueError:
        raise ParseError(f"Not a number: {text!r}") from None
    if math.isnan(value):
        raise ParseError(f"Not a number: {text!r}")
    return value


def _check_finite(value: float, what: str) -> float:
    if math.isnan(value):
        raise DomainError(f"{what} is undefined")
    if math.isinf(value):
        raise ResultOverflowError(f"{what} overflowed")
    return value


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivideByZeroError("Cannot divide by zero")
    return a / b


_BINARY: Dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUBTRACT: lambda a, b: a - b,
    Operator.MULTIPLY: lambda a, b: a * b,
    Operator.DIVIDE: _divide,
}


def compute(previous: str, current: str, operator: Optional[Operator]) -> float:
    """
    Apply a binary operator to two operand strings.

    Args:
        previous: Left operand (the pending value)
        current: Right operand (the value on display)
        operator: Operation to perform; None returns the right operand

    Returns:
        The result rounded to SIGNIFICANT_DIGITS significant digits

    Raises:
        ParseError: If either operand is not numeric
        DivideByZeroError: If dividing by zero
        ResultOverflowError: If the result is infinite
    """
    a = parse_operand(previous)
    b = parse_operand(current)
    if operator is None:
        return b
    result = _check_finite(_BINARY[operator](a, b), operator.value)
    return round_significant(result)


def _log10(x: float) -> float:
    if x <= 0:
        raise DomainError("log is defined only for positive values")
    return math.log10(x)


def _ln(x: float) -> float:
    if x <= 0:
        raise DomainError("ln is defined only for positive values")
    return math.log(x)


def _sqrt(x: float) -> float:
    if x < 0:
        raise DomainError("sqrt is undefined for negative values")
    return math.sqrt(x)


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        raise ResultOverflowError("exp overflowed") from None


# Trig functions take degrees
_UNARY: Dict[UnaryFunction, Callable[[float], float]] = {
    UnaryFunction.SIN: lambda x: math.sin(math.radians(x)),
    UnaryFunction.COS: lambda x: math.cos(math.radians(x)),
    UnaryFunction.TAN: lambda x: math.tan(math.radians(x)),
    UnaryFunction.LOG: _log10,
    UnaryFunction.LN: _ln,
    UnaryFunction.SQRT: _sqrt,
    UnaryFunction.SQUARE: lambda x: x * x,
    UnaryFunction.EXP: _exp,
}


def apply_function(name: UnaryFunction, value: float) -> float:
    """
    Apply a unary function and round the result.

    Raises:
        DomainError: If the value lies outside the function's domain
        ResultOverflowError: If the result is infinite
    """
    result = _check_finite(_UNARY[name](value), name.value)
    return round_significant(result)
