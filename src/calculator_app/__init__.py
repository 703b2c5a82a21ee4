"""Button-driven calculator engine with a Flask front-end."""

from .engine import CalculatorEngine, CalculatorState
from .errors import CalculatorError
from .events import Operator, UnaryFunction, parse_button
from .formatter import format_display
from .numeric import compute

__all__ = [
    "CalculatorEngine",
    "CalculatorState",
    "CalculatorError",
    "Operator",
    "UnaryFunction",
    "parse_button",
    "format_display",
    "compute",
]
