"""
=============================================================================
MODULE NAME: events.py
=============================================================================

INPUT FILES:
- None (event dataclasses and button-tag parsing only).

OUTPUT FILES:
- None.

NOTES:
- Button tags are the identifiers the page sends for each key press.
- parse_button returns None for placeholder or unknown buttons so callers
  can treat them as no-ops.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


DIGITS = frozenset("0123456789")


class Operator(str, Enum):
    """Binary operators that can be pending between two operands."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class UnaryFunction(str, Enum):
    """Single-operand functions applied to the current value."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    SQUARE = "square"
    EXP = "exp"


@dataclass(frozen=True, slots=True)
class Digit:
    value: str

    def __post_init__(self) -> None:
        if self.value not in DIGITS:
            raise ValueError(f"Digit expects a single character 0-9, got {self.value!r}")


@dataclass(frozen=True, slots=True)
class DecimalPoint:
    pass


@dataclass(frozen=True, slots=True)
class SetOperator:
    op: Operator


@dataclass(frozen=True, slots=True)
class Equals:
    pass


@dataclass(frozen=True, slots=True)
class Clear:
    pass


@dataclass(frozen=True, slots=True)
class ToggleSign:
    pass


@dataclass(frozen=True, slots=True)
class Percentage:
    pass


@dataclass(frozen=True, slots=True)
class ApplyFunction:
    name: UnaryFunction


Event = Union[
    Digit,
    DecimalPoint,
    SetOperator,
    Equals,
    Clear,
    ToggleSign,
    Percentage,
    ApplyFunction,
]

_SIMPLE_BUTTONS: Dict[str, Event] = {
    "decimal": DecimalPoint(),
    "equals": Equals(),
    "clear": Clear(),
    "toggle-sign": ToggleSign(),
    "percentage": Percentage(),
}


def parse_button(tag: str) -> Optional[Event]:
    """
    Map a button tag from the page to an event.

    Args:
        tag: Button identifier, e.g. "7", "add", "toggle-sign", "sqrt"

    Returns:
        The matching event, or None if the button has no behaviour
    """
    tag = tag.strip().lower()
    if tag in DIGITS:
        return Digit(tag)
    if tag in _SIMPLE_BUTTONS:
        return _SIMPLE_BUTTONS[tag]
    try:
        return SetOperator(Operator(tag))
    except ValueError:
        pass
    try:
        return ApplyFunction(UnaryFunction(tag))
    except ValueError:
        return None


__all__ = [
    "Operator",
    "UnaryFunction",
    "Digit",
    "DecimalPoint",
    "SetOperator",
    "Equals",
    "Clear",
    "ToggleSign",
    "Percentage",
    "ApplyFunction",
    "Event",
    "parse_button",
]
