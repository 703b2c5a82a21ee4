"""
Calculator engine.

A state machine that consumes button events and produces the display text:
- Digit entry with a length limit
- Chained binary operations without precedence
- Sign toggle, percentage and scientific functions
- A single "Error" state that clears itself on the next key press
"""

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Callable, Dict, Optional

from .config import MAX_INPUT_LENGTH
from .errors import CalculatorError
from .events import (
    ApplyFunction,
    Clear,
    DecimalPoint,
    Digit,
    Equals,
    Event,
    Operator,
    Percentage,
    SetOperator,
    ToggleSign,
    parse_button,
)
from .formatter import ERROR_TEXT, format_display
from .numeric import apply_function, compute, parse_operand, round_significant, to_literal

logger = logging.getLogger(__name__)

RenderTarget = Callable[[str], None]


@dataclass
class CalculatorState:
    """Mutable state owned by one engine."""

    current_input: str = "0"
    previous_input: Optional[str] = None
    operator: Optional[Operator] = None
    should_reset_display: bool = False
    last_action_was_operator: bool = False


class CalculatorEngine:
    """Calculator managing state and operations."""

    def __init__(self, render: Optional[RenderTarget] = None):
        """
        Initialize calculator with default state.

        Args:
            render: Optional sink that receives the display text after every event
        """
        self._state = CalculatorState()
        self._render = render
        self._lock = threading.Lock()
        self._handlers: Dict[type, Callable] = {
            Digit: self._input_digit,
            DecimalPoint: self._input_decimal,
            SetOperator: self._set_operator,
            Equals: self._equals,
            Clear: self._clear,
            ToggleSign: self._toggle_sign,
            Percentage: self._percentage,
            ApplyFunction: self._apply_function,
        }
        self._emit(self.display)

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return format_display(self._state.current_input)

    def snapshot(self) -> Dict:
        """Return the current state as a plain dict."""
        with self._lock:
            data = asdict(self._state)
        if data["operator"] is not None:
            data["operator"] = data["operator"].value
        return data

    def handle(self, event: Event) -> str:
        """
        Process one input event.

        Args:
            event: Any event from calculator_app.events

        Returns:
            The display text after the event
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported event: {event!r}")

        with self._lock:
            if self._state.current_input == ERROR_TEXT and not isinstance(event, Clear):
                self._reset()
            try:
                handler(event)
            except CalculatorError as e:
                logger.info("Calculation failed on %r: %s", event, e)
                self._enter_error()
                return self._emit(ERROR_TEXT)
            return self._emit(self.display)

    def press(self, tag: str) -> str:
        """Handle a raw button tag; unknown buttons leave the state untouched."""
        event = parse_button(tag)
        if event is None:
            logger.debug("Ignoring button %r", tag)
            with self._lock:
                return self.display
        return self.handle(event)

    def _emit(self, text: str) -> str:
        if self._render is not None:
            self._render(text)
        return text

    def _reset(self) -> None:
        self._state = CalculatorState()

    def _enter_error(self) -> None:
        self._state = CalculatorState(current_input=ERROR_TEXT)

    def _input_digit(self, event: Digit) -> None:
        state = self._state
        if state.current_input == "0" or state.should_reset_display:
            state.current_input = event.value
            state.should_reset_display = False
        elif len(state.current_input) < MAX_INPUT_LENGTH:
            state.current_input += event.value
        state.last_action_was_operator = False

    def _input_decimal(self, event: DecimalPoint) -> None:
        state = self._state
        if state.should_reset_display:
            state.current_input = "0."
            state.should_reset_display = False
        elif "." not in state.current_input and len(state.current_input) < MAX_INPUT_LENGTH:
            state.current_input += "."
        state.last_action_was_operator = False

    def _set_operator(self, event: SetOperator) -> None:
        state = self._state
        if state.last_action_was_operator and state.previous_input is not None:
            # Rapid operator presses only swap the pending operator
            state.operator = event.op
            return

        if (
            state.operator is not None
            and state.previous_input is not None
            and not state.should_reset_display
        ):
            result = to_literal(compute(state.previous_input, state.current_input, state.operator))
            state.current_input = result
            state.previous_input = result
        else:
            state.previous_input = state.current_input

        state.operator = event.op
        state.should_reset_display = True
        state.last_action_was_operator = True

    def _equals(self, event: Equals) -> None:
        state = self._state
        state.last_action_was_operator = False
        if state.operator is None or state.previous_input is None:
            return
        result = compute(state.previous_input, state.current_input, state.operator)
        state.current_input = to_literal(result)
        state.operator = None
        state.previous_input = None
        state.should_reset_display = True

    def _clear(self, event: Clear) -> None:
        self._reset()

    def _toggle_sign(self, event: ToggleSign) -> None:
        state = self._state
        state.last_action_was_operator = False
        if state.current_input in ("0", ERROR_TEXT):
            return
        value = -parse_operand(state.current_input)
        state.current_input = to_literal(round_significant(value))

    def _percentage(self, event: Percentage) -> None:
        state = self._state
        state.last_action_was_operator = False
        value = parse_operand(state.current_input) / 100
        state.current_input = to_literal(round_significant(value))
        state.should_reset_display = True

    def _apply_function(self, event: ApplyFunction) -> None:
        state = self._state
        state.last_action_was_operator = False
        result = apply_function(event.name, parse_operand(state.current_input))
        state.current_input = to_literal(result)
        state.should_reset_display = True
