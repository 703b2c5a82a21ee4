"""Display formatting for the calculator's current input."""

import math

from .config import (
    EXPONENT_DIGITS,
    EXPONENT_LOWER,
    EXPONENT_UPPER,
    MAX_INPUT_LENGTH,
    SIGNIFICANT_DIGITS,
)
from .numeric import positional, round_significant

ERROR_TEXT = "Error"


def format_display(current_input: str) -> str:
    """
    Render the current input for the display.

    Args:
        current_input: Numeric literal, "0", or "Error"

    Returns:
        Display text
    """
    if current_input == ERROR_TEXT:
        return ERROR_TEXT
    try:
        value = float(current_input)
    except ValueError:
        return ERROR_TEXT

    if math.isnan(value):
        return ERROR_TEXT
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    magnitude = abs(value)
    if magnitude > EXPONENT_UPPER or (value != 0 and magnitude < EXPONENT_LOWER):
        return f"{value:.{EXPONENT_DIGITS}e}"

    text = positional(value)
    if len(text) > MAX_INPUT_LENGTH:
        text = positional(round_significant(value, SIGNIFICANT_DIGITS))
    return text
