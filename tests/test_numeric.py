"""Tests for binary calculation and rounding."""

import pytest

from calculator_app.errors import DivideByZeroError, DomainError, ParseError, ResultOverflowError
from calculator_app.events import Operator, UnaryFunction
from calculator_app.numeric import apply_function, compute, round_significant, to_literal


def test_basic_operations():
    assert compute("6", "3", Operator.ADD) == 9
    assert compute("6", "3", Operator.SUBTRACT) == 3
    assert compute("6", "3", Operator.MULTIPLY) == 18
    assert compute("6", "3", Operator.DIVIDE) == 2


def test_divide_by_zero_only_when_divisor_is_zero():
    with pytest.raises(DivideByZeroError):
        compute("6", "0", Operator.DIVIDE)
    with pytest.raises(DivideByZeroError):
        compute("0", "0.0", Operator.DIVIDE)
    assert compute("0", "6", Operator.DIVIDE) == 0


def test_result_is_rounded():
    assert compute("0.1", "0.2", Operator.ADD) == 0.3
    assert compute("1", "3", Operator.DIVIDE) == 0.333333333333


def test_parse_error():
    with pytest.raises(ParseError):
        compute("abc", "1", Operator.ADD)
    with pytest.raises(ParseError):
        compute("1", "Error", Operator.ADD)


def test_overflow():
    with pytest.raises(ResultOverflowError):
        compute("1e308", "10", Operator.MULTIPLY)


def test_no_operator_returns_current():
    assert compute("1", "2", None) == 2


def test_rounding_is_idempotent():
    for value in [0.1, 123456.789, 1.23456789012e-5, -98765.4321, 2.0 / 3.0]:
        once = round_significant(value)
        assert round_significant(once) == once


def test_apply_function_domain():
    with pytest.raises(DomainError):
        apply_function(UnaryFunction.SQRT, -1.0)
    with pytest.raises(DomainError):
        apply_function(UnaryFunction.LOG, 0.0)
    assert apply_function(UnaryFunction.SQRT, 16.0) == 4


def test_to_literal():
    assert to_literal(5.0) == "5"
    assert to_literal(-0.0) == "0"
    assert to_literal(0.25) == "0.25"
    assert float(to_literal(1.5e-9)) == 1.5e-9


def test_to_literal_never_uses_exponent():
    for value in [-1e-07, 1.5e-9, 2.5e-12, 1e25]:
        text = to_literal(value)
        assert "e" not in text
        assert float(text) == value
