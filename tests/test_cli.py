"""Tests for the click command line."""

from click.testing import CliRunner

from calculator_app.cli import main


def test_press_quiet():
    result = CliRunner().invoke(main, ["press", "--quiet", "2", "add", "3", "equals"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_press_prints_each_step():
    result = CliRunner().invoke(main, ["press", "9", "sqrt"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == 2
    assert lines[-1].split() == ["sqrt", "3"]


def test_press_requires_buttons():
    result = CliRunner().invoke(main, ["press"])
    assert result.exit_code != 0
