from __future__ import annotations

import pytest

from squash.common.exceptions import InvalidOperationError
from squash.number.calculator import Calculator
from squash.number.formatter import Formatter


@pytest.mark.parametrize(
    "left,op,right,expected",
    [(2, "+", 3, 5), (2, "-", 3, -1), (4, "*", 2.5, 10.0), (7, "/", 2, 3.5)],
)
def test_calculate(left, op, right, expected) -> None:  # noqa: ANN001
    assert Calculator().calculate(left, op, right) == expected


def test_unknown_operator() -> None:
    with pytest.raises(InvalidOperationError):
        Calculator().calculate(1, "%", 2)


def test_wrong_arity() -> None:
    with pytest.raises(InvalidOperationError):
        Calculator().calculate(1, 2)


def test_format() -> None:
    f = Formatter()
    assert f.format(1234567.891) == "1,234,567.891"
    assert f.format(1234.0) == "1,234"
    assert f.format(-0.5) == "-0.5"


def test_round() -> None:
    f = Formatter()
    assert f.round(3.14159, 2) == "3.14"
    assert f.round(2.5) == "3"
    assert f.round(-2.5) == "-3"
    assert f.round(1.005, 2) == "1.01"
    assert f.round(1, 3) == "1.000"


def test_division_by_zero() -> None:
    with pytest.raises(InvalidOperationError):
        Calculator().calculate(1, "/", 0)
