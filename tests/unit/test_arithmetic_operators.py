from __future__ import annotations

import math

import pytest

from formulaops.errors import ErrorKind, EvaluationError
from formulaops.operators import add, minus, multiply, power

VALUE = EvaluationError(ErrorKind.VALUE)
NUM = EvaluationError(ErrorKind.NUM)
DIV_ZERO = EvaluationError(ErrorKind.DIV_ZERO)


@pytest.mark.unit
def test_add():
    assert add.execute(2, 3) == 5
    assert add.execute(1, 2, 3, 4) == 10
    assert add.execute("1", "2.5") == 3.5
    assert add.execute(7) == 7
    assert add.execute("x", 1) == VALUE
    assert add.execute(1, True) == VALUE
    assert add.execute(1e308, 1e308) == NUM
    assert add.execute(math.inf, -math.inf) == VALUE


@pytest.mark.unit
def test_minus_subtracts_the_rest_from_the_first():
    assert minus.execute(8, 3) == 5
    assert minus.execute(10, 3, 2) == 5
    assert minus.execute(5) == 5
    assert minus.execute("9", "4") == 5
    assert minus.execute(1, None) == VALUE
    assert minus.execute(-1e308, 1e308) == NUM


@pytest.mark.unit
def test_add_and_minus_fold_left_to_right():
    assert minus.execute(0.1, 0.2, 0.3) == (0.1 - 0.2) - 0.3
    assert add.execute(0.1, 0.2, 0.3) == (0.1 + 0.2) + 0.3
    assert add.execute(1e308, 1e308, -1e308) == NUM


@pytest.mark.unit
def test_multiply():
    assert multiply.execute(2, 4) == 8
    assert multiply.execute(2, 3, 4) == 24
    assert multiply.execute("0.5", 4) == 2
    assert multiply.execute(3, "three") == VALUE
    assert multiply.execute(1e200, 1e200) == NUM


@pytest.mark.unit
def test_power():
    assert power.execute(2, 10) == 1024
    assert power.execute(0, 0) == 1
    assert power.execute("9", "0.5") == 3
    assert power.execute(-2, 3) == -8
    assert power.execute("x", 2) == VALUE
    assert power.execute(2, None) == VALUE


@pytest.mark.unit
def test_power_edge_cases():
    assert power.execute(0, -1) == DIV_ZERO
    assert power.execute(-8, 1 / 3) == VALUE
    assert power.execute(10, 400) == NUM


@pytest.mark.unit
def test_symbols():
    assert [add.SYMBOL, minus.SYMBOL, multiply.SYMBOL, power.SYMBOL] == ["+", "-", "*", "^"]
