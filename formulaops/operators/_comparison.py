"""Helpers shared by the equality and ordering operators."""

from __future__ import annotations

from typing import Any, Callable
import math

from formulaops.number import to_number
from formulaops.operators._arithmetic import as_float


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality without coercion: numbers compare by value, anything else by type and value."""
    if _is_number(left) and _is_number(right):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right


def _comparable(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if value is None:
        return 0.0
    return as_float(to_number(value))


def loose_compare(left: Any, right: Any, op: Callable[[Any, Any], bool]) -> bool:
    """Order two operands: text against text lexically, everything else numerically.

    A side that does not coerce to a number makes the comparison false.
    """
    if isinstance(left, str) and isinstance(right, str):
        return op(left, right)
    left_number = _comparable(left)
    right_number = _comparable(right)
    if math.isnan(left_number) or math.isnan(right_number):
        return False
    return op(left_number, right_number)
