"""Helpers shared by the arithmetic operators: float semantics and outcome classification."""

from __future__ import annotations

from typing import Any, Callable, Iterable
import math

from formulaops.errors import ErrorKind, EvaluationError
from formulaops.number import to_number


ScalarBinaryOp = Callable[[float, float], float]


def as_float(value: Any) -> float:
    """Widen a coerced number to float, saturating integers beyond float range."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def ieee_divide(dividend: float, divisor: float) -> float:
    """Divide with IEEE-754 results instead of ZeroDivisionError."""
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if math.isnan(dividend) or dividend == 0:
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def fold(first: Any, rest: Iterable[Any], op: ScalarBinaryOp) -> float:
    """Left fold of ``op`` over the coerced operands.

    Intermediate NaN and infinite values are carried through; nothing is
    classified until the fold completes.
    """
    accumulator = to_number(first)
    for value in rest:
        accumulator = op(as_float(accumulator), as_float(to_number(value)))
    return accumulator


def classify(result: float, infinite_kind: ErrorKind) -> float | EvaluationError:
    """Map a raw arithmetic result to a number or an ``EvaluationError``.

    NaN is always ``VALUE``; an infinite result becomes ``infinite_kind``.
    """
    widened = as_float(result)
    if math.isnan(widened):
        return EvaluationError(ErrorKind.VALUE)
    if not math.isfinite(widened):
        return EvaluationError(infinite_kind)
    return result
