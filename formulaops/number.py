"""Numeric coercion shared by the arithmetic operators."""

from __future__ import annotations

from typing import Any
import math
import re


_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _parse_text(text: str) -> float:
    # Text containing a dot parses as a decimal, anything else as an integer;
    # in both cases only the leading literal counts ("12px" -> 12).
    if "." in text:
        match = _FLOAT_PREFIX.match(text)
        return float(match.group(1)) if match else math.nan
    match = _INT_PREFIX.match(text)
    if not match:
        return math.nan
    try:
        return int(match.group(1))
    except ValueError:
        # beyond the int conversion digit limit; float saturates to inf
        return float(match.group(1))


def to_number(value: Any) -> float:
    """Coerce an operand into a number.

    Never raises: anything that is not a number or numeric-looking text
    becomes NaN, so failures surface in the operator's outcome check.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return _parse_text(value)
    return math.nan


def invert_number(value: Any) -> float:
    return -to_number(value)
