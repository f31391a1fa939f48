"""
formulaops error vocabulary

Formula-level failures are values: every operator returns an
``EvaluationError`` instead of raising. Exceptions are reserved for
programming faults (unknown operators, malformed operator specs).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ErrorKind(Enum):
    """Closed set of error kinds shared by every operator handler."""

    ERROR = "ERROR"
    DIV_ZERO = "DIV/0"
    NAME = "NAME"
    NOT_AVAILABLE = "N/A"
    NULL = "NULL"
    NUM = "NUM"
    REF = "REF"
    VALUE = "VALUE"

    @property
    def display(self) -> str:
        return _DISPLAY[self]


_DISPLAY = {
    ErrorKind.ERROR: "#ERROR!",
    ErrorKind.DIV_ZERO: "#DIV/0!",
    ErrorKind.NAME: "#NAME?",
    ErrorKind.NOT_AVAILABLE: "#N/A",
    ErrorKind.NULL: "#NULL!",
    ErrorKind.NUM: "#NUM!",
    ErrorKind.REF: "#REF!",
    ErrorKind.VALUE: "#VALUE!",
}

_BY_DISPLAY = {display: kind for kind, display in _DISPLAY.items()}


@dataclass(frozen=True)
class EvaluationError:
    """Tagged error outcome of an operator evaluation.

    An ``EvaluationError`` is terminal: it is handed back to the caller
    unchanged and never takes part in further arithmetic.
    """

    kind: ErrorKind

    @property
    def display(self) -> str:
        return self.kind.display

    @classmethod
    def from_text(cls, text: str) -> "EvaluationError":
        """Build an error from a kind identifier (``DIV/0``) or display (``#DIV/0!``)"""
        kind = _lookup_kind(text)
        if kind is None:
            raise ValueError(f"Unknown error kind: {text!r}")
        return cls(kind)

    def __str__(self) -> str:
        return self.display


def _lookup_kind(value: Any) -> Optional[ErrorKind]:
    if isinstance(value, ErrorKind):
        return value
    if isinstance(value, EvaluationError):
        return value.kind
    if not isinstance(value, str):
        return None
    text = value.strip().upper()
    if text in _BY_DISPLAY:
        return _BY_DISPLAY[text]
    try:
        return ErrorKind(text)
    except ValueError:
        return None


def error(kind: Union[ErrorKind, EvaluationError, str, None]) -> Optional[str]:
    """Return the display string for an error kind, or None if it is not one"""
    resolved = _lookup_kind(kind)
    return resolved.display if resolved is not None else None


def is_error(value: Any) -> bool:
    return isinstance(value, EvaluationError)


class FormulaOpsError(Exception):
    """Base class for programming faults raised by formulaops"""


class UnknownOperatorError(FormulaOpsError, LookupError):
    """Raised when no operator is registered under a symbol"""

    kind = ErrorKind.NAME

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol!r}")
