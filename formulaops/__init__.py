"""
formulaops - operator evaluation for spreadsheet-style formulas
"""

from formulaops.errors import ErrorKind, EvaluationError, error, is_error
from formulaops.number import invert_number, to_number
from formulaops.operators.add import execute as add
from formulaops.operators.divide import execute as divide
from formulaops.operators.minus import execute as minus
from formulaops.operators.multiply import execute as multiply
from formulaops.operators.power import execute as power
from formulaops.operators.registry import (
    OperatorRegistry,
    default_registry,
    evaluate_by_operator,
)
from formulaops.version import __version__

__all__ = [
    "ErrorKind",
    "EvaluationError",
    "OperatorRegistry",
    "__version__",
    "add",
    "default_registry",
    "divide",
    "error",
    "evaluate_by_operator",
    "invert_number",
    "is_error",
    "minus",
    "multiply",
    "power",
    "to_number",
]
