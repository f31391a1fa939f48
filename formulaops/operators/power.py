"""
Exponentiation operator for formulaops
"""

import math

from formulaops.errors import ErrorKind, EvaluationError
from formulaops.number import to_number
from formulaops.operators._arithmetic import as_float, classify
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "^"


def execute(base, exponent):
    """
    Execute exponentiation operation

    Args:
        base: Base (number or numeric text)
        exponent: Exponent (number or numeric text)

    Returns:
        ``base`` raised to ``exponent``. ``#VALUE!`` for non-numeric operands
        or a non-real result, ``#DIV/0!`` for zero raised to a negative power,
        ``#NUM!`` when the result is not finite.
    """
    base = as_float(to_number(base))
    exponent = as_float(to_number(exponent))
    if math.isnan(base) or math.isnan(exponent):
        return EvaluationError(ErrorKind.VALUE)
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        return EvaluationError(ErrorKind.NUM)
    except ValueError:
        # math.pow raises for 0 ** negative and negative ** fractional
        if base == 0 and exponent < 0:
            return EvaluationError(ErrorKind.DIV_ZERO)
        return EvaluationError(ErrorKind.VALUE)
    return classify(result, infinite_kind=ErrorKind.NUM)


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="power",
    kind="arithmetic",
    arity=AritySpec.fixed(2),
    evaluate=KERNEL,
    description="Exponentiation operation for numeric values",
)
