"""
Division operator for formulaops

Chained division of numeric operands, ``a / b / c`` folded left to right.
"""

from formulaops.errors import ErrorKind
from formulaops.operators._arithmetic import classify, fold, ieee_divide
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "/"


def execute(first, *rest):
    """
    Execute division operation

    Args:
        first: Dividend (number or numeric text)
        *rest: Divisors, applied in order

    Returns:
        The quotient, ``#VALUE!`` when the result is not a number
        (non-numeric operand, ``0/0``) or ``#DIV/0!`` when it is infinite
    """
    return classify(fold(first, rest, ieee_divide), infinite_kind=ErrorKind.DIV_ZERO)


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="divide",
    kind="arithmetic",
    arity=AritySpec.variadic(1),
    evaluate=KERNEL,
    description="Division operation for numeric values",
)
