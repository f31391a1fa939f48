"""
Subtraction operator for formulaops

Subtracts every further operand from the first one, left to right.
"""

from formulaops.errors import ErrorKind
from formulaops.operators._arithmetic import classify, fold
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "-"


def execute(first, *rest):
    """
    Execute subtraction operation

    Args:
        first: Minuend
        *rest: Subtrahends

    Returns:
        Difference, ``#VALUE!`` if any operand is not numeric,
        ``#NUM!`` if the difference is not finite
    """
    return classify(
        fold(first, rest, lambda left, right: left - right),
        infinite_kind=ErrorKind.NUM,
    )


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="minus",
    kind="arithmetic",
    arity=AritySpec.variadic(1),
    evaluate=KERNEL,
    description="Subtraction operation for numeric values",
)
