"""
Multiplication operator for formulaops

Implements multiplication operation for numeric types.
"""

from formulaops.errors import ErrorKind
from formulaops.operators._arithmetic import classify, fold
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "*"


def execute(first, *rest):
    """
    Execute multiplication operation

    Args:
        first: First factor
        *rest: Further factors

    Returns:
        Product of all operands, ``#VALUE!`` if any operand is not numeric,
        ``#NUM!`` if the product is not finite
    """
    return classify(
        fold(first, rest, lambda left, right: left * right),
        infinite_kind=ErrorKind.NUM,
    )


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="multiply",
    kind="arithmetic",
    arity=AritySpec.variadic(1),
    evaluate=KERNEL,
    description="Multiplication operation for numeric values",
)
