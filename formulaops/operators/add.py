"""
Addition operator for formulaops

Implements addition operation for numeric types.
"""

from formulaops.errors import ErrorKind
from formulaops.operators._arithmetic import classify, fold
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "+"


def execute(first, *rest):
    """
    Execute addition operation

    Args:
        first: First addend
        *rest: Further addends

    Returns:
        Sum of all operands, ``#VALUE!`` if any operand is not numeric,
        ``#NUM!`` if the sum is not finite
    """
    return classify(
        fold(first, rest, lambda left, right: left + right),
        infinite_kind=ErrorKind.NUM,
    )


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="add",
    kind="arithmetic",
    arity=AritySpec.variadic(1),
    evaluate=KERNEL,
    description="Addition operation for numeric values",
)
