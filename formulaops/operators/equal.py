"""
Equality operator for formulaops
"""

from formulaops.operators._comparison import strictly_equal
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "="


def execute(left, right):
    return strictly_equal(left, right)


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="equal",
    kind="comparison",
    arity=AritySpec.fixed(2),
    evaluate=KERNEL,
    description="Equality test without type coercion",
)
