"""
Inequality operator for formulaops
"""

from formulaops.operators._comparison import strictly_equal
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "<>"


def execute(left, right):
    return not strictly_equal(left, right)


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="not_equal",
    kind="comparison",
    arity=AritySpec.fixed(2),
    evaluate=KERNEL,
    description="Inequality test without type coercion",
)
