"""
Greater-than operator for formulaops
"""

import operator

from formulaops.operators._comparison import loose_compare
from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = ">"


def execute(left, right):
    return loose_compare(left, right, operator.gt)


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="greater_than",
    kind="comparison",
    arity=AritySpec.fixed(2),
    evaluate=KERNEL,
    description="Greater-than comparison",
)
