# formulaops operators
"""
One module per formula operator. Every module exposes ``SYMBOL``, the
``execute`` kernel and an ``OPERATOR_SPEC`` record; ``BUILTIN_OPERATORS``
is the static table the registry is built from.
"""

from formulaops.operators import (
    add,
    ampersand,
    divide,
    equal,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    minus,
    multiply,
    not_equal,
    power,
)

BUILTIN_OPERATORS = (
    add.OPERATOR_SPEC,
    ampersand.OPERATOR_SPEC,
    divide.OPERATOR_SPEC,
    equal.OPERATOR_SPEC,
    greater_than.OPERATOR_SPEC,
    greater_than_or_equal.OPERATOR_SPEC,
    less_than.OPERATOR_SPEC,
    less_than_or_equal.OPERATOR_SPEC,
    minus.OPERATOR_SPEC,
    multiply.OPERATOR_SPEC,
    not_equal.OPERATOR_SPEC,
    power.OPERATOR_SPEC,
)
