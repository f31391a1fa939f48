"""
Concatenation operator for formulaops

Joins the text form of every operand, ``"a" & 1 & TRUE`` -> ``"a1TRUE"``.
"""

from formulaops.operators.api import AritySpec, OperatorSpec

SYMBOL = "&"


def _as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def execute(*operands):
    """
    Execute concatenation operation

    Args:
        *operands: Values of any type

    Returns:
        The concatenated text
    """
    return "".join(_as_text(value) for value in operands)


KERNEL = execute
OPERATOR_SPEC = OperatorSpec(
    symbol=SYMBOL,
    name="ampersand",
    kind="text",
    arity=AritySpec.variadic(1),
    evaluate=KERNEL,
    description="Text concatenation of all operands",
)
