"""Static operator table and symbol resolution."""

from __future__ import annotations

from collections import OrderedDict
from functools import lru_cache
from typing import Any, Iterable, Sequence
import logging

from formulaops.errors import (
    ErrorKind,
    EvaluationError,
    UnknownOperatorError,
    is_error,
)
from formulaops.operators import BUILTIN_OPERATORS
from formulaops.operators.api import OperatorSpec, validate_spec

logger = logging.getLogger(__name__)


class OperatorRegistry:
    """Registry mapping upper-cased operator symbols to their specs."""

    def __init__(self, specs: Iterable[OperatorSpec] = ()) -> None:
        self._specs_by_symbol: OrderedDict[str, OperatorSpec] = OrderedDict()
        for spec in specs:
            self.register(spec)

    def register(self, spec: OperatorSpec) -> None:
        validate_spec(spec)

        if spec.key in self._specs_by_symbol:
            raise ValueError(f"Operator already registered: {spec.symbol}")

        self._specs_by_symbol[spec.key] = spec

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.strip().upper() in self._specs_by_symbol

    def __len__(self) -> int:
        return len(self._specs_by_symbol)

    def resolve(self, symbol: str) -> OperatorSpec:
        spec = self._specs_by_symbol.get(symbol.strip().upper())
        if spec is None:
            raise UnknownOperatorError(symbol)
        return spec

    def specs(self) -> tuple[OperatorSpec, ...]:
        return tuple(self._specs_by_symbol.values())

    def evaluate(self, symbol: str, operands: Sequence[Any] = ()) -> Any:
        """Evaluate ``symbol`` over ``operands``.

        Errors are returned, not raised: an operand that already is an
        ``EvaluationError`` is handed back unchanged, an unknown symbol gives
        ``#NAME?`` and a wrong operand count gives ``#VALUE!``.
        """
        for operand in operands:
            if is_error(operand):
                return operand

        try:
            spec = self.resolve(symbol)
        except UnknownOperatorError as exc:
            logger.debug("%s", exc)
            return EvaluationError(exc.kind)

        try:
            spec.arity.validate(len(operands))
        except ValueError as exc:
            logger.debug("Operator %s rejected operands: %s", spec.symbol, exc)
            return EvaluationError(ErrorKind.VALUE)

        result = spec.evaluate(*operands)
        logger.debug("%s%r -> %r", spec.symbol, tuple(operands), result)
        return result


@lru_cache(maxsize=None)
def default_registry() -> OperatorRegistry:
    """Process-wide registry of the built-in operators."""
    return OperatorRegistry(BUILTIN_OPERATORS)


def evaluate_by_operator(symbol: str, operands: Sequence[Any] = ()) -> Any:
    return default_registry().evaluate(symbol, operands)
