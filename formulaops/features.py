"""
This module defines all formulaops features using a unified registry system.
Both the CLI and the HTTP API dispatch through it.
"""

from typing import (
    Dict,
    Any,
    Callable,
    List,
    Optional,
    TypeVar,
    Generic,
)
from dataclasses import dataclass
import logging

from formulaops.errors import FormulaOpsError, is_error
from formulaops.operators.registry import default_registry

logger = logging.getLogger("formulaops.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: T) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """Base class for all formulaops features"""

    name: str
    description: str
    handler: Callable


class FeatureRegistry:
    """Registry for all formulaops features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from formulaops.version import get_version

    return OperationResult.ok({"version": get_version()})


def handle_evaluate(
    symbol: str,
    operands: Optional[List[Any]] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Evaluate one operator over its operands.

    A formula error (``#DIV/0!`` and friends) is a successful evaluation:
    it is reported in ``data["error"]`` with ``data["value"]`` set to None.
    Only ``FormulaOpsError`` becomes a failed result; any other exception
    propagates to the caller.
    """
    operands = list(operands or [])
    try:
        result = default_registry().evaluate(symbol, operands)
    except FormulaOpsError as e:
        return OperationResult.fail(str(e))

    if is_error(result):
        logger.debug("%s evaluated to %s", symbol, result.display)
        return OperationResult.ok(
            {"symbol": symbol, "value": None, "error": result.display}
        )
    return OperationResult.ok({"symbol": symbol, "value": result, "error": None})


def handle_list_operators(**kwargs) -> OperationResult[Dict[str, Any]]:
    """Handle listing available operators"""
    operators = {
        spec.symbol: {
            "name": spec.name,
            "kind": spec.kind,
            "min_args": spec.arity.min_args,
            "max_args": spec.arity.max_args,
            "description": spec.description,
        }
        for spec in default_registry().specs()
    }
    return OperationResult.ok({"operators": operators})


# Register all features
version_feature = FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the formulaops version",
        handler=handle_version,
    )
)

evaluate_feature = FeatureRegistry.register(
    Feature(
        name="evaluate",
        description="Evaluate an operator over a list of operands",
        handler=handle_evaluate,
    )
)

list_operators_feature = FeatureRegistry.register(
    Feature(
        name="list_operators",
        description="List available operators",
        handler=handle_list_operators,
    )
)
