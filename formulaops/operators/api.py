"""Stable operator API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal

OperatorKind = Literal["arithmetic", "comparison", "text"]
EvaluateFn = Callable[..., Any]


@dataclass(frozen=True)
class AritySpec:
    """Arity contract for operator calls."""

    min_args: int
    max_args: int | None = None

    @classmethod
    def fixed(cls, count: int) -> "AritySpec":
        return cls(min_args=count, max_args=count)

    @classmethod
    def variadic(cls, min_args: int = 0) -> "AritySpec":
        return cls(min_args=min_args, max_args=None)

    def validate(self, count: int) -> None:
        if count < self.min_args:
            raise ValueError(
                f"Expected at least {self.min_args} arguments, got {count}"
            )
        if self.max_args is not None and count > self.max_args:
            raise ValueError(
                f"Expected at most {self.max_args} arguments, got {count}"
            )


@dataclass(frozen=True)
class OperatorSpec:
    """Operator descriptor: the symbol it is registered under and its kernel."""

    symbol: str
    name: str
    kind: OperatorKind
    arity: AritySpec
    evaluate: EvaluateFn
    description: str = ""

    @property
    def key(self) -> str:
        return self.symbol.upper()


def validate_spec(spec: OperatorSpec) -> None:
    """Validate an operator spec before registration."""

    if not spec.symbol:
        raise ValueError("Operator symbol cannot be empty")
    if spec.symbol != spec.symbol.strip():
        raise ValueError(f"Operator symbol has surrounding whitespace: {spec.symbol!r}")
    if not spec.name:
        raise ValueError("Operator name cannot be empty")
    if spec.kind not in {"arithmetic", "comparison", "text"}:
        raise ValueError(f"Invalid operator kind: {spec.kind}")
    if spec.arity.min_args < 1:
        raise ValueError(f"Operator {spec.symbol!r} must take at least one operand")
    if not callable(spec.evaluate):
        raise TypeError(f"Operator {spec.symbol!r} evaluate must be callable")
