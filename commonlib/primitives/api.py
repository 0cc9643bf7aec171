"""Stable primitives API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal

ValueType = Literal["number", "boolean", "integer", "text", "text_array"]
KernelFn = Callable[..., Any]

VALUE_TYPES = frozenset({"number", "boolean", "integer", "text", "text_array"})


@dataclass(frozen=True)
class AritySpec:
    """Arity contract for primitive calls."""

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
class PrimitiveSpec:
    """Primitive descriptor consumed by the registry and the conformance runner."""

    name: str
    arity: AritySpec
    param_types: tuple[ValueType, ...]
    result_type: ValueType
    kernel_name: str
    namespace: str
    description: str = ""

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}"


def scalar_spec(
    namespace: str,
    name: str,
    param_types: tuple[ValueType, ...],
    result_type: ValueType,
    description: str,
) -> PrimitiveSpec:
    """Build the spec of a fixed-arity primitive from its parameter types."""
    return PrimitiveSpec(
        name=name,
        namespace=namespace,
        arity=AritySpec.fixed(len(param_types)),
        param_types=param_types,
        result_type=result_type,
        kernel_name=f"{namespace}.{name}",
        description=description,
    )


def validate_spec(spec: PrimitiveSpec) -> None:
    """Validate a primitive spec before registration."""

    if not spec.name:
        raise ValueError("Primitive name cannot be empty")
    if "." in spec.name:
        raise ValueError("Primitive name must be unqualified")
    if not spec.namespace:
        raise ValueError("Primitive namespace cannot be empty")
    if not spec.kernel_name:
        raise ValueError("Primitive kernel_name cannot be empty")
    if spec.result_type not in VALUE_TYPES:
        raise ValueError(f"Invalid result type: {spec.result_type}")
    for param_type in spec.param_types:
        if param_type not in VALUE_TYPES:
            raise ValueError(f"Invalid parameter type: {param_type}")
    if spec.arity.max_args is not None and len(spec.param_types) != spec.arity.max_args:
        raise ValueError(
            f"Primitive '{spec.qualified_name}' declares {len(spec.param_types)} "
            f"parameter types for arity {spec.arity.max_args}"
        )


def accepts(value: Any, value_type: ValueType) -> bool:
    """Return True when value belongs to the domain of value_type."""
    if value_type == "boolean":
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if value_type == "number":
        return isinstance(value, (int, float))
    if value_type == "integer":
        return isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    if value_type == "text":
        return isinstance(value, str)
    if value_type == "text_array":
        return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)
    return False
