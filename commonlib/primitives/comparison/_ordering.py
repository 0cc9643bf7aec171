"""Shared plumbing for the float comparison primitives."""

from __future__ import annotations

from typing import Any, Callable

from commonlib.primitives._coerce import as_number
from commonlib.primitives.api import PrimitiveSpec, scalar_spec


FloatPredicate = Callable[[float, float], bool]


def compare(name: str, left: Any, right: Any, predicate: FloatPredicate) -> bool:
    return predicate(
        as_number(left, name=f"{name} left operand"),
        as_number(right, name=f"{name} right operand"),
    )


def comparison_spec(name: str, description: str) -> PrimitiveSpec:
    return scalar_spec("comparison", name, ("number", "number"), "boolean", description)
