"""
Attribute-style access to the primitive namespaces.

    >>> from commonlib import Arithmetic, String
    >>> Arithmetic.modulo(-10, 3)
    -1.0
    >>> String.indexOf("hello", "l")
    2

Primitives are reachable under their registered name (`String.indexOf`)
and under a Python spelling (`String.index_of`). Registered names that are
Python keywords get a trailing underscore: `Logical.and_`.
"""

from __future__ import annotations

from typing import Any
import keyword
import re

from commonlib.primitives.api import KernelFn
from commonlib.primitives.registry import PrimitiveRegistry, get_registry

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def python_name(name: str) -> str:
    """Python spelling of a registered primitive name: lessThan -> less_than."""
    snake = _CAMEL_BOUNDARY.sub("_", name).lower()
    if keyword.iskeyword(snake):
        return f"{snake}_"
    return snake


class Namespace:
    """Read-only view of one registry namespace."""

    def __init__(self, namespace: str, registry: PrimitiveRegistry | None = None) -> None:
        self._namespace = namespace
        self._registry = registry
        self._aliases: dict[str, str] | None = None

    @property
    def registry(self) -> PrimitiveRegistry:
        if self._registry is None:
            self._registry = get_registry()
        return self._registry

    def _alias_table(self) -> dict[str, str]:
        if self._aliases is None:
            aliases: dict[str, str] = {}
            for spec in self.registry.list_specs(self._namespace):
                aliases[spec.name] = spec.name
                aliases[python_name(spec.name)] = spec.name
            self._aliases = aliases
        return self._aliases

    def names(self) -> list[str]:
        """Registered primitive names of this namespace."""
        return [spec.name for spec in self.registry.list_specs(self._namespace)]

    def __getattr__(self, attribute: str) -> KernelFn:
        if attribute.startswith("_"):
            raise AttributeError(attribute)
        name = self._alias_table().get(attribute)
        if name is None:
            raise AttributeError(f"Namespace '{self._namespace}' has no primitive '{attribute}'")
        return self.registry.load_kernel(f"{self._namespace}.{name}")

    def __call__(self, name: str, *args: Any) -> Any:
        return getattr(self, name)(*args)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._alias_table()))

    def __repr__(self) -> str:
        return f"Namespace({self._namespace!r})"


Arithmetic = Namespace("arithmetic")
Comparison = Namespace("comparison")
Logical = Namespace("logical")
String = Namespace("string")
