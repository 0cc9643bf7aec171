"""Deterministic primitive discovery and resolution registry."""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
from typing import Any
import importlib
import inspect
import logging
import threading

from commonlib.primitives.api import (
    AritySpec,
    KernelFn,
    PrimitiveSpec,
    validate_spec,
)

logger = logging.getLogger(__name__)

_PACKAGE = "commonlib.primitives"


class PrimitiveRegistry:
    """Registry with deterministic namespace loading and name resolution."""

    def __init__(self, primitives_dir: Path | None = None) -> None:
        if primitives_dir is None:
            primitives_dir = Path(__file__).parent

        self.primitives_dir = primitives_dir
        self._specs_by_qualified: OrderedDict[str, PrimitiveSpec] = OrderedDict()
        self._kernels_by_name: dict[str, KernelFn] = {}
        self._specs_by_namespace: dict[str, OrderedDict[str, PrimitiveSpec]] = {}
        self._import_order: list[str] = []
        self._loaded_namespaces: set[str] = set()

        self._discover_namespaces()

    @property
    def imported_namespaces(self) -> tuple[str, ...]:
        return tuple(self._import_order)

    def _discover_namespaces(self) -> None:
        if not self.primitives_dir.exists():
            return
        for item in sorted(self.primitives_dir.iterdir(), key=lambda p: p.name):
            if not item.is_dir() or item.name.startswith("_"):
                continue
            if not (item / "__init__.py").exists():
                continue
            self.import_namespace(item.name)

    def _load_namespace(self, namespace: str) -> None:
        if namespace in self._loaded_namespaces:
            return

        namespace_dir = self.primitives_dir / namespace
        if not namespace_dir.exists() or not namespace_dir.is_dir():
            raise ValueError(f"Unknown primitive namespace: {namespace}")

        module_path = f"{_PACKAGE}.{namespace}"
        importlib.import_module(module_path)
        namespace_specs = self._specs_by_namespace.setdefault(namespace, OrderedDict())

        for py_file in sorted(namespace_dir.glob("*.py"), key=lambda p: p.name):
            if py_file.name.startswith("_"):
                continue
            module_name = f"{module_path}.{py_file.stem}"
            module = importlib.import_module(module_name)

            spec_and_kernel = self._extract_spec_from_module(module, module_name)
            if spec_and_kernel is None:
                logger.debug("Skipping %s: no PRIMITIVE_SPEC", module_name)
                continue

            spec, kernel = spec_and_kernel
            if spec.namespace != namespace:
                raise ValueError(
                    f"{module_name} declares namespace '{spec.namespace}', expected '{namespace}'"
                )
            self.register(spec, kernel)
            namespace_specs[spec.name] = spec

        logger.debug(
            "Loaded namespace %s with %d primitives", namespace, len(namespace_specs)
        )
        self._loaded_namespaces.add(namespace)

    def _extract_spec_from_module(
        self,
        module: Any,
        module_name: str,
    ) -> tuple[PrimitiveSpec, KernelFn] | None:
        if not hasattr(module, "PRIMITIVE_SPEC"):
            return None

        spec = module.PRIMITIVE_SPEC
        if not isinstance(spec, PrimitiveSpec):
            raise TypeError(f"{module_name}.PRIMITIVE_SPEC must be PrimitiveSpec")
        kernel = getattr(module, "KERNEL", None) or getattr(module, "execute", None)
        if kernel is None:
            raise ValueError(
                f"{module_name} provides PRIMITIVE_SPEC but no KERNEL/execute"
            )
        return spec, kernel

    def register(self, spec: PrimitiveSpec, kernel: KernelFn) -> None:
        validate_spec(spec)

        qualified_name = spec.qualified_name
        if qualified_name in self._specs_by_qualified:
            raise ValueError(f"Primitive already registered: {qualified_name}")

        if spec.kernel_name in self._kernels_by_name:
            raise ValueError(f"Kernel name already registered: {spec.kernel_name}")

        _validate_kernel_signature(spec, kernel)

        self._specs_by_qualified[qualified_name] = spec
        self._kernels_by_name[spec.kernel_name] = kernel
        self._specs_by_namespace.setdefault(spec.namespace, OrderedDict())[spec.name] = spec

    def import_namespace(self, namespace: str) -> None:
        if namespace not in self._loaded_namespaces:
            self._load_namespace(namespace)

        if namespace not in self._import_order:
            self._import_order.append(namespace)

    def resolve(self, name: str) -> PrimitiveSpec:
        if "." in name:
            namespace, primitive_name = name.split(".", 1)
            namespace = namespace.lower()
            if namespace and primitive_name and namespace in self._specs_by_namespace:
                qualified = f"{namespace}.{primitive_name}"
                if qualified not in self._specs_by_qualified:
                    raise KeyError(f"Unknown primitive: {qualified}")
                return self._specs_by_qualified[qualified]

        ordered = list(self._import_order)
        for namespace in sorted(self._specs_by_namespace.keys()):
            if namespace not in ordered:
                ordered.append(namespace)

        for namespace in ordered:
            specs = self._specs_by_namespace.get(namespace)
            if specs and name in specs:
                return specs[name]

        raise KeyError(f"Unknown primitive: {name}")

    def load_kernel(self, name: str) -> KernelFn:
        spec = self.resolve(name)
        return self._kernels_by_name[spec.kernel_name]

    def get_spec(self, name: str) -> PrimitiveSpec:
        return self.resolve(name)

    def invoke(self, name: str, *args: Any) -> Any:
        """Resolve name, check the argument count and call the kernel."""
        spec = self.resolve(name)
        try:
            spec.arity.validate(len(args))
        except ValueError as exc:
            raise ValueError(f"{spec.qualified_name}: {exc}") from exc
        return self._kernels_by_name[spec.kernel_name](*args)

    def list_namespaces(self) -> list[str]:
        return sorted(self._specs_by_namespace.keys())

    def list_specs(self, namespace_name: str | None = None) -> list[PrimitiveSpec]:
        if namespace_name is None:
            return list(self._specs_by_qualified.values())
        if namespace_name not in self._loaded_namespaces:
            self._load_namespace(namespace_name)
        return list(self._specs_by_namespace.get(namespace_name, OrderedDict()).values())

    def list_primitives(self, namespace_name: str | None = None) -> dict[str, str]:
        if namespace_name is not None:
            return {
                spec.name: spec.description or "Primitive"
                for spec in self.list_specs(namespace_name)
            }

        output: dict[str, str] = {}
        for namespace in self.list_namespaces():
            for spec in self.list_specs(namespace):
                output[spec.qualified_name] = spec.description or "Primitive"
        return output


def _infer_arity(kernel: KernelFn) -> AritySpec:
    signature = inspect.signature(kernel)
    required = 0
    optional = 0
    has_varargs = False

    for parameter in signature.parameters.values():
        kind = parameter.kind
        if kind == inspect.Parameter.VAR_POSITIONAL:
            has_varargs = True
            continue
        if kind in (inspect.Parameter.VAR_KEYWORD, inspect.Parameter.KEYWORD_ONLY):
            continue
        if parameter.default is inspect.Parameter.empty:
            required += 1
        else:
            optional += 1

    if has_varargs:
        return AritySpec.variadic(min_args=required)

    return AritySpec(min_args=required, max_args=required + optional)


def _validate_kernel_signature(spec: PrimitiveSpec, kernel: KernelFn) -> None:
    inferred = _infer_arity(kernel)
    declared = spec.arity
    accepts_min = inferred.min_args <= declared.min_args
    accepts_max = inferred.max_args is None or (
        declared.max_args is not None and declared.max_args <= inferred.max_args
    )
    if not (accepts_min and accepts_max):
        raise ValueError(
            f"Primitive '{spec.qualified_name}' kernel signature {inferred} "
            f"does not accept declared arity {declared}"
        )


_shared_registry: PrimitiveRegistry | None = None
_shared_registry_lock = threading.Lock()


def get_registry() -> PrimitiveRegistry:
    """Return the process-wide registry, building it on first use."""
    global _shared_registry
    with _shared_registry_lock:
        if _shared_registry is None:
            _shared_registry = PrimitiveRegistry()
        return _shared_registry
