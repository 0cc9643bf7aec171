from __future__ import annotations

import importlib
import inspect

import pytest

from commonlib.primitives.api import VALUE_TYPES, accepts
from commonlib.primitives.registry import PrimitiveRegistry

EXPECTED_PRIMITIVES = {
    "arithmetic": ["add", "divide", "modulo", "multiply", "subtract"],
    "comparison": ["equal", "greaterEqual", "greaterThan", "lessEqual", "lessThan", "notEqual"],
    "logical": ["and", "not", "or"],
    "string": [
        "concat",
        "contains",
        "endsWith",
        "indexOf",
        "isEmpty",
        "join",
        "length",
        "replace",
        "split",
        "startsWith",
        "substring",
        "toLowercase",
        "toUppercase",
        "trim",
    ],
}

SAMPLE_VALUES = {
    "number": 2.0,
    "integer": 1,
    "boolean": True,
    "text": "abc",
    "text_array": ["a", "b"],
}


@pytest.mark.contract
def test_every_namespace_exposes_the_expected_primitives():
    registry = PrimitiveRegistry()
    for namespace, names in EXPECTED_PRIMITIVES.items():
        assert sorted(spec.name for spec in registry.list_specs(namespace)) == sorted(names)


@pytest.mark.contract
def test_primitive_specs_have_required_contract_fields():
    registry = PrimitiveRegistry()

    for spec in registry.list_specs():
        assert spec.name
        assert spec.namespace in EXPECTED_PRIMITIVES
        assert spec.kernel_name == spec.qualified_name
        assert spec.description
        assert spec.result_type in VALUE_TYPES
        assert spec.arity.max_args == spec.arity.min_args == len(spec.param_types)


@pytest.mark.contract
def test_kernels_are_module_execute_functions():
    registry = PrimitiveRegistry()
    for spec in registry.list_specs():
        kernel = registry.load_kernel(spec.qualified_name)
        module = importlib.import_module(kernel.__module__)
        assert module.KERNEL is module.execute is kernel
        assert len(inspect.signature(kernel).parameters) == len(spec.param_types)


@pytest.mark.contract
def test_results_belong_to_the_declared_result_type():
    registry = PrimitiveRegistry()
    for spec in registry.list_specs():
        args = [SAMPLE_VALUES[param_type] for param_type in spec.param_types]
        result = registry.invoke(spec.qualified_name, *args)
        assert accepts(result, spec.result_type), spec.qualified_name
        if spec.result_type == "number":
            assert isinstance(result, float)
        if spec.result_type == "integer":
            assert type(result) is int


@pytest.mark.contract
def test_namespace_listings_match_the_registry():
    registry = PrimitiveRegistry()
    for namespace in registry.list_namespaces():
        package = importlib.import_module(f"commonlib.primitives.{namespace}")
        assert package.list_primitives() == registry.list_primitives(namespace)
