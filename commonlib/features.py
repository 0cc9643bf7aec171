"""
This module defines all commonlib features using a unified registry system.
The CLI and the API server both dispatch through it.
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

from lark.exceptions import LarkError

from commonlib.error_msg import CommonLibException
from commonlib.evaluator import evaluate_program
from commonlib.parser import parse_program_content
from commonlib.primitives.registry import get_registry

logger = logging.getLogger("commonlib.features")

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
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """Base class for all commonlib features"""

    name: str
    description: str
    handler: Callable
    api_endpoint: Optional[Dict[str, Any]] = None


class FeatureRegistry:
    """Registry for all commonlib features"""

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

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from commonlib.version import get_version

    return OperationResult[Dict[str, str]](
        success=True, data={"version": get_version()}
    )


def handle_list_primitives(
    namespace: Optional[str] = None,
    **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Handle listing available primitives"""
    try:
        registry = get_registry()
        primitives = registry.list_primitives(
            namespace.lower() if namespace else None
        )

        result = {
            "primitives": primitives,
            "namespaces": registry.list_namespaces(),
            "namespace_filter": namespace,
        }

        return OperationResult[Dict[str, Any]](success=True, data=result)

    except (KeyError, ValueError) as e:
        return OperationResult[Dict[str, Any]](
            success=False,
            error=f"Failed to list primitives: {str(e)}"
        )


def handle_invoke(
    primitive: str,
    arguments: Optional[List[Any]] = None,
    **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Call one primitive with literal arguments"""
    registry = get_registry()
    try:
        spec = registry.resolve(primitive)
        value = registry.invoke(spec.qualified_name, *(arguments or []))
    except KeyError as e:
        return OperationResult[Dict[str, Any]](success=False, error=str(e.args[0]))
    except (CommonLibException, ValueError) as e:
        return OperationResult[Dict[str, Any]](success=False, error=str(e))

    logger.debug("%s%r -> %r", spec.qualified_name, tuple(arguments or []), value)
    return OperationResult[Dict[str, Any]](
        success=True,
        data={
            "primitive": spec.qualified_name,
            "result_type": spec.result_type,
            "result": value,
        },
    )


def handle_run(
    program: str,
    filename: Optional[str] = None,
    **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Parse and evaluate a script"""
    try:
        syntax = parse_program_content(program)
        logger.info("Program parsed (%d commands)", len(syntax.commands))
        result = evaluate_program(syntax)
    except LarkError as e:
        where = f" in {filename}" if filename else ""
        return OperationResult[Dict[str, Any]](
            success=False, error=f"Syntax error{where}: {e}"
        )
    except CommonLibException as e:
        return OperationResult[Dict[str, Any]](success=False, error=str(e))

    return OperationResult[Dict[str, Any]](
        success=True,
        data={
            "printed": [
                {"label": item.label, "value": item.value} for item in result.printed
            ],
            "bindings": result.bindings,
        },
    )


def handle_conformance(
    namespace: Optional[str] = None,
    tolerance: Optional[float] = None,
    **kwargs
) -> OperationResult[Dict[str, Any]]:
    """Run the conformance matrix against the registered primitives"""
    from commonlib.conformance import run_conformance

    try:
        report = run_conformance(namespace=namespace, tolerance=tolerance)
    except KeyError as e:
        return OperationResult[Dict[str, Any]](success=False, error=str(e.args[0]))
    except ValueError as e:
        return OperationResult[Dict[str, Any]](success=False, error=str(e))

    data = report.to_dict()
    data["namespace_filter"] = namespace
    return OperationResult[Dict[str, Any]](success=True, data=data)


# Register all features
version_feature = FeatureRegistry.register(
    Feature(
        name="version",
        description="Get the commonlib version",
        handler=handle_version,
        api_endpoint={"path": "/version", "methods": ["GET"]},
    )
)

list_primitives_feature = FeatureRegistry.register(
    Feature(
        name="list_primitives",
        description="List available primitives",
        handler=handle_list_primitives,
        api_endpoint={"path": "/primitives", "methods": ["GET"]},
    )
)

invoke_feature = FeatureRegistry.register(
    Feature(
        name="invoke",
        description="Call a primitive with literal arguments",
        handler=handle_invoke,
        api_endpoint={"path": "/invoke", "methods": ["POST"]},
    )
)

run_feature = FeatureRegistry.register(
    Feature(
        name="run",
        description="Evaluate a commonlib script",
        handler=handle_run,
        api_endpoint={"path": "/run", "methods": ["POST"]},
    )
)

conformance_feature = FeatureRegistry.register(
    Feature(
        name="conformance",
        description="Run the conformance matrix",
        handler=handle_conformance,
        api_endpoint={"path": "/conformance", "methods": ["GET"]},
    )
)
