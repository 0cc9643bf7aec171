"""
Script evaluator: runs parsed programs against the primitive registry.

Evaluation is eager. `let` binds a value in an immutable environment and
`print` records a labelled result; nothing is written to stdout here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from commonlib.error_msg import CommonLibException, Stack, fail_with_stacktrace
from commonlib.parser import (
    Command,
    Declaration,
    EBool,
    ECall,
    EList,
    ENumber,
    EReference,
    EString,
    Expression,
    Print,
    Program,
)
from commonlib.primitives.registry import PrimitiveRegistry, get_registry

logger = logging.getLogger(__name__)


class Environment:
    """Environment for variable bindings"""

    def __init__(self, bindings: Optional[Dict[str, Any]] = None):
        self.bindings = bindings or {}

    def try_find(self, ide: str) -> Any:
        """Try to find a binding for an identifier"""
        return self.bindings.get(ide)

    def __contains__(self, ide: str) -> bool:
        return ide in self.bindings

    def bind(self, ide: str, value: Any) -> "Environment":
        """Create a new environment with an additional binding"""
        new_bindings = dict(self.bindings)
        new_bindings[ide] = value
        return Environment(new_bindings)


@dataclass
class PrintedValue:
    label: str
    value: Any


@dataclass
class EvaluationResult:
    printed: List[PrintedValue] = field(default_factory=list)
    bindings: Dict[str, Any] = field(default_factory=dict)


def evaluate_expression(
    env: Environment,
    registry: PrimitiveRegistry,
    expr: Expression,
    stack: Optional[Stack] = None,
) -> Any:
    """Reduce an expression to a value"""
    current_stack: Stack = [] if stack is None else stack

    if isinstance(expr, (ENumber, EBool, EString)):
        return expr.value

    if isinstance(expr, EList):
        return [evaluate_expression(env, registry, item, current_stack) for item in expr.items]

    if isinstance(expr, EReference):
        if expr.identifier not in env:
            fail_with_stacktrace(
                f"Unbound identifier '{expr.identifier}'",
                [(expr.identifier, expr.position)] + current_stack,
            )
        return env.try_find(expr.identifier)

    if isinstance(expr, ECall):
        this_stack: Stack = [(expr.identifier, expr.position)] + current_stack
        args = [evaluate_expression(env, registry, arg, this_stack) for arg in expr.arguments]
        try:
            return registry.invoke(expr.identifier, *args)
        except CommonLibException as exc:
            raise type(exc)(exc.msg, this_stack) from exc
        except (KeyError, ValueError) as exc:
            message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
            fail_with_stacktrace(str(message), this_stack)

    raise CommonLibException(f"Internal error in evaluator: unknown expression {expr!r}")


def evaluate_command(
    env: Environment,
    registry: PrimitiveRegistry,
    result: EvaluationResult,
    command: Command,
) -> Environment:
    """Evaluate a command and return the updated environment"""
    if isinstance(command, Declaration):
        value = evaluate_expression(env, registry, command.expression)
        logger.debug("let %s = %r", command.identifier, value)
        return env.bind(command.identifier, value)

    if isinstance(command, Print):
        value = evaluate_expression(env, registry, command.expression)
        result.printed.append(PrintedValue(command.identifier, value))
        return env

    raise CommonLibException(f"Internal error in evaluator: unknown command {command!r}")


def evaluate_program(
    program: Program, registry: Optional[PrimitiveRegistry] = None
) -> EvaluationResult:
    """Evaluate every command of a program in order"""
    registry = registry or get_registry()
    env = Environment()
    result = EvaluationResult()

    for command in program.commands:
        env = evaluate_command(env, registry, result, command)

    result.bindings = dict(env.bindings)
    return result
