"""Conformance runner: drive every case through a registry and collect mismatches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal
import logging
import math
import os

from commonlib.primitives.registry import PrimitiveRegistry, get_registry
from commonlib.value_codec import render

logger = logging.getLogger(__name__)

CheckKind = Literal[
    "exact",
    "approx",
    "nan",
    "infinite",
    "positive_infinity",
    "negative_infinity",
    "negative_zero",
]

DEFAULT_TOLERANCE = 1e-4
_TOLERANCE_ENV = "COMMONLIB_TOLERANCE"


def resolve_tolerance(explicit: float | None = None) -> float:
    """Explicit value, else $COMMONLIB_TOLERANCE, else DEFAULT_TOLERANCE."""
    if explicit is not None:
        if not (explicit > 0 and math.isfinite(explicit)):
            raise ValueError(f"tolerance must be positive and finite, got {explicit!r}")
        return explicit
    requested = os.environ.get(_TOLERANCE_ENV, "").strip()
    if requested:
        try:
            value = float(requested)
        except ValueError:
            logger.warning("Ignoring malformed %s=%r", _TOLERANCE_ENV, requested)
            return DEFAULT_TOLERANCE
        if value > 0 and math.isfinite(value):
            return value
        logger.warning("Ignoring non-positive %s=%r", _TOLERANCE_ENV, requested)
    return DEFAULT_TOLERANCE


@dataclass(frozen=True)
class ConformanceCase:
    """One literal scenario: primitive(*args) must satisfy check against expected."""

    primitive: str
    args: tuple[Any, ...]
    expected: Any = None
    check: CheckKind = "exact"

    @property
    def namespace(self) -> str:
        return self.primitive.split(".", 1)[0]

    @property
    def case_id(self) -> str:
        rendered = ", ".join(render(arg) for arg in self.args)
        return f"{self.primitive}({rendered})"


@dataclass(frozen=True)
class ConformanceFailure:
    case: ConformanceCase
    actual: Any
    reason: str

    def describe(self) -> str:
        return f"{self.case.case_id}: {self.reason}"


@dataclass
class ConformanceReport:
    total: int = 0
    passed: int = 0
    failures: list[ConformanceFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": len(self.failures),
            "failures": [
                {
                    "case": failure.case.case_id,
                    "expected": render(failure.case.expected),
                    "check": failure.case.check,
                    "actual": render(failure.actual),
                    "reason": failure.reason,
                }
                for failure in self.failures
            ],
        }


def _same_kind(actual: Any, expected: Any) -> bool:
    # bool is an int subclass; True must never satisfy an expected 1 or vice versa
    return isinstance(actual, bool) == isinstance(expected, bool)


def check_value(
    actual: Any,
    expected: Any,
    check: CheckKind = "exact",
    tolerance: float = DEFAULT_TOLERANCE,
) -> str | None:
    """Return None when actual satisfies the check, else the mismatch reason."""
    if check == "exact":
        if _same_kind(actual, expected) and actual == expected:
            return None
        return f"expected {render(expected)}, got {render(actual)}"

    if not isinstance(actual, float):
        return f"expected a float, got {type(actual).__name__} {render(actual)}"

    if check == "approx":
        if abs(actual - expected) <= tolerance:
            return None
        return f"expected {render(expected)} +/- {tolerance}, got {render(actual)}"
    if check == "nan":
        return None if math.isnan(actual) else f"expected NaN, got {render(actual)}"
    if check == "infinite":
        return None if math.isinf(actual) else f"expected an infinity, got {render(actual)}"
    if check == "positive_infinity":
        return None if actual == math.inf else f"expected Infinity, got {render(actual)}"
    if check == "negative_infinity":
        return None if actual == -math.inf else f"expected -Infinity, got {render(actual)}"
    if check == "negative_zero":
        if actual == 0.0 and math.copysign(1.0, actual) < 0:
            return None
        return f"expected -0.0, got {render(actual)}"

    raise ValueError(f"Unknown check kind: {check}")


def run_case(
    registry: PrimitiveRegistry, case: ConformanceCase, tolerance: float
) -> ConformanceFailure | None:
    try:
        actual = registry.invoke(case.primitive, *case.args)
    except Exception as exc:  # noqa: BLE001
        return ConformanceFailure(case, None, f"raised {type(exc).__name__}: {exc}")
    reason = check_value(actual, case.expected, case.check, tolerance)
    if reason is None:
        return None
    return ConformanceFailure(case, actual, reason)


def run_conformance(
    registry: PrimitiveRegistry | None = None,
    namespace: str | None = None,
    tolerance: float | None = None,
    cases: Iterable[ConformanceCase] | None = None,
) -> ConformanceReport:
    """Run the conformance matrix, optionally restricted to one namespace."""
    from commonlib.conformance.cases import CASES

    registry = registry or get_registry()
    tolerance = resolve_tolerance(tolerance)
    selected = [
        case
        for case in (CASES if cases is None else cases)
        if namespace is None or case.namespace == namespace.lower()
    ]
    if namespace is not None and namespace.lower() not in registry.list_namespaces():
        raise KeyError(f"Unknown primitive namespace: {namespace}")

    report = ConformanceReport()
    for case in selected:
        report.total += 1
        failure = run_case(registry, case, tolerance)
        if failure is None:
            report.passed += 1
            continue
        logger.warning("Conformance mismatch %s", failure.describe())
        report.failures.append(failure)

    logger.info(
        "Conformance: %d/%d cases passed (tolerance %g)",
        report.passed,
        report.total,
        tolerance,
    )
    return report
