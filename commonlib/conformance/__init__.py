"""
commonlib conformance matrix.

Literal scenarios that pin the behaviour every port of the library must
reproduce, and the runner that checks a registry against them.
"""

from commonlib.conformance.runner import (
    DEFAULT_TOLERANCE,
    ConformanceCase,
    ConformanceFailure,
    ConformanceReport,
    check_value,
    resolve_tolerance,
    run_conformance,
)
from commonlib.conformance.cases import CASES

__all__ = [
    "CASES",
    "DEFAULT_TOLERANCE",
    "ConformanceCase",
    "ConformanceFailure",
    "ConformanceReport",
    "check_value",
    "resolve_tolerance",
    "run_conformance",
]
