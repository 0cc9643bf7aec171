from __future__ import annotations

import logging
import math

import pytest

from commonlib.conformance import (
    CASES,
    DEFAULT_TOLERANCE,
    ConformanceCase,
    check_value,
    resolve_tolerance,
    run_conformance,
)
from commonlib.conformance.cases import (
    ARITHMETIC_CASES,
    COMPARISON_CASES,
    LOGICAL_CASES,
    STRING_CASES,
)


@pytest.mark.conformance
@pytest.mark.parametrize("case", CASES, ids=[case.case_id for case in CASES])
def test_conformance_case(registry, case: ConformanceCase):
    actual = registry.invoke(case.primitive, *case.args)
    assert check_value(actual, case.expected, case.check, DEFAULT_TOLERANCE) is None


@pytest.mark.conformance
def test_matrix_covers_every_registered_primitive(registry):
    covered = {case.primitive for case in CASES}
    assert covered == set(registry.list_primitives())


@pytest.mark.conformance
def test_cases_are_grouped_by_namespace():
    for group, namespace in (
        (ARITHMETIC_CASES, "arithmetic"),
        (COMPARISON_CASES, "comparison"),
        (LOGICAL_CASES, "logical"),
        (STRING_CASES, "string"),
    ):
        assert {case.namespace for case in group} == {namespace}


@pytest.mark.conformance
def test_run_conformance_passes_on_builtins(registry):
    report = run_conformance(registry)
    assert report.ok
    assert report.total == len(CASES)
    assert report.passed == report.total


@pytest.mark.conformance
def test_run_conformance_namespace_filter(registry):
    report = run_conformance(registry, namespace="Logical")
    assert report.total == len(LOGICAL_CASES)
    with pytest.raises(KeyError):
        run_conformance(registry, namespace="geometry")


@pytest.mark.conformance
def test_run_conformance_reports_mismatches(registry, caplog):
    cases = [
        ConformanceCase("arithmetic.add", (1.0, 1.0), 3.0),
        ConformanceCase("string.length", (5,), 1),
        ConformanceCase("string.length", ("ab",), 2),
    ]
    with caplog.at_level(logging.WARNING, logger="commonlib.conformance.runner"):
        report = run_conformance(registry, cases=cases)

    assert report.total == 3
    assert report.passed == 1
    assert not report.ok
    assert report.failures[0].reason == "expected 3.0, got 2.0"
    assert report.failures[1].reason.startswith("raised PrimitiveTypeError")
    assert "Conformance mismatch arithmetic.add(1.0, 1.0)" in caplog.text

    summary = report.to_dict()
    assert summary["failed"] == 2
    assert summary["failures"][0]["case"] == "arithmetic.add(1.0, 1.0)"
    assert summary["failures"][0]["actual"] == "2.0"


@pytest.mark.conformance
@pytest.mark.parametrize(
    "actual, expected, check",
    [
        (5.0, 5.0, "exact"),
        (["a", ""], ["a", ""], "exact"),
        (0.30000000000000004, 0.3, "approx"),
        (math.nan, None, "nan"),
        (-math.inf, None, "infinite"),
        (math.inf, None, "positive_infinity"),
        (-math.inf, None, "negative_infinity"),
        (-0.0, None, "negative_zero"),
    ],
)
def test_check_value_accepts(actual, expected, check):
    assert check_value(actual, expected, check) is None


@pytest.mark.conformance
@pytest.mark.parametrize(
    "actual, expected, check",
    [
        (True, 1, "exact"),
        (1, True, "exact"),
        (5.0, 6.0, "exact"),
        (0.3002, 0.3, "approx"),
        (1.0, None, "nan"),
        (1e308, None, "infinite"),
        (-math.inf, None, "positive_infinity"),
        (0.0, None, "negative_zero"),
        ("NaN", None, "nan"),
    ],
)
def test_check_value_rejects(actual, expected, check):
    assert check_value(actual, expected, check) is not None


@pytest.mark.conformance
def test_check_value_unknown_kind():
    with pytest.raises(ValueError, match="Unknown check kind"):
        check_value(1.0, 1.0, "roughly")  # type: ignore[arg-type]


@pytest.mark.conformance
def test_tolerance_resolution(monkeypatch, caplog):
    monkeypatch.delenv("COMMONLIB_TOLERANCE", raising=False)
    assert resolve_tolerance() == DEFAULT_TOLERANCE
    assert resolve_tolerance(1e-6) == 1e-6
    with pytest.raises(ValueError):
        resolve_tolerance(0.0)
    with pytest.raises(ValueError, match="positive and finite"):
        resolve_tolerance(math.inf)
    with pytest.raises(ValueError):
        resolve_tolerance(math.nan)

    monkeypatch.setenv("COMMONLIB_TOLERANCE", "0.5")
    assert resolve_tolerance() == 0.5
    assert resolve_tolerance(1e-3) == 1e-3

    monkeypatch.setenv("COMMONLIB_TOLERANCE", "tiny")
    with caplog.at_level(logging.WARNING, logger="commonlib.conformance.runner"):
        assert resolve_tolerance() == DEFAULT_TOLERANCE
    assert "Ignoring malformed COMMONLIB_TOLERANCE" in caplog.text

    monkeypatch.setenv("COMMONLIB_TOLERANCE", "-1")
    assert resolve_tolerance() == DEFAULT_TOLERANCE


@pytest.mark.conformance
def test_wider_tolerance_admits_looser_matches(registry, monkeypatch):
    case = ConformanceCase("arithmetic.divide", (1.0, 3.0), 0.3, "approx")
    monkeypatch.delenv("COMMONLIB_TOLERANCE", raising=False)
    assert not run_conformance(registry, cases=[case]).ok
    assert run_conformance(registry, tolerance=0.05, cases=[case]).ok
    monkeypatch.setenv("COMMONLIB_TOLERANCE", "0.05")
    assert run_conformance(registry, cases=[case]).ok
