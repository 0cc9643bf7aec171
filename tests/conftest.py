"""Shared pytest fixtures for commonlib tests."""

from __future__ import annotations

import math

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated tests of one module")
    config.addinivalue_line("markers", "contract: primitive module contract checks")
    config.addinivalue_line("markers", "conformance: literal conformance matrix")
    config.addinivalue_line("markers", "property: hypothesis-driven algebraic laws")


@pytest.fixture(scope="session")
def registry():
    from commonlib.primitives.registry import PrimitiveRegistry

    return PrimitiveRegistry()


@pytest.fixture
def api_client():
    from fastapi.testclient import TestClient

    from commonlib.main import api_app

    return TestClient(api_app)


@pytest.fixture
def is_negative_zero():
    def _check(value: float) -> bool:
        return value == 0.0 and math.copysign(1.0, value) < 0

    return _check
