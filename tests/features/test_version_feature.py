"""
Tests for the version feature
"""

import re

import pytest

import commonlib
from commonlib.features import FeatureRegistry, handle_version
from commonlib.version import get_version


def test_version_feature_is_exposed_on_the_api():
    """The feature is registered and routed to GET /version"""
    feature = FeatureRegistry.get_feature("version")
    assert feature is not None
    assert feature.handler is handle_version
    assert feature.api_endpoint == {"path": "/version", "methods": ["GET"]}


def test_version_feature_reports_the_package_version():
    """The handler, get_version() and commonlib.__version__ agree"""
    result = handle_version()

    assert result.success is True
    assert result.data == {"version": commonlib.__version__}
    assert get_version() == commonlib.__version__
    assert re.fullmatch(r"\d+\.\d+\.\d+", commonlib.__version__)


def test_version_feature_ignores_extra_arguments():
    """CLI and API call every handler with keyword arguments"""
    assert handle_version(namespace="string").data["version"] == commonlib.__version__


def test_api_version_route_matches_handler(api_client):
    """GET /api/v1/version returns the handler's data unchanged"""
    response = api_client.get("/api/v1/version")
    assert response.status_code == 200
    assert response.json() == handle_version().data


if __name__ == "__main__":
    pytest.main([__file__])
