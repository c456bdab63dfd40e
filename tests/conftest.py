"""Shared fixtures for the test suite."""

import json

import pytest
from unittest.mock import MagicMock, patch


def make_response(status_code=200, json_data=None, body=None, reason="OK"):
    """Mock requests.Response; truthy when status_code == 200."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    if body is None:
        body = json.dumps(json_data if json_data is not None else {})
    resp.content = body.encode() if isinstance(body, str) else body
    resp.text = resp.content.decode()
    resp.__bool__ = lambda self: self.status_code == 200
    return resp


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    return make_response


@pytest.fixture
def client():
    """IEXCloudClient with a mocked RequestSession."""
    with patch("iexcloud.client.RequestSession"):
        from iexcloud.client import IEXCloudClient
        return IEXCloudClient(token="test-token", base_url="https://example.test/stable")
