"""
Shared fixtures for the client tests.

Provides a clean environment-driven configuration, a client wired to a mocked
requests session, and helpers to build fake responses.
"""

import pytest
from unittest.mock import Mock
from urllib.parse import parse_qs, urlsplit

import requests

from etherscan_client.api.client import EtherScan
from etherscan_client.utils.config import reset_config

ENV_VARS = (
    'ETHERSCAN_API_KEY',
    'ETHERSCAN_NETWORK',
    'ETHERSCAN_KEY_CASING',
    'REQUEST_TIMEOUT',
    'SENTRY_ENABLED',
    'SENTRY_DSN',
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test against the default configuration."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


def make_response(payload=None, status_code=200):
    """Create a fake requests.Response carrying a JSON payload."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload if payload is not None else {
        "status": "1", "message": "OK", "result": []
    }
    return response


def query_of(url):
    """Parse a URL's query string into a dict of single values."""
    return {key: values[0] for key, values in parse_qs(urlsplit(url).query).items()}


@pytest.fixture
def session():
    """A mocked requests.Session answering every call with an OK response."""
    mock_session = Mock(spec=requests.Session)
    mock_session.request.return_value = make_response()
    return mock_session


@pytest.fixture
def client(session):
    """An EtherScan client using the mocked session."""
    return EtherScan(api_key="K", session=session)


@pytest.fixture
def last_request(session):
    """Returns (method, url, kwargs) of the most recent transport call."""
    def _last():
        args, kwargs = session.request.call_args
        return args[0], args[1], kwargs
    return _last
