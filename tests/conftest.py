"""
Pytest configuration and shared fixtures
"""

import pytest

from src.dispatcher import RequestDispatcher
from src.history import HistoryLog
from src.session import ClientSession
from tests.test_helpers import create_mock_http_client, create_test_config


@pytest.fixture
def test_config():
    """Minimal test configuration"""
    return create_test_config()


@pytest.fixture
def mock_http_client():
    """HTTP client returning a 200 OK text/plain "hi" response"""
    return create_mock_http_client()


@pytest.fixture
def history():
    return HistoryLog()


@pytest.fixture
def make_session(test_config, history):
    """
    Build a ClientSession around a given HTTP client.

    Usage:
        def test_something(make_session, mock_http_client):
            session = make_session(mock_http_client, url="http://example.com")
    """

    def _make(http_client, timeout=1.0, config_obj=None, **kwargs):
        config_obj = config_obj or test_config
        dispatcher = RequestDispatcher(
            http_client=http_client, timeout=timeout, config_obj=config_obj
        )
        return ClientSession(
            dispatcher=dispatcher, history=history, config_obj=config_obj, **kwargs
        )

    return _make
