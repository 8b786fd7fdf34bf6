"""
Shared fixtures for track_request tests.
"""
import base64

import pytest
from unittest.mock import AsyncMock, MagicMock

import httpx


SITE_ID = 123
API_KEY = "abc"
URL = "https://track.customer.io/api/v1/customers/1"
DATA = {"first_name": "Bruce", "last_name": "Wayne"}


def basic_header(site_id, api_key):
    encoded = base64.b64encode(f"{site_id}:{api_key}".encode()).decode()
    return f"Basic {encoded}"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep debug panels and SSL overrides out of unrelated tests."""
    monkeypatch.delenv("TRACK_REQUEST_DEBUG", raising=False)
    monkeypatch.delenv("NODE_TLS_REJECT_UNAUTHORIZED", raising=False)
    monkeypatch.delenv("SSL_CERT_VERIFY", raising=False)


@pytest.fixture
def mock_httpx_async_client():
    """Mock httpx.AsyncClient for testing."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_httpx_sync_client():
    """Mock httpx.Client for testing."""
    client = MagicMock(spec=httpx.Client)
    client.close = MagicMock()
    return client


def make_response(status_code=200, reason_phrase="OK", text="{}"):
    """Mock httpx.Response with the attributes the client reads."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    response.headers = {"content-type": "application/json"}
    response.text = text
    return response
