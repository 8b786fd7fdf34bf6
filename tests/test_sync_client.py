"""
Tests for SyncRequestClient
Logic testing: Decision/Branch, State Transition, Path coverage
"""
import json

import pytest
from unittest.mock import MagicMock

import httpx

from track_request.client import SyncRequestClient
from track_request.errors import RequestError

from tests.conftest import API_KEY, DATA, SITE_ID, URL, basic_header, make_response


class TestSyncRequestClient:
    """Tests for SyncRequestClient class."""

    @pytest.fixture
    def client(self, mock_httpx_sync_client):
        return SyncRequestClient(
            {"site_id": SITE_ID, "api_key": API_KEY},
            httpx_client=mock_httpx_sync_client,
        )

    # Path: constructor resolves auth and defaults
    def test_init(self, client):
        assert client.auth == basic_header(SITE_ID, API_KEY)
        assert client.defaults == {"timeout": 10000}
        assert client._closed is False

    # Path: owned transport built from defaults
    def test_owned_transport(self):
        client = SyncRequestClient("t", {"timeout": 1500})
        assert isinstance(client._client, httpx.Client)
        assert client._client.timeout == httpx.Timeout(1.5)
        client.close()

    # Happy Path: 200 resolves with body
    def test_put_success(self, client, mock_httpx_sync_client):
        mock_httpx_sync_client.request = MagicMock(return_value=make_response(200, "OK", '{"ok": 1}'))

        assert client.put(URL, DATA) == {"ok": 1}

        call_kwargs = mock_httpx_sync_client.request.call_args.kwargs
        assert call_kwargs["method"] == "PUT"
        assert json.loads(call_kwargs["content"]) == DATA

    # Happy Path: 201 resolves with body
    def test_post_created(self, client, mock_httpx_sync_client):
        mock_httpx_sync_client.request = MagicMock(return_value=make_response(201, "Created", "{}"))

        assert client.post(URL, DATA) == {}
        assert mock_httpx_sync_client.request.call_args.kwargs["method"] == "POST"

    # Path: destroy sends no body
    def test_destroy(self, client, mock_httpx_sync_client):
        mock_httpx_sync_client.request = MagicMock(return_value=make_response())

        client.destroy(URL)

        call_kwargs = mock_httpx_sync_client.request.call_args.kwargs
        assert call_kwargs["method"] == "DELETE"
        assert call_kwargs["content"] is None

    # Decision: 404 rejects
    def test_rejects_on_404(self, client, mock_httpx_sync_client):
        mock_httpx_sync_client.request = MagicMock(
            return_value=make_response(404, "Not Found", '{"meta": {"error": "missing"}}')
        )

        with pytest.raises(RequestError, match="Not Found") as exc_info:
            client.destroy(URL)
        assert exc_info.value.status_code == 404
        assert exc_info.value.body == {"meta": {"error": "missing"}}

    # Error Path: timeout propagates unchanged
    def test_timeout_propagates(self, client, mock_httpx_sync_client):
        error = httpx.WriteTimeout("timeout of 1ms exceeded")
        mock_httpx_sync_client.request = MagicMock(side_effect=error)

        with pytest.raises(httpx.WriteTimeout, match="timeout of 1ms exceeded"):
            client.post(URL, DATA)

    # State: request on closed client
    def test_request_after_close(self, client):
        client.close()
        with pytest.raises(RuntimeError, match="Client has been closed"):
            client.put(URL, DATA)

    # State: context manager closes owned transport
    def test_context_manager(self):
        with SyncRequestClient("t") as client:
            transport = client._client
        assert transport.is_closed is True
