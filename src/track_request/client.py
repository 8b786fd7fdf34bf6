"""
Request client using httpx.

Builds authenticated JSON request descriptors and maps transport responses:
200/201 resolve with the parsed body, anything else raises RequestError, and
httpx exceptions propagate untouched.
"""
import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from .config import (
    DEFAULT_CONTENT_TYPE,
    build_transport_kwargs,
    merge_defaults,
    normalize_timeout,
    resolve_credentials,
)
from .console import mask_headers, print_request, print_response
from .encoding import encode_auth
from .errors import RequestError
from .types import BasicAuth, Credentials, HttpMethod, RequestDescriptor

logger = logging.getLogger("track_request.client")

SUCCESS_STATUSES = (200, 201)

AuthInput = Union[Credentials, Mapping[str, Any], str, None]


def _format_auth_header(credentials: Optional[Credentials]) -> Optional[str]:
    if credentials is None:
        return None
    if isinstance(credentials, BasicAuth):
        headers = encode_auth(
            "basic", username=str(credentials.site_id), password=credentials.api_key
        )
    else:
        headers = encode_auth("bearer", token=credentials.token)
    return headers["Authorization"]


def _build_body(data: Any) -> Optional[Union[str, bytes]]:
    """Serialize descriptor data; strings and bytes are sent as-is."""
    if data is None:
        return None
    if isinstance(data, (str, bytes)):
        return data
    return json.dumps(data)


def _parse_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


class _BaseRequestClient:
    """Construction and descriptor logic shared by the async and sync clients."""

    def __init__(
        self,
        auth: AuthInput = None,
        defaults: Optional[Mapping[str, Any]] = None,
    ):
        self.credentials = resolve_credentials(auth)
        self.auth = _format_auth_header(self.credentials)
        self.defaults = merge_defaults(defaults)
        self._closed = False

    def build_descriptor(
        self,
        url: str,
        method: HttpMethod,
        data: Any = None,
        timeout: Optional[float] = None,
    ) -> RequestDescriptor:
        """Build a fresh descriptor carrying the auth and JSON content-type headers."""
        headers: Dict[str, str] = {}
        if self.auth is not None:
            headers["Authorization"] = self.auth
        headers["Content-Type"] = DEFAULT_CONTENT_TYPE

        return RequestDescriptor(
            method=method,
            url=url,
            headers=headers,
            data=data,
            timeout=timeout,
        )

    def _request_kwargs(self, descriptor: RequestDescriptor) -> Dict[str, Any]:
        if self._closed:
            raise RuntimeError("Client has been closed")

        logger.debug(
            f"{type(self).__name__}.execute: method={descriptor.method}, url={descriptor.url}, "
            f"headers={mask_headers(descriptor.headers)}"
        )
        print_request(descriptor.method, descriptor.url, descriptor.headers, descriptor.data)

        kwargs: Dict[str, Any] = {
            "method": descriptor.method,
            "url": descriptor.url,
            "headers": descriptor.headers,
            "content": _build_body(descriptor.data),
        }
        # Leave the client default in place unless the call overrides it
        if descriptor.timeout is not None:
            kwargs["timeout"] = normalize_timeout(descriptor.timeout)
        return kwargs

    def _handle_response(self, url: str, response: httpx.Response) -> Any:
        data = _parse_body(response.text)
        reason = response.reason_phrase or ""
        print_response(url, response.status_code, reason, data)

        if response.status_code in SUCCESS_STATUSES:
            return data

        logger.debug(
            f"{type(self).__name__}.execute: rejecting status={response.status_code}, url={url}"
        )
        raise RequestError(
            message=reason,
            status_code=response.status_code,
            response=response,
            body=data,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(credentials={self.credentials!r}, defaults={self.defaults!r})"


class RequestClient(_BaseRequestClient):
    """Asynchronous request client."""

    def __init__(
        self,
        auth: AuthInput = None,
        defaults: Optional[Mapping[str, Any]] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(auth, defaults)
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = httpx.AsyncClient(**build_transport_kwargs(self.defaults))
            self._owns_client = True

    async def execute(self, descriptor: RequestDescriptor) -> Any:
        """Send the descriptor; return the body for 200/201, raise RequestError otherwise."""
        kwargs = self._request_kwargs(descriptor)
        response = await self._client.request(**kwargs)
        return self._handle_response(descriptor.url, response)

    async def put(self, url: str, data: Any = None) -> Any:
        """PUT request."""
        return await self.execute(self.build_descriptor(url, "PUT", {} if data is None else data))

    async def post(self, url: str, data: Any = None) -> Any:
        """POST request."""
        return await self.execute(self.build_descriptor(url, "POST", {} if data is None else data))

    async def destroy(self, url: str) -> Any:
        """DELETE request, no body."""
        return await self.execute(self.build_descriptor(url, "DELETE"))

    async def close(self) -> None:
        """Close the client."""
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "RequestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class SyncRequestClient(_BaseRequestClient):
    """Synchronous request client."""

    def __init__(
        self,
        auth: AuthInput = None,
        defaults: Optional[Mapping[str, Any]] = None,
        httpx_client: Optional[httpx.Client] = None,
    ):
        super().__init__(auth, defaults)
        if httpx_client is not None:
            self._client = httpx_client
            self._owns_client = False
        else:
            self._client = httpx.Client(**build_transport_kwargs(self.defaults))
            self._owns_client = True

    def execute(self, descriptor: RequestDescriptor) -> Any:
        """Send the descriptor; return the body for 200/201, raise RequestError otherwise."""
        kwargs = self._request_kwargs(descriptor)
        response = self._client.request(**kwargs)
        return self._handle_response(descriptor.url, response)

    def put(self, url: str, data: Any = None) -> Any:
        """PUT request."""
        return self.execute(self.build_descriptor(url, "PUT", {} if data is None else data))

    def post(self, url: str, data: Any = None) -> Any:
        """POST request."""
        return self.execute(self.build_descriptor(url, "POST", {} if data is None else data))

    def destroy(self, url: str) -> Any:
        """DELETE request, no body."""
        return self.execute(self.build_descriptor(url, "DELETE"))

    def close(self) -> None:
        """Close the client."""
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SyncRequestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
