"""
Authenticated JSON request wrapper for API clients.

Builds Basic or Bearer authorized requests, sends them through httpx and
resolves 200/201 bodies or raises RequestError.
"""
from .types import (
    HttpMethod,
    BasicAuth,
    BearerAuth,
    Credentials,
    RequestDescriptor,
)
from .config import (
    TIMEOUT,
    merge_defaults,
    normalize_timeout,
    resolve_credentials,
)
from .encoding import encode_auth
from .errors import RequestError
from .client import RequestClient, SyncRequestClient

__all__ = [
    # Types
    "HttpMethod",
    "BasicAuth",
    "BearerAuth",
    "Credentials",
    "RequestDescriptor",
    # Config
    "TIMEOUT",
    "merge_defaults",
    "normalize_timeout",
    "resolve_credentials",
    # Encoding
    "encode_auth",
    # Errors
    "RequestError",
    # Clients
    "RequestClient",
    "SyncRequestClient",
]

__version__ = "0.1.0"
