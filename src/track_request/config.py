"""
Configuration for track_request.

Defaults are a plain mapping merged over the baseline timeout, then translated
into keyword arguments for the httpx client.
"""
import logging
import os
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from .types import BasicAuth, BearerAuth, Credentials

logger = logging.getLogger("track_request.config")

# Milliseconds
TIMEOUT = 10000
DEFAULT_CONTENT_TYPE = "application/json"
DEBUG_ENV_VAR = "TRACK_REQUEST_DEBUG"

_SITE_ID_KEYS = ("site_id", "siteid", "siteId")
_API_KEY_KEYS = ("api_key", "apikey", "apiKey")

# defaults keys forwarded to httpx, with their httpx spelling
_TRANSPORT_KEYS = {
    "base_url": "base_url",
    "baseURL": "base_url",
    "headers": "headers",
    "verify": "verify",
    "follow_redirects": "follow_redirects",
    "proxy": "proxy",
}


def _is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


def is_debug_enabled() -> bool:
    """Request/response panels are printed when TRACK_REQUEST_DEBUG is truthy."""
    return os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes", "on")


def _first_present(mapping: Mapping[str, Any], keys) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    return None


def resolve_credentials(
    auth: Union[Credentials, Mapping[str, Any], str, None],
) -> Optional[Credentials]:
    """Resolve the caller's auth argument to BasicAuth, BearerAuth or None."""
    if auth is None or isinstance(auth, (BasicAuth, BearerAuth)):
        return auth

    if isinstance(auth, Mapping):
        site_id = _first_present(auth, _SITE_ID_KEYS)
        api_key = _first_present(auth, _API_KEY_KEYS)
        if site_id is None or api_key is None:
            raise ValueError("auth mapping requires site_id and api_key")
        return BasicAuth(site_id=site_id, api_key=api_key)

    if isinstance(auth, str):
        return BearerAuth(token=auth)

    raise ValueError(
        f"Invalid auth: expected a site_id/api_key mapping or a token string, "
        f"got {type(auth).__name__}"
    )


def merge_defaults(defaults: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Merge caller defaults over the baseline {timeout: TIMEOUT}."""
    merged: Dict[str, Any] = {"timeout": TIMEOUT}
    if defaults:
        merged.update(defaults)
    return merged


def normalize_timeout(timeout_ms: Optional[float]) -> httpx.Timeout:
    """Convert a millisecond timeout to httpx.Timeout.

    None or 0 disables the timeout.
    """
    if timeout_ms is None or timeout_ms == 0:
        return httpx.Timeout(None)
    if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, (int, float)):
        raise ValueError(f"timeout must be a number of milliseconds, got {timeout_ms!r}")
    if timeout_ms < 0:
        raise ValueError(f"timeout must not be negative, got {timeout_ms}")
    return httpx.Timeout(timeout_ms / 1000.0)


def build_transport_kwargs(defaults: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate merged defaults into httpx client keyword arguments."""
    kwargs: Dict[str, Any] = {"timeout": normalize_timeout(defaults.get("timeout"))}

    for key, value in defaults.items():
        if key == "timeout":
            continue
        target = _TRANSPORT_KEYS.get(key)
        if target is None:
            logger.warning(f"build_transport_kwargs: ignoring unsupported default '{key}'")
            continue
        kwargs[target] = value

    # Redirects are followed unless the caller opts out
    kwargs.setdefault("follow_redirects", True)

    # Check environment variables for SSL verification override
    # An explicit verify in defaults takes precedence
    if "verify" not in kwargs:
        kwargs["verify"] = not _is_ssl_verify_disabled_by_env()

    logger.debug(f"build_transport_kwargs: keys={sorted(kwargs)}")
    return kwargs
