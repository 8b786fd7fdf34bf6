import base64
from typing import Any, Dict


def _base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def encode_auth(auth_type: str, **kwargs: Any) -> Dict[str, str]:
    """
    Encodes credentials into an Authorization header.

    Args:
        auth_type: 'basic' or 'bearer' (case-insensitive), or 'none'.
        **kwargs: username/password for basic, token for bearer.

    Returns:
        A dictionary containing the HTTP headers.
    """
    auth_type = auth_type.lower()

    username = kwargs.get("username")
    password = kwargs.get("password")
    token = kwargs.get("token")

    # Empty values are encoded as given; only absent ones are rejected
    if auth_type == "basic":
        if username is None or password is None:
            raise ValueError("basic auth requires username and password")
        return {"Authorization": f"Basic {_base64_encode(f'{username}:{password}')}"}

    if auth_type == "bearer":
        if token is None:
            raise ValueError("bearer auth requires token")
        return {"Authorization": f"Bearer {token}"}

    if auth_type == "none":
        return {}

    raise ValueError(f"Unsupported auth type: {auth_type}")
