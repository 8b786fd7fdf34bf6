"""
Type definitions for track_request.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Union


# HTTP methods issued by the client
HttpMethod = Literal["PUT", "POST", "DELETE"]


@dataclass(frozen=True)
class BasicAuth:
    """Site id / API key pair, sent as Basic auth."""

    site_id: Union[str, int]
    api_key: str

    def __repr__(self) -> str:
        from .console import mask_sensitive

        return f"BasicAuth(site_id={self.site_id!r}, api_key={mask_sensitive(self.api_key)!r})"


@dataclass(frozen=True)
class BearerAuth:
    """App token, sent as Bearer auth."""

    token: str

    def __repr__(self) -> str:
        from .console import mask_sensitive

        return f"BearerAuth(token={mask_sensitive(self.token)!r})"


Credentials = Union[BasicAuth, BearerAuth]


@dataclass
class RequestDescriptor:
    """Everything the transport needs for a single call.

    timeout is in milliseconds and overrides the client default when set.
    """

    method: HttpMethod
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    data: Optional[Any] = None
    timeout: Optional[float] = None
