"""
Errors raised by track_request.

Transport failures (timeouts, connection errors) are httpx exceptions and are
never wrapped; only completed responses with an unexpected status become a
RequestError.
"""
from typing import Any, Optional

UNKNOWN_ERROR = "Unknown error"


class RequestError(Exception):
    """A response arrived but its status was not 200 or 201."""

    def __init__(
        self,
        message: Optional[str],
        status_code: Optional[int] = None,
        response: Any = None,
        body: Any = None,
    ):
        self.message = message or UNKNOWN_ERROR
        self.status_code = status_code
        self.response = response
        self.body = body
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"RequestError(message={self.message!r}, status_code={self.status_code!r})"
