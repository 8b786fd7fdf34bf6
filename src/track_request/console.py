"""
Rich-rendered request/response tracing.

Panels are only printed when TRACK_REQUEST_DEBUG is set; masking helpers are
also used by the loggers, so credentials never reach any output unmasked.
"""
import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .config import is_debug_enabled

console = Console(stderr=True)

_SENSITIVE_HEADERS = ("authorization", "x-api-key")


def mask_sensitive(value: Optional[str], show_chars: int = 4) -> str:
    """
    Mask sensitive values for logging.

    Args:
        value: Value to mask
        show_chars: Number of characters to show before masking

    Returns:
        str: Masked value
    """
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "***"


def mask_auth_header(value: Optional[str]) -> str:
    """Keep the auth scheme readable, mask the credential after it."""
    if not value:
        return "<none>"
    scheme, _, credential = value.partition(" ")
    if not credential:
        return mask_sensitive(value)
    return f"{scheme} {mask_sensitive(credential)}"


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Copy of headers with the authorization values masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in _SENSITIVE_HEADERS:
            masked[key] = mask_auth_header(masked[key])
    return masked


def format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary data: {len(body)} bytes>"
    return str(body)


def print_request(method: str, url: str, headers: Dict[str, str], body: Any = None) -> None:
    if not is_debug_enabled():
        return
    console.print(Panel(f"[bold cyan]{method}[/bold cyan] {url}", title="[bold blue]Request[/bold blue]"))
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    if body is not None:
        console.print(
            Panel(
                Syntax(format_body(body), "json", theme="monokai"),
                title="[bold]Request Body[/bold]",
            )
        )


def print_response(url: str, status_code: int, reason: str, body: Any = None) -> None:
    if not is_debug_enabled():
        return
    color = "green" if status_code in (200, 201) else "red"
    console.print(
        Panel(
            f"[bold {color}]{status_code}[/bold {color}] {reason}",
            title=f"[bold blue]Response[/bold blue] ({url})",
        )
    )
    if body:
        console.print(
            Panel(
                Syntax(format_body(body), "json", theme="monokai"),
                title="[bold]Response Body[/bold]",
            )
        )
