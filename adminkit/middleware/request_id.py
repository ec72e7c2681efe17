"""Correlates authorization and query log lines with the HTTP request that caused them.

The id comes from the incoming header when it is a short token of safe
characters, otherwise a fresh id is generated. It is bound to the logging
context for the request and echoed on the response.
"""

import re
from collections.abc import Callable
from typing import Any

from adminkit.shared.telemetry.logging import request_id_var
from adminkit.shared.utils.generators import generate_id

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def _header(scope: dict[str, Any], name: str) -> str | None:
    wanted = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None


def sanitize_request_id(raw: str | None) -> str:
    """Return the stripped client value if it is safe to log, else a generated id."""
    candidate = (raw or "").strip()
    return candidate if _SAFE_REQUEST_ID.match(candidate) else generate_id()


def RequestIDMiddleware(app: Callable[..., Any], header_name: str = "X-Request-ID") -> Callable[..., Any]:
    async def asgi_app(scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        encoded = (header_name.encode(), request_id.encode())

        async def send_with_id(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", []), encoded]
            await send(message)

        token = request_id_var.set(request_id)
        try:
            await app(scope, receive, send_with_id)
        finally:
            request_id_var.reset(token)

    return asgi_app
