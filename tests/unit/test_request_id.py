"""Tests for request id sanitizing and its binding to log records."""

import logging
from typing import Any

from adminkit.middleware.request_id import RequestIDMiddleware, sanitize_request_id
from adminkit.shared.telemetry.logging import RequestIdFilter, request_id_var


def test_sanitize_keeps_safe_values() -> None:
    assert sanitize_request_id("  abc_123-x ") == "abc_123-x"


def test_sanitize_replaces_unsafe_values() -> None:
    for raw in (None, "", "bad id!", "x" * 65, "line\nbreak"):
        generated = sanitize_request_id(raw)
        assert generated != raw
        assert len(generated) == 36


def test_filter_stamps_records() -> None:
    record = logging.LogRecord("adminkit", logging.INFO, __file__, 1, "msg", None, None)
    RequestIdFilter().filter(record)
    assert record.request_id == "-"

    token = request_id_var.set("req-9")
    try:
        RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req-9"


async def test_middleware_binds_id_for_the_request_only() -> None:
    seen: list[str] = []
    sent: list[dict[str, Any]] = []

    async def inner(scope: dict[str, Any], receive: Any, send: Any) -> None:
        seen.append(request_id_var.get())
        await send({"type": "http.response.start", "status": 200, "headers": []})

    async def send(message: dict[str, Any]) -> None:
        sent.append(message)

    app = RequestIDMiddleware(inner)
    scope = {"type": "http", "headers": [(b"x-request-id", b"req-42")]}
    await app(scope, None, send)

    assert seen == ["req-42"]
    assert (b"X-Request-ID", b"req-42") in sent[0]["headers"]
    assert request_id_var.get() == "-"
