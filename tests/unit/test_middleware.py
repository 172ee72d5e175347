"""Tests for the raw-ASGI middleware and request-scoped logging context."""

import asyncio
import json
import logging

from httpx import ASGITransport, AsyncClient

from tasktracker.middleware import RequestIDMiddleware, TimeoutMiddleware
from tasktracker.shared.context import get_request_id
from tasktracker.shared.telemetry.logging import RequestIdFilter


async def _slow_app(scope, receive, send) -> None:
    await asyncio.sleep(1)


async def _echo_request_id_app(scope, receive, send) -> None:
    body = json.dumps({"request_id": get_request_id()}).encode()
    await send({
        "type": "http.response.start",
        "status": 200,
        "headers": [(b"content-type", b"application/json")],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})


async def test_timeout_answers_504_in_error_shape() -> None:
    app = TimeoutMiddleware(_slow_app, timeout_seconds=0.01)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/api/tasks")

    assert response.status_code == 504
    data = response.json()
    assert data["status"] == 504
    assert data["error"] == "Gateway Timeout"
    assert data["path"] == "/api/tasks"
    assert "validationErrors" not in data


async def test_request_id_is_visible_to_the_app() -> None:
    app = RequestIDMiddleware(_echo_request_id_app)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/", headers={"X-Request-ID": "req-42"})

    assert response.json() == {"request_id": "req-42"}
    assert response.headers["X-Request-ID"] == "req-42"
    assert get_request_id() is None


def test_request_id_filter_outside_request() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


async def test_timeout_response_carries_request_id() -> None:
    """Request ID wraps the timeout, as in create_app, so the 504 gets the header."""
    app = RequestIDMiddleware(TimeoutMiddleware(_slow_app, timeout_seconds=0.01))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/api/tasks", headers={"X-Request-ID": "slow-1"})

    assert response.status_code == 504
    assert response.headers["X-Request-ID"] == "slow-1"
