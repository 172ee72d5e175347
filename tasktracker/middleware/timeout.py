"""Request timeout middleware.

Cancels the request if it runs longer than the configured timeout and answers
504 with the standard ErrorResponse body. If the response has already
started, the connection is simply closed after logging.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

import asyncio
import json
import logging
from http import HTTPStatus
from typing import Callable

from tasktracker.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


async def _send_gateway_timeout(send: Callable, path: str, timeout_seconds: float) -> None:
    body = ErrorResponse(
        status=HTTPStatus.GATEWAY_TIMEOUT.value,
        error=HTTPStatus.GATEWAY_TIMEOUT.phrase,
        message=f"Request timed out after {timeout_seconds:g} seconds",
        path=path,
    )
    await send({
        "type": "http.response.start",
        "status": HTTPStatus.GATEWAY_TIMEOUT.value,
        "headers": [(b"content-type", b"application/json")],
    })
    await send({
        "type": "http.response.body",
        "body": json.dumps(body.to_content()).encode(),
        "more_body": False,
    })


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel request after timeout_seconds (sends 504 on timeout). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            async with asyncio.timeout(timeout_seconds):
                await app(scope, receive, send_wrapper)
        except TimeoutError:
            path = scope.get("path", "")
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                path,
            )
            if not response_started:
                await _send_gateway_timeout(send, path, timeout_seconds)

    return asgi_app
