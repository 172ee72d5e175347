"""Request context management using contextvars.

Holds the current request ID so log records written anywhere during a
request (service, repository, handlers) can carry it without threading it
through call signatures.

Usage:
    token = set_request_id("abc-123")
    ...
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Bind request_id to the current async task; returns a token for reset."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the value that was current before set_request_id."""
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the request ID of the request being handled, or None outside one."""
    return _current_request_id.get()
