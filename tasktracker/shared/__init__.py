"""Shared utilities: request context, telemetry and cross-cutting helpers.

Used by application, infrastructure, and API layers. No business logic.
"""

from tasktracker.shared.context import get_request_id, reset_request_id, set_request_id
from tasktracker.shared.utils import to_naive_utc, utc_now

__all__ = [
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "to_naive_utc",
    "utc_now",
]
