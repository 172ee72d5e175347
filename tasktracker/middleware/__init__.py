"""HTTP middleware: timeout and request ID / access log.

Applied in main app; order matters (first added = outermost).
Import and use from tasktracker.main.
"""

from tasktracker.middleware.request_id import RequestIDMiddleware
from tasktracker.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
