"""HTTP API: routers and dependency wiring."""

from tasktracker.api.router import api_router

__all__ = ["api_router"]
