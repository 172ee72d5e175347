"""Shared utilities (datetime helpers)."""

from tasktracker.shared.utils.datetime import to_naive_utc, utc_now

__all__ = ["to_naive_utc", "utc_now"]
