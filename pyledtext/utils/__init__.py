"""Utility helpers for pyledtext."""

from .debug import debug_enabled, debug_log

__all__ = [
    "debug_enabled",
    "debug_log",
]
