"""Playwright session bootstrap and dialog handling."""

from .alerts import AlertMonitor
from .session import open_browser

__all__ = ["AlertMonitor", "open_browser"]
