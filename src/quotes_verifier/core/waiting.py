"""Bounded waits on browser state."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import WaitTimeoutError


def to_milliseconds(seconds: float) -> float:
    return seconds * 1000


@contextmanager
def browser_wait(description: str, timeout: float) -> Iterator[float]:
    """Yields ``timeout`` in milliseconds for a Playwright wait.

    A Playwright timeout raised inside the block surfaces as ``WaitTimeoutError``.
    """

    try:
        yield to_milliseconds(timeout)
    except PlaywrightTimeoutError:
        raise WaitTimeoutError(description, timeout) from None
