"""Endpoint switching and pagination."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from ..core.config import VerifierConfig
from ..core.endpoints import Endpoint, resolve_endpoint
from ..core.errors import ElementNotFoundError, InvalidArgumentError
from ..core.models import PageHistory
from ..core.waiting import browser_wait

logger = logging.getLogger(__name__)

PAGE_INDEX_PATTERN = re.compile(r"/(\d+)/$")


class Direction(Enum):
    NEXT = "next"
    PREVIOUS = "previous"


def resolve_direction(direction: Union[Direction, str]) -> Direction:
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(str(direction).lower())
    except ValueError:
        raise InvalidArgumentError(
            f"Pagination direction must be 'next' or 'previous', got {direction!r}"
        ) from None


def page_index(url: str) -> Optional[int]:
    """Returns the trailing ``/<digits>/`` index of ``url`` if there is one."""

    match = PAGE_INDEX_PATTERN.search(url)
    return int(match.group(1)) if match else None


def pager_selector(direction: Union[Direction, str]) -> str:
    return f"li.{resolve_direction(direction).value}"


@dataclass
class Navigator:
    """Moves the browser between endpoints and pages of the fixture site.

    The current URL is always read from the page; nothing is cached beyond a
    single before/after comparison.
    """

    page: Any
    config: VerifierConfig
    history: PageHistory = field(default_factory=PageHistory)

    def url_for(self, endpoint: Union[Endpoint, str]) -> str:
        return self.config.url_for(resolve_endpoint(endpoint).path)

    def is_at(self, endpoint: Union[Endpoint, str]) -> bool:
        return self.page.url == self.url_for(endpoint)

    def switch_to(self, endpoint: Union[Endpoint, str]) -> None:
        if self.is_at(endpoint):
            return
        self.goto(self.url_for(endpoint))

    def goto(self, url: str) -> None:
        """Navigates to ``url`` and blocks until the observed URL has changed."""

        previous_url = self.page.url
        logger.debug("Navigating %s -> %s", previous_url, url)
        with browser_wait(f"navigation to {url}", self.config.navigation_timeout) as timeout:
            self.page.goto(url, timeout=timeout)
        if url == previous_url:
            return
        self._wait_for_url_change(previous_url)

    def has_control(self, direction: Union[Direction, str]) -> bool:
        return self.page.locator(pager_selector(direction)).count() > 0

    def paginate(self, direction: Union[Direction, str]) -> bool:
        """Clicks the pager control and reports whether the index moved by one."""

        resolved = resolve_direction(direction)
        previous_url = self.page.url
        self.history.prev_page = page_index(previous_url) or 1

        control = self.page.locator(pager_selector(resolved))
        if control.count() == 0:
            raise ElementNotFoundError(f"Pagination control '{resolved.value}'", previous_url)
        control.locator("a").first.click()
        self._wait_for_url_change(previous_url)

        self.history.current_page = page_index(self.page.url) or 1
        logger.debug(
            "Paginated %s: %s -> %s",
            resolved.value,
            self.history.prev_page,
            self.history.current_page,
        )
        return self.history.delta == 1

    def _wait_for_url_change(self, previous_url: str) -> None:
        with browser_wait(f"URL to change from {previous_url}", self.config.navigation_timeout) as timeout:
            self.page.wait_for_url(lambda current: current != previous_url, timeout=timeout)
