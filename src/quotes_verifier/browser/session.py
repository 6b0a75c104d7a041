"""Playwright browser bootstrap."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Page, sync_playwright

from ..core.config import VerifierConfig

logger = logging.getLogger(__name__)


@contextmanager
def open_browser(config: VerifierConfig) -> Iterator[Page]:
    """Yields a page on a local or remote browser and always closes it."""

    with sync_playwright() as playwright:
        browser_type = getattr(playwright, config.browser_type)
        if config.remote_url:
            logger.info("Connecting to remote %s at %s", config.browser_type, config.remote_url)
            browser = browser_type.connect(config.remote_url)
        else:
            browser = browser_type.launch(headless=config.headless)

        try:
            context = browser.new_context()
            page = context.new_page()
            page.set_default_timeout(config.navigation_timeout * 1000)
            yield page
        finally:
            browser.close()
            logger.info("Browser session closed")
