"""Per-endpoint extraction of the quote dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List

from ..core.action_log import ActionLog
from ..core.config import PaginationPolicy, VerifierConfig
from ..core.endpoints import Endpoint
from ..core.errors import ElementNotFoundError
from ..core.models import AuthorDirectory, QuoteRecord
from ..core.waiting import browser_wait, to_milliseconds
from ..forms.filters import select_filters
from ..navigation.navigator import Direction, Navigator
from ..parsing.records import (
    QUOTE_SELECTOR,
    find_quote_containers,
    make_soup,
    page_contains,
    parse_filter_results,
    parse_quote,
    parse_quote_listing,
    parse_table_listing,
)

logger = logging.getLogger(__name__)

IFRAME_NAME = "my_awesome_frame"
JSON_FRAME_NAME = "json_frame"
RANDOM_FRAME_NAME = "random_frame"
SCROLL_SCRIPT = "window.scrollBy(0, document.body.scrollHeight)"
DEFAULT_FILTER_AUTHOR = "Mark Twain"
DEFAULT_FILTER_TAG = "classic"


@dataclass
class QuoteExtractor:
    """Walks each fixture layout and converges on canonical ``QuoteRecord`` lists."""

    page: Any
    navigator: Navigator
    log: ActionLog
    config: VerifierConfig
    authors: AuthorDirectory = field(default_factory=AuthorDirectory)

    # ------------------------------------------------------------------
    # Paginated listings
    # ------------------------------------------------------------------
    def parse_quotes_base(self) -> List[QuoteRecord]:
        self.navigator.switch_to(Endpoint.BASE)
        return self._walk_pages("base", self.config.base_policy, save_authors=True)

    def parse_quotes_js(self) -> List[QuoteRecord]:
        self.navigator.switch_to(Endpoint.JS)
        return self._walk_pages("js", self.config.js_policy)

    def _walk_pages(
        self, label: str, policy: PaginationPolicy, *, save_authors: bool = False
    ) -> List[QuoteRecord]:
        result: List[QuoteRecord] = []
        pages_read = 0
        while True:
            result.extend(
                parse_quote_listing(
                    self.page.content(),
                    url=self.page.url,
                    authors=self.authors if save_authors else None,
                )
            )
            pages_read += 1
            if not self._has_more_pages(policy, pages_read):
                break
            self.log.record(f"{label}.paginate_next", self.navigator.paginate(Direction.NEXT))

        logger.info("Read %d quotes from %d %s page(s)", len(result), pages_read, label)
        return result

    def _has_more_pages(self, policy: PaginationPolicy, pages_read: int) -> bool:
        if policy is PaginationPolicy.PREVIOUS_CONTROL:
            # two-page fixtures: reaching a page with a "previous" control ends the walk
            if self.navigator.has_control(Direction.PREVIOUS):
                return False
        elif policy is PaginationPolicy.FIXED_PAGES:
            if pages_read >= self.config.fixed_page_count:
                return False
        elif policy is PaginationPolicy.END_MARKER:
            if page_contains(self.page.content(), self.config.end_marker):
                return False
        return self.navigator.has_control(Direction.NEXT)

    def parse_quotes_tableful(self) -> List[QuoteRecord]:
        """Reads the table layout by appending the page index to the URL."""

        self.navigator.switch_to(Endpoint.TABLEFUL)
        base = self.navigator.url_for(Endpoint.TABLEFUL).rstrip("/")
        policy = self.config.tableful_policy
        result: List[QuoteRecord] = []
        page = 1
        while True:
            if policy is not PaginationPolicy.FIXED_PAGES and page_contains(
                self.page.content(), self.config.end_marker
            ):
                break
            result.extend(parse_table_listing(self.page.content(), url=self.page.url))
            if policy is PaginationPolicy.FIXED_PAGES and page >= self.config.fixed_page_count:
                break
            page += 1
            self.navigator.goto(f"{base}/page/{page}/")

        self.log.record("tableful.pages_read", page > 1)
        return result

    # ------------------------------------------------------------------
    # Scroll
    # ------------------------------------------------------------------
    def _visible_quote_count(self) -> int:
        return self.page.locator(QUOTE_SELECTOR).count()

    def _wait_for_quotes(self, description: str) -> None:
        with browser_wait(description, self.config.wait_timeout) as timeout:
            self.page.wait_for_selector(QUOTE_SELECTOR, state="attached", timeout=timeout)

    def parse_quotes_scroll(self) -> List[QuoteRecord]:
        """Scrolls until the number of rendered quotes stops growing."""

        self.navigator.switch_to(Endpoint.SCROLL)
        self._wait_for_quotes("first batch of scroll quotes")

        grew = False
        before = -1
        after = self._visible_quote_count()
        while before != after:
            before = after
            self.page.evaluate(SCROLL_SCRIPT)
            self.page.wait_for_timeout(to_milliseconds(self.config.scroll_delay))
            after = self._visible_quote_count()
            if after > before:
                grew = True
            logger.debug("Scroll poll: %d -> %d quotes", before, after)

        self.log.record("scroll.loaded_more", grew)
        return parse_quote_listing(self.page.content(), url=self.page.url)

    # ------------------------------------------------------------------
    # Single quotes and frames
    # ------------------------------------------------------------------
    def parse_random_quote(self) -> QuoteRecord:
        self.navigator.switch_to(Endpoint.RANDOM)
        self._wait_for_quotes("random quote")
        return parse_quote(find_quote_containers(self.page.content(), self.page.url)[0])

    def _frame(self, name: str) -> Any:
        frame = self.page.frame(name=name)
        if frame is None:
            raise ElementNotFoundError(f"Frame '{name}'", self.page.url)
        return frame

    def parse_quotes_iframe(self) -> QuoteRecord:
        self.navigator.switch_to(Endpoint.IFRAME)
        frame = self._frame(IFRAME_NAME)
        frame_html = frame.content()
        self.log.record(
            "iframe.separate_document",
            frame.url != self.page.url and frame_html != self.page.content(),
        )
        containers = find_quote_containers(frame_html, frame.url)
        self.log.record("iframe.single_quote", len(containers) == 1)
        return parse_quote(containers[0])

    def parse_quotes_frames(self) -> bool:
        self.navigator.switch_to(Endpoint.FRAMES)
        json_frame = self._frame(JSON_FRAME_NAME)
        random_frame = self._frame(RANDOM_FRAME_NAME)

        json_text = make_soup(json_frame.content()).get_text().strip()
        has_json = self.log.record("frames.json_text", bool(json_text))
        quote = parse_quote(find_quote_containers(random_frame.content(), random_frame.url)[0])
        has_quote = self.log.record("frames.random_quote", bool(quote.text))
        return has_json and has_quote

    # ------------------------------------------------------------------
    # Filter search
    # ------------------------------------------------------------------
    def parse_quotes_by_filter(
        self, author: str = DEFAULT_FILTER_AUTHOR, tag: str = DEFAULT_FILTER_TAG
    ) -> List[QuoteRecord]:
        self.navigator.switch_to(Endpoint.SEARCH)
        self.log.record(
            "search.filters_applied",
            select_filters(self.page, author, tag, config=self.config),
        )
        records = parse_filter_results(self.page.content(), url=self.page.url)
        self.log.record(
            "search.author_matches",
            all(record.author == author for record in records),
        )
        return records
