"""AJAX filter form interaction on the search endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from ..core.config import VerifierConfig
from ..core.errors import ElementNotFoundError
from ..core.waiting import browser_wait

logger = logging.getLogger(__name__)

AUTHOR_SELECT = "select#author"
TAG_SELECT = "select#tag"
SUBMIT_BUTTON = "[name='submit_button']"


def _require(page: Any, selector: str, description: str) -> Any:
    locator = page.locator(selector)
    if locator.count() == 0:
        raise ElementNotFoundError(description, page.url)
    return locator


def option_values(select: Any) -> List[str]:
    return [option.get_attribute("value") or "" for option in select.locator("option").all()]


def select_filters(
    page: Any,
    author: str,
    tag: str,
    *,
    config: Optional[VerifierConfig] = None,
) -> bool:
    """Selects ``author`` by label and ``tag`` by position, submits, and reads both back.

    The tag list is filled by an AJAX call once an author is chosen, so the
    requested tag option is awaited before its position is resolved.
    """

    wait_timeout = config.wait_timeout if config else 5.0

    author_select = _require(page, AUTHOR_SELECT, "Author filter")
    tag_select = _require(page, TAG_SELECT, "Tag filter")

    author_select.select_option(label=author)
    with browser_wait(f"tag option {tag!r}", wait_timeout) as timeout:
        tag_option = tag_select.locator(f"option[value={json.dumps(tag)}]").first
        tag_option.wait_for(state="attached", timeout=timeout)
    tag_index = option_values(tag_select).index(tag)
    tag_select.select_option(index=tag_index)

    _require(page, SUBMIT_BUTTON, "Filter submit button").click()
    page.wait_for_load_state()

    author_value = author_select.input_value()
    tag_value = tag_select.input_value()
    logger.debug("Filters read back as author=%r tag=%r", author_value, tag_value)
    return author_value == author and tag_value == tag
