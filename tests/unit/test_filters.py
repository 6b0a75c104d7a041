import pytest

from quotes_verifier.core.errors import ElementNotFoundError, WaitTimeoutError
from quotes_verifier.forms.filters import option_values, select_filters
from tests.helpers.fake_browser import FakePage
from tests.helpers.fixture_site import BASE_URL, search_page, wire_search

SEARCH_URL = f"{BASE_URL}/search.aspx"


def _search(tags_by_author):
    page = FakePage({SEARCH_URL: search_page()}, url=SEARCH_URL)
    wire_search(page, tags_by_author, [])
    return page


def test_tag_options_arrive_after_author_is_chosen(config):
    page = _search({"Mark Twain": ["humor", "classic"]})

    assert select_filters(page, "Mark Twain", "classic", config=config) is True
    assert option_values(page.locator("select#tag")) == ["", "humor", "classic"]
    assert page.locator("select#author").input_value() == "Mark Twain"


def test_unknown_tag_times_out(config):
    page = _search({"Mark Twain": ["humor"]})

    with pytest.raises(WaitTimeoutError):
        select_filters(page, "Mark Twain", "classic", config=config)


def test_missing_filter_controls(config):
    page = FakePage({SEARCH_URL: "<html><body></body></html>"}, url=SEARCH_URL)

    with pytest.raises(ElementNotFoundError):
        select_filters(page, "Mark Twain", "classic", config=config)
