import pytest

from quotes_verifier.core.config import PaginationPolicy
from quotes_verifier.core.errors import ElementNotFoundError
from quotes_verifier.core.models import QuoteRecord
from quotes_verifier.extraction.strategies import (
    IFRAME_NAME,
    JSON_FRAME_NAME,
    RANDOM_FRAME_NAME,
    QuoteExtractor,
)
from quotes_verifier.navigation.navigator import Navigator
from tests.helpers.fake_browser import FakeFrame, FakePage
from tests.helpers.fixture_site import (
    BASE_URL,
    listing_page,
    listing_routes,
    make_quotes,
    search_page,
    tableful_routes,
    wire_search,
)

QUOTES = make_quotes(100)


def _extractor(page, config, log):
    return QuoteExtractor(page, Navigator(page, config), log, config)


def test_base_reads_every_page_and_saves_authors(config, log):
    page = FakePage(listing_routes(QUOTES))
    extractor = _extractor(page, config, log)

    records = extractor.parse_quotes_base()

    assert len(records) == 100
    assert records[-1].text == "“Quote number 99.”"
    assert log["base.paginate_next"] is True
    assert len(extractor.authors) == 5
    assert page.url == f"{BASE_URL}/page/10/"


def test_js_layout_matches_base_layout(config, log):
    base = _extractor(FakePage(listing_routes(QUOTES)), config, log).parse_quotes_base()
    js = _extractor(FakePage(listing_routes(QUOTES, prefix="/js")), config, log).parse_quotes_js()

    assert js == base


def test_js_previous_control_policy_stops_on_second_page(config, log):
    config.js_policy = PaginationPolicy.PREVIOUS_CONTROL
    page = FakePage(listing_routes(QUOTES, prefix="/js"))

    records = _extractor(page, config, log).parse_quotes_js()

    assert len(records) == 20
    assert page.navigations == [f"{BASE_URL}/js", f"{BASE_URL}/js/page/2/"]


def test_js_fixed_pages_policy(config, log):
    config.js_policy = PaginationPolicy.FIXED_PAGES
    config.fixed_page_count = 3

    records = _extractor(FakePage(listing_routes(QUOTES, prefix="/js")), config, log).parse_quotes_js()

    assert len(records) == 30


def test_tableful_stops_at_end_marker(config, log):
    page = FakePage(tableful_routes(QUOTES))

    records = _extractor(page, config, log).parse_quotes_tableful()

    assert len(records) == 100
    assert records == _extractor(FakePage(listing_routes(QUOTES)), config, log).parse_quotes_base()
    assert page.navigations[-1] == f"{BASE_URL}/tableful/page/11/"
    assert log["tableful.pages_read"] is True


def test_tableful_fixed_pages_never_visits_empty_page(config, log):
    config.tableful_policy = PaginationPolicy.FIXED_PAGES
    page = FakePage(tableful_routes(QUOTES))

    records = _extractor(page, config, log).parse_quotes_tableful()

    assert len(records) == 100
    assert f"{BASE_URL}/tableful/page/11/" not in page.navigations


def _scroll_page(batch=10, total=100):
    page = FakePage({f"{BASE_URL}/scroll": listing_page(QUOTES[:batch])})
    shown = [batch]

    def load_more(page, _script):
        shown[0] = min(shown[0] + batch, total)
        page.load(page.url, listing_page(QUOTES[:shown[0]]))

    page.on_evaluate = load_more
    return page


def test_scroll_loads_until_count_stops_growing(config, log):
    page = _scroll_page()

    records = _extractor(page, config, log).parse_quotes_scroll()

    assert len(records) == 100
    assert log["scroll.loaded_more"] is True
    # nine growing scrolls plus the one that confirms the fixed point
    assert len(page.scripts) == 10
    assert page.delays == [0] * 10


def test_scroll_without_growth_is_flagged(config, log):
    page = _scroll_page(batch=10, total=10)

    records = _extractor(page, config, log).parse_quotes_scroll()

    assert len(records) == 10
    assert log["scroll.loaded_more"] is False


def test_random_quote(config, log):
    page = FakePage({f"{BASE_URL}/random": listing_page(QUOTES[3:4])})

    record = _extractor(page, config, log).parse_random_quote()

    assert record == QuoteRecord.build("“Quote number 3.”", "Steve Martin", ["truth", "love"])


def test_iframe_quote_comes_from_separate_document(config, log):
    page = FakePage({f"{BASE_URL}/iframe": "<html><body><iframe name='my_awesome_frame'></iframe></body></html>"})
    page.frames[IFRAME_NAME] = FakeFrame(IFRAME_NAME, f"{BASE_URL}/random", listing_page(QUOTES[2:3]))

    record = _extractor(page, config, log).parse_quotes_iframe()

    assert record.author == "Mark Twain"
    assert log["iframe.separate_document"] is True
    assert log["iframe.single_quote"] is True


def test_missing_iframe_is_fatal(config, log):
    page = FakePage({f"{BASE_URL}/iframe": "<html><body></body></html>"})

    with pytest.raises(ElementNotFoundError):
        _extractor(page, config, log).parse_quotes_iframe()


def test_frames_have_json_and_random_quote(config, log):
    page = FakePage({f"{BASE_URL}/frames": "<html><body><iframe></iframe><iframe></iframe></body></html>"})
    page.frames[JSON_FRAME_NAME] = FakeFrame(
        JSON_FRAME_NAME, f"{BASE_URL}/api/quotes", '<html><body><pre>{"quotes": []}</pre></body></html>'
    )
    page.frames[RANDOM_FRAME_NAME] = FakeFrame(RANDOM_FRAME_NAME, f"{BASE_URL}/random", listing_page(QUOTES[:1]))

    assert _extractor(page, config, log).parse_quotes_frames() is True
    assert log["frames.json_text"] is True
    assert log["frames.random_quote"] is True


def test_filter_returns_matching_author(config, log):
    page = FakePage({f"{BASE_URL}/search.aspx": search_page()})
    wire_search(
        page,
        {"Mark Twain": ["humor", "classic"]},
        [("“A classic is something everybody wants to have read.”", "Mark Twain", ("classic",))],
    )

    records = _extractor(page, config, log).parse_quotes_by_filter()

    assert [record.author for record in records] == ["Mark Twain"]
    assert records[0].tags == ("classic",)
    assert log["search.filters_applied"] is True
    assert log["search.author_matches"] is True


def test_filter_flags_foreign_author(config, log):
    page = FakePage({f"{BASE_URL}/search.aspx": search_page()})
    wire_search(page, {"Mark Twain": ["classic"]}, [("“Not his.”", "Jane Austen", ("classic",))])

    _extractor(page, config, log).parse_quotes_by_filter()

    assert log["search.author_matches"] is False
