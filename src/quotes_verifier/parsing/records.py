"""Parsing rules that turn each fixture layout into ``QuoteRecord`` values.

Every rule works on a static HTML snapshot (``page.content()`` or
``frame.content()``) parsed with BeautifulSoup, so the rules can be exercised
without a browser.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from ..core.errors import ElementNotFoundError, EmptyResultSetError
from ..core.models import AuthorDirectory, QuoteRecord

QUOTE_SELECTOR = "div.quote"
TABLE_AUTHOR_DELIMITER = " Author: "
FILTER_TAG_DELIMITER = ","

AuthorLookup = Literal["class", "tag"]
Markup = Union[str, BeautifulSoup, Tag]


def make_soup(markup: Markup) -> Union[BeautifulSoup, Tag]:
    if isinstance(markup, (BeautifulSoup, Tag)):
        return markup
    return BeautifulSoup(markup, "html.parser")


def _text(element: Optional[Tag]) -> str:
    if element is None:
        return ""
    return " ".join(element.get_text(" ").split())


def _child_spans(quote: Tag) -> List[Tag]:
    return quote.find_all("span", recursive=False) or quote.find_all("span")


# ----------------------------------------------------------------------
# Div/span layout: base, scroll, js, random, iframe, frames
# ----------------------------------------------------------------------
def find_quote_containers(markup: Markup, url: Optional[str] = None) -> List[Tag]:
    containers = make_soup(markup).select(QUOTE_SELECTOR)
    if not containers:
        raise EmptyResultSetError("No quotes found", url)
    return containers


def parse_quote(quote: Tag, *, author_lookup: AuthorLookup = "class") -> QuoteRecord:
    """Parses one ``div.quote`` container.

    ``author_lookup`` selects how the author element inside the second span is
    located: by its ``author`` class or by its ``small`` element tag.
    """

    spans = _child_spans(quote)
    if len(spans) < 2:
        raise ElementNotFoundError("Quote text and author spans")

    if author_lookup == "tag":
        author_element = spans[1].find("small")
    else:
        author_element = spans[1].find(class_="author")
    author = _text(author_element)
    if not author:
        raise ElementNotFoundError("Quote author")

    tag_container = quote.find("div", class_="tags") or quote.find("div")
    tags = [_text(link) for link in tag_container.find_all("a")] if tag_container else []

    return QuoteRecord.build(text=_text(spans[0]), author=author, tags=tags)


def author_profile_url(quote: Tag, base_url: str) -> Optional[str]:
    spans = _child_spans(quote)
    if len(spans) < 2:
        return None
    link = spans[1].find("a", href=True)
    return urljoin(base_url, link["href"]) if link else None


def parse_quote_listing(
    markup: Markup,
    *,
    url: Optional[str] = None,
    author_lookup: AuthorLookup = "class",
    authors: Optional[AuthorDirectory] = None,
) -> List[QuoteRecord]:
    """Parses every quote container of a listing page.

    When ``authors`` is given, each author's profile link is saved into it.
    """

    records: List[QuoteRecord] = []
    for quote in find_quote_containers(markup, url):
        record = parse_quote(quote, author_lookup=author_lookup)
        if authors is not None and url:
            authors.add(record.author, author_profile_url(quote, url))
        records.append(record)
    return records


# ----------------------------------------------------------------------
# Table layout
# ----------------------------------------------------------------------
def _quote_rows(markup: Markup, url: Optional[str]) -> List[Tag]:
    table = make_soup(markup).find("table")
    if table is None:
        raise ElementNotFoundError("Quotes table", url)
    # first row is the header, last row holds the pager
    return table.find_all("tr")[1:-1]


def split_table_quote(row_text: str) -> Tuple[str, str]:
    text, delimiter, author = row_text.partition(TABLE_AUTHOR_DELIMITER)
    if not delimiter or not author:
        raise ElementNotFoundError(f"Author delimiter in table row {row_text[:40]!r}")
    return text, author


def parse_table_listing(markup: Markup, *, url: Optional[str] = None) -> List[QuoteRecord]:
    """Consumes table rows in pairs: quote/author row followed by tags row."""

    rows = _quote_rows(markup, url)
    records: List[QuoteRecord] = []
    for index in range(0, len(rows) - 1, 2):
        text, author = split_table_quote(_text(rows[index]))
        tags = _text(rows[index + 1]).split()[1:]
        records.append(QuoteRecord.build(text=text, author=author, tags=tags))

    if not records:
        raise EmptyResultSetError("No quotes found", url)
    if len(rows) % 2:
        raise ElementNotFoundError("Tags row for the last table quote", url)
    return records


# ----------------------------------------------------------------------
# Filter result layout
# ----------------------------------------------------------------------
def split_tag_label(label: str, delimiter: str = FILTER_TAG_DELIMITER) -> List[str]:
    """Normalises the scalar tag label of a filter result into a tag list."""

    return [part.strip() for part in label.split(delimiter) if part.strip()]


def parse_filter_results(markup: Markup, *, url: Optional[str] = None) -> List[QuoteRecord]:
    """Maps the three sibling spans of each result to text, author and tags."""

    records: List[QuoteRecord] = []
    for quote in find_quote_containers(markup, url):
        spans = _child_spans(quote)
        if len(spans) < 3:
            raise ElementNotFoundError("Filter result text, author and tag spans", url)
        records.append(
            QuoteRecord.build(
                text=_text(spans[0]),
                author=_text(spans[1]),
                tags=split_tag_label(_text(spans[2])),
            )
        )
    return records


def page_contains(markup: Markup, marker: str) -> bool:
    return marker in _text(make_soup(markup))

