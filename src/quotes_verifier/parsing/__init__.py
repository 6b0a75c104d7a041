"""Layout specific parsing rules producing canonical quote records."""

from .records import (
    parse_filter_results,
    parse_quote,
    parse_quote_listing,
    parse_table_listing,
)

__all__ = [
    "parse_filter_results",
    "parse_quote",
    "parse_quote_listing",
    "parse_table_listing",
]
