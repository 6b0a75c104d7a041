"""Per-endpoint extraction strategies."""

from .strategies import QuoteExtractor

__all__ = ["QuoteExtractor"]
