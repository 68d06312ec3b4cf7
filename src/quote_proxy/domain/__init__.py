"""Domain layer - quote documents and day records."""

from quote_proxy.domain.models import DayQuote, QuoteDocument

__all__ = [
    "DayQuote",
    "QuoteDocument",
]
