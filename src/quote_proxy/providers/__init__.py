"""Quote providers module."""

from quote_proxy.providers.quote_provider import FetchResult, QuoteProvider
from quote_proxy.providers.alpha_vantage_provider import AlphaVantageQuoteProvider
from quote_proxy.providers.stub_provider import StubQuoteProvider

__all__ = [
    "FetchResult",
    "QuoteProvider",
    "AlphaVantageQuoteProvider",
    "StubQuoteProvider",
]
