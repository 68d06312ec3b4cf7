"""Stub quote provider for offline/testing use."""

import random
from datetime import date, timedelta
from decimal import Decimal
from http import HTTPStatus
from typing import Optional

from quote_proxy.domain.models import DayQuote, QuoteDocument
from quote_proxy.providers.alpha_vantage_provider import COMPACT_OUTPUT_DAYS
from quote_proxy.providers.quote_provider import FetchResult


# Deterministic starting prices for common symbols
_STUB_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("185.50"),
    "GOOGL": Decimal("142.75"),
    "MSFT": Decimal("378.25"),
    "AMZN": Decimal("178.50"),
    "TSLA": Decimal("248.75"),
    "NVDA": Decimal("485.25"),
    "META": Decimal("505.50"),
    "SPY": Decimal("485.25"),
}

_CENT = Decimal("0.01")


class StubQuoteProvider:
    """
    Stub provider with deterministic fake daily series for offline operation.

    Produces one record per weekday ending at ``as_of``, enough of them to
    cover the requested window the same way the real provider's compact and
    full output sizes would.
    """

    def __init__(
        self,
        symbol: str,
        ndays: int,
        seed: int = 42,
        as_of: Optional[date] = None,
    ):
        """Initialize with optional random seed for reproducibility."""
        self._symbol = symbol.upper()
        self._ndays = ndays
        self._seed = seed
        self._as_of = as_of or date.today()

    def fetch(self) -> FetchResult:
        """Return a stub series; the same instance always returns the same data."""
        rng = random.Random(self._seed)
        count = max(self._ndays, COMPACT_OUTPUT_DAYS)
        price = _STUB_PRICES.get(self._symbol) or Decimal(str(50 + rng.random() * 200))

        days = []
        day = self._as_of
        while len(days) < count:
            if day.weekday() < 5:
                days.append(day)
            day -= timedelta(days=1)

        day_quotes: dict[str, DayQuote] = {}
        for day in reversed(days):
            change = Decimal(str((rng.random() - 0.5) * 0.04))
            open_price = price.quantize(_CENT)
            close_price = (price * (1 + change)).quantize(_CENT)
            high = max(open_price, close_price) + Decimal("1.25")
            low = min(open_price, close_price) - Decimal("1.25")
            day_quotes[day.isoformat()] = DayQuote(
                open=str(open_price),
                high=str(high),
                low=str(low),
                close=str(close_price),
                adjusted_close=str(close_price),
                volume=str(rng.randint(1_000_000, 50_000_000)),
                dividend_amount="0.0000",
                split_coefficient="1.0",
            )
            price = close_price

        metadata = {
            "1. Information": "Daily Time Series with Splits and Dividend Events",
            "2. Symbol": self._symbol,
            "3. Last Refreshed": days[0].isoformat(),
            "4. Output Size": "Full size" if self._ndays > COMPACT_OUTPUT_DAYS else "Compact",
            "5. Time Zone": "US/Eastern",
        }
        return FetchResult(QuoteDocument(metadata=metadata, day_quotes=day_quotes), HTTPStatus.OK)
