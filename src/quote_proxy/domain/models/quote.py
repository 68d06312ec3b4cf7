"""Quote document models mirroring the provider's daily time series."""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

# Top-level labels used by the provider's JSON envelope
METADATA_LABEL = "Meta Data"
SERIES_LABEL = "Time Series (Daily)"

# Field name -> label the provider uses for it in TIME_SERIES_DAILY_ADJUSTED
DEFAULT_DAY_LABELS: dict[str, str] = {
    "open": "1. open",
    "high": "2. high",
    "low": "3. low",
    "close": "4. close",
    "adjusted_close": "5. adjusted close",
    "volume": "6. volume",
    "dividend_amount": "7. dividend amount",
    "split_coefficient": "8. split coefficient",
}

_FIELDS_BY_NAME = {
    label.split(". ", 1)[1]: name for name, label in DEFAULT_DAY_LABELS.items()
}
_ORDINAL_PREFIX = re.compile(r"^\d+\.\s*")


def _field_for_label(label: str) -> Optional[str]:
    """Map a provider label such as '5. volume' to a DayQuote field name."""
    return _FIELDS_BY_NAME.get(_ORDINAL_PREFIX.sub("", label).strip().lower())


@dataclass
class DayQuote:
    """
    One trading day's record.

    Prices and volumes are kept as the raw decimal strings the provider sent,
    so a record re-serializes unchanged. Keys the model does not know about
    are preserved in ``extra``; ``labels`` remembers which provider label each
    named field came from (the ordinal numbering differs between series).
    """

    open: Optional[str] = None
    high: Optional[str] = None
    low: Optional[str] = None
    close: Optional[str] = None
    adjusted_close: Optional[str] = None
    volume: Optional[str] = None
    dividend_amount: Optional[str] = None
    split_coefficient: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "DayQuote":
        """Build a DayQuote from one provider day record."""
        values: dict[str, Optional[str]] = {}
        labels: dict[str, str] = {}
        extra: dict[str, Any] = {}

        for label, value in raw.items():
            name = _field_for_label(label)
            if name is None:
                extra[label] = value
                continue
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"{label!r} must be a string, got {type(value).__name__}"
                )
            values[name] = value
            labels[name] = label

        return cls(**values, extra=extra, labels=labels)

    def to_payload(self) -> dict[str, Any]:
        """Return the record keyed by provider labels."""
        payload: dict[str, Any] = {}
        for name, default_label in DEFAULT_DAY_LABELS.items():
            value = getattr(self, name)
            label = self.labels.get(name)
            if label is None:
                if value is None:
                    continue
                label = default_label
            payload[label] = value
        payload.update(self.extra)
        return payload


@dataclass
class QuoteDocument:
    """Series metadata plus day records keyed by ``YYYY-MM-DD`` date strings."""

    metadata: dict[str, Any] = field(default_factory=dict)
    day_quotes: dict[str, DayQuote] = field(default_factory=dict)

    @property
    def days_available(self) -> int:
        return len(self.day_quotes)

    def sorted_dates(self) -> list[str]:
        """Dates in ascending order; ISO date strings sort chronologically."""
        return sorted(self.day_quotes)

    def to_payload(self) -> dict[str, Any]:
        """Return the document in the provider's envelope shape."""
        return {
            METADATA_LABEL: self.metadata,
            SERIES_LABEL: {
                day: quote.to_payload() for day, quote in self.day_quotes.items()
            },
        }
