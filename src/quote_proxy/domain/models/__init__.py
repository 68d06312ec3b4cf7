"""Domain models package."""

from quote_proxy.domain.models.quote import (
    DayQuote,
    QuoteDocument,
    METADATA_LABEL,
    SERIES_LABEL,
    DEFAULT_DAY_LABELS,
)

__all__ = [
    "DayQuote",
    "QuoteDocument",
    "METADATA_LABEL",
    "SERIES_LABEL",
    "DEFAULT_DAY_LABELS",
]
