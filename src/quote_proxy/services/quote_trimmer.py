"""Trim a quote document to its most recent days and aggregate closing prices."""

import json
import math

from quote_proxy.core.exceptions import (
    InsufficientDataError,
    MalformedPriceError,
    QuoteSerializationError,
)
from quote_proxy.domain.models import QuoteDocument

# Sorts after the provider's "1." .. "5." metadata labels
AVERAGE_CLOSE_LABEL = "6. Average Close"


def trim_quote(document: QuoteDocument, n_days: int) -> QuoteDocument:
    """
    Keep the ``n_days`` most recent day records and add their average close.

    The returned document shares its metadata mapping with ``document``; the
    average is written into that shared mapping. Day records are reused
    unchanged in a fresh mapping.

    Raises:
        InsufficientDataError: fewer than ``n_days`` records are available.
        MalformedPriceError: a selected day's close is missing or not a number.
    """
    available = document.days_available
    if available < n_days:
        raise InsufficientDataError(available=available, requested=n_days)

    window = document.sorted_dates()[available - n_days:]

    trimmed = QuoteDocument(metadata=document.metadata)
    close_sum = 0.0
    for day in window:
        day_quote = document.day_quotes[day]
        trimmed.day_quotes[day] = day_quote
        close_sum += _parse_close(day, day_quote.close)

    trimmed.metadata[AVERAGE_CLOSE_LABEL] = f"{close_sum / n_days:.2f}"
    return trimmed


def _parse_close(day: str, raw: object) -> float:
    if raw is None:
        raise MalformedPriceError(day, raw, "missing close")
    try:
        price = float(raw)
    except (TypeError, ValueError) as e:
        raise MalformedPriceError(day, raw, str(e)) from e
    if not math.isfinite(price):
        raise MalformedPriceError(day, raw, "not a finite number")
    return price


def serialize_quote(document: QuoteDocument) -> str:
    """Encode a document as JSON in the provider's envelope shape."""
    try:
        return json.dumps(document.to_payload(), sort_keys=True, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise QuoteSerializationError(str(e)) from e
