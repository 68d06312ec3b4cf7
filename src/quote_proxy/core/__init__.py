"""Core utilities and shared functionality."""

from quote_proxy.core.exceptions import (
    AppError,
    InsufficientDataError,
    MalformedPriceError,
    QuoteSerializationError,
    UpstreamPermanentError,
    UpstreamUnavailableError,
)

__all__ = [
    "AppError",
    "InsufficientDataError",
    "MalformedPriceError",
    "QuoteSerializationError",
    "UpstreamPermanentError",
    "UpstreamUnavailableError",
]
