"""Service layer - business logic orchestration."""

from quote_proxy.services.quote_trimmer import (
    AVERAGE_CLOSE_LABEL,
    serialize_quote,
    trim_quote,
)
from quote_proxy.services.retry import RetryDriver, RetryPolicy
from quote_proxy.services.quote_service import QuoteService

__all__ = [
    "AVERAGE_CLOSE_LABEL",
    "serialize_quote",
    "trim_quote",
    "RetryDriver",
    "RetryPolicy",
    "QuoteService",
]
