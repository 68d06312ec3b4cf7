"""Dependency injection for FastAPI."""

from functools import lru_cache

from fastapi import Depends

from quote_proxy.config.settings import Settings, get_settings
from quote_proxy.providers import (
    AlphaVantageQuoteProvider,
    QuoteProvider,
    StubQuoteProvider,
)
from quote_proxy.services import QuoteService, RetryDriver, RetryPolicy


def get_app_settings() -> Settings:
    """Provide the process-wide Settings instance."""
    return get_settings()


@lru_cache(maxsize=1)
def _build_provider(settings: Settings) -> QuoteProvider:
    # One provider (and HTTP session) per settings object, shared by all requests
    if settings.quote_provider == "stub":
        return StubQuoteProvider(symbol=settings.symbol, ndays=settings.ndays)
    return AlphaVantageQuoteProvider(settings)


def get_quote_provider(settings: Settings = Depends(get_app_settings)) -> QuoteProvider:
    """Provide the configured QuoteProvider instance."""
    return _build_provider(settings)


def get_retry_driver(settings: Settings = Depends(get_app_settings)) -> RetryDriver:
    """Provide RetryDriver instance."""
    return RetryDriver(
        RetryPolicy(
            interval_seconds=settings.retry_interval_seconds,
            max_attempts=settings.retry_max_attempts,
        )
    )


def get_quote_service(
    settings: Settings = Depends(get_app_settings),
    provider: QuoteProvider = Depends(get_quote_provider),
    retry_driver: RetryDriver = Depends(get_retry_driver),
) -> QuoteService:
    """Provide QuoteService instance."""
    return QuoteService(
        provider=provider,
        retry_driver=retry_driver,
        n_days=settings.ndays,
    )
