"""
Pytest configuration and fixtures for quote proxy tests.

This module provides:
- A sample provider payload (8 trading days of MSFT)
- Test settings that never read the process environment
- Scripted quote providers returning canned FetchResults
- A FastAPI test client with provider and retry overrides
"""

import copy
from http import HTTPStatus
from typing import Callable, Iterable, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from quote_proxy.api.deps import get_quote_provider, get_retry_driver
from quote_proxy.config.settings import Settings, reset_settings, set_settings
from quote_proxy.domain.models import QuoteDocument
from quote_proxy.main import create_app
from quote_proxy.providers import FetchResult
from quote_proxy.providers.alpha_vantage_provider import AlphaVantageEnvelope
from quote_proxy.services import RetryDriver, RetryPolicy


TEST_API_KEY = "TestApiKey"
TEST_SYMBOL = "TestSYM"
TEST_NDAYS = 5


def _day(open_, high, low, close, volume) -> dict:
    return {
        "1. open": open_,
        "2. high": high,
        "3. low": low,
        "4. close": close,
        "5. adjusted close": close,
        "6. volume": volume,
        "7. dividend amount": "0.0000",
        "8. split coefficient": "1.0",
    }


SAMPLE_PAYLOAD = {
    "Meta Data": {
        "1. Information": "Daily Time Series with Splits and Dividend Events",
        "2. Symbol": "MSFT",
        "3. Last Refreshed": "2023-02-02",
        "4. Output Size": "Compact",
        "5. Time Zone": "US/Eastern",
    },
    "Time Series (Daily)": {
        "2023-01-24": _day("242.5", "243.95", "240.44", "242.04", "40234444"),
        "2023-01-25": _day("234.48", "243.3", "230.9", "240.61", "66526641"),
        "2023-01-26": _day("243.65", "248.31", "242.0", "248.0", "33454491"),
        "2023-01-27": _day("258.82", "264.69", "257.25", "264.6", "3913618"),
        "2023-01-30": _day("244.51", "245.6", "242.2", "242.71", "25867365"),
        "2023-01-31": _day("243.45", "247.95", "242.945", "247.81", "26541072"),
        "2023-02-01": _day("248.0", "255.18", "245.47", "252.75", "31259912"),
        "2023-02-02": _day("258.82", "264.69", "257.25", "264.6", "39136189"),
    },
}

EXPECTED_DAYS_AVAILABLE = 8
EXPECTED_WINDOW = ["2023-01-27", "2023-01-30", "2023-01-31", "2023-02-01", "2023-02-02"]
EXPECTED_AVERAGE = "254.49"


def sample_payload() -> dict:
    """Return a fresh deep copy of the sample payload."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


def document_from_payload(payload: dict) -> QuoteDocument:
    """Decode a provider payload the same way the real client does."""
    return AlphaVantageEnvelope.model_validate(payload).to_document()


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


def make_settings(**overrides) -> Settings:
    """Build Settings from keyword arguments only (no .env file)."""
    values = {
        "api_key": TEST_API_KEY,
        "symbol": TEST_SYMBOL,
        "ndays": TEST_NDAYS,
        "retry_interval_seconds": 0,
        "retry_max_attempts": 3,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def test_settings() -> Settings:
    """Provide test Settings."""
    return make_settings()


# =============================================================================
# QUOTE FIXTURES
# =============================================================================


@pytest.fixture
def sample_document() -> QuoteDocument:
    """Provide the 8-day sample as a decoded QuoteDocument."""
    return document_from_payload(sample_payload())


class ScriptedQuoteProvider:
    """
    Quote provider that replays a fixed list of FetchResults.

    The last result repeats once the script runs out.
    """

    def __init__(self, results: Iterable[FetchResult]):
        self._results = list(results)
        self.calls = 0

    def fetch(self) -> FetchResult:
        index = min(self.calls, len(self._results) - 1)
        self.calls += 1
        return self._results[index]


def ok_result(document: Optional[QuoteDocument] = None) -> FetchResult:
    return FetchResult(document or document_from_payload(sample_payload()), HTTPStatus.OK)


def failed_result(status: int, reason: str = "", permanent: bool = False) -> FetchResult:
    return FetchResult(None, status, reason=reason, permanent=permanent)


class RecordingSleep:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


# =============================================================================
# API TEST CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def app(test_settings) -> FastAPI:
    """Provide a fresh application bound to test settings."""
    set_settings(test_settings)
    application = create_app()
    yield application
    application.dependency_overrides.clear()
    reset_settings()


@pytest.fixture
def use_provider(app, recording_sleep) -> Callable[[ScriptedQuoteProvider], ScriptedQuoteProvider]:
    """Route /quote through a scripted provider and a non-sleeping retry driver."""

    def _use(provider: ScriptedQuoteProvider) -> ScriptedQuoteProvider:
        app.dependency_overrides[get_quote_provider] = lambda: provider
        app.dependency_overrides[get_retry_driver] = lambda: RetryDriver(
            RetryPolicy(interval_seconds=30, max_attempts=3),
            sleep=recording_sleep,
        )
        return provider

    return _use


@pytest.fixture
def client(app) -> TestClient:
    """Provide FastAPI test client."""
    with TestClient(app) as c:
        yield c
