"""Alpha Vantage daily time series client."""

import json
import logging
import re
from datetime import date
from http import HTTPStatus
from typing import Any, Optional
from urllib.parse import urlsplit

import requests
import urllib3
from pydantic import BaseModel, ConfigDict, Field, field_validator

from quote_proxy.config.settings import Settings
from quote_proxy.domain.models import DayQuote, QuoteDocument
from quote_proxy.providers.quote_provider import FetchResult

logger = logging.getLogger(__name__)

# The provider's default "compact" output holds the latest 100 days
COMPACT_OUTPUT_DAYS = 100

_REQUEST_HEADERS = {
    "accept": "application/json",
    "cache-control": "no-cache",
    "upgrade-insecure-requests": "1",
}

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class AlphaVantageEnvelope(BaseModel):
    """
    Top-level shape of a TIME_SERIES_DAILY response.

    Errors and throttling notices arrive with HTTP 200 and no series, so
    those keys are modelled too.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    meta_data: dict[str, Any] = Field(default_factory=dict, alias="Meta Data")
    time_series: dict[str, dict[str, Any]] = Field(
        default_factory=dict, alias="Time Series (Daily)"
    )
    error_message: Optional[str] = Field(default=None, alias="Error Message")
    note: Optional[str] = Field(default=None, alias="Note")
    information: Optional[str] = Field(default=None, alias="Information")

    @field_validator("time_series")
    @classmethod
    def _validate_dates(cls, v: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        for day in v:
            # Calendar check on top of the shape check: 2023-02-30 is rejected
            if not _ISO_DATE.match(day):
                raise ValueError(f"invalid date key {day!r}")
            date.fromisoformat(day)
        return v

    def to_document(self) -> QuoteDocument:
        return QuoteDocument(
            metadata=self.meta_data,
            day_quotes={
                day: DayQuote.from_payload(record)
                for day, record in self.time_series.items()
            },
        )


class AlphaVantageQuoteProvider:
    """
    Fetches the configured symbol's daily series from Alpha Vantage.

    One request per ``fetch()``; no retries. Failures are reported through
    the returned FetchResult rather than raised.
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self._settings = settings
        self._session = session or requests.Session()
        self._session.verify = not settings.insecure_skip_verify
        if settings.insecure_skip_verify:
            # One startup warning instead of urllib3's warning on every request
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            logger.warning("TLS verification of %s is disabled", self._host)

    @property
    def _host(self) -> str:
        return urlsplit(self._settings.base_url).netloc

    def _failure(self, action: str, e: Exception, status: int) -> FetchResult:
        # Exception text from requests embeds the query string, apikey included
        reason = f"{type(e).__name__} {action} {self._host}"
        logger.warning("quote server error: %s", reason)
        return FetchResult(None, status, reason=reason)

    def build_params(self) -> dict[str, str]:
        """Query parameters for one request."""
        params = {
            "function": self._settings.series_function,
            "symbol": self._settings.symbol,
            "apikey": self._settings.api_key,
        }
        # Only ask for the full history when the compact window is too short
        if self._settings.ndays > COMPACT_OUTPUT_DAYS:
            params["outputsize"] = "full"
        return params

    def fetch(self) -> FetchResult:
        try:
            response = self._session.get(
                self._settings.base_url,
                params=self.build_params(),
                headers=_REQUEST_HEADERS,
                timeout=self._settings.request_timeout_seconds,
                stream=True,
            )
        except requests.RequestException as e:
            return self._failure("contacting", e, HTTPStatus.BAD_REQUEST)

        try:
            body = response.content
        except requests.RequestException as e:
            return self._failure("reading body from", e, HTTPStatus.INTERNAL_SERVER_ERROR)
        finally:
            response.close()

        # An undecodable error page keeps the upstream status, so 401/403/404
        # still fail fast in the retry driver
        if response.status_code == HTTPStatus.OK:
            decode_status = HTTPStatus.INTERNAL_SERVER_ERROR
        else:
            decode_status = response.status_code

        try:
            payload = json.loads(body)
        except ValueError:
            logger.error("invalid JSON returned from quote server (%d)", response.status_code)
            return FetchResult(None, decode_status, reason="invalid JSON")

        try:
            envelope = AlphaVantageEnvelope.model_validate(payload)
            document = envelope.to_document()
        except ValueError as e:
            logger.error("error decoding quote server response: %s", e)
            return FetchResult(None, decode_status, reason="unexpected response shape")

        if not envelope.time_series:
            if envelope.error_message:
                return FetchResult(
                    None,
                    HTTPStatus.BAD_GATEWAY,
                    reason=envelope.error_message,
                    permanent=True,
                )
            notice = envelope.note or envelope.information
            if notice:
                return FetchResult(None, HTTPStatus.TOO_MANY_REQUESTS, reason=notice)

        return FetchResult(document, response.status_code)
