"""Retry driver around a single upstream fetch."""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from quote_proxy.core.exceptions import UpstreamPermanentError, UpstreamUnavailableError
from quote_proxy.domain.models import QuoteDocument
from quote_proxy.providers.quote_provider import FetchResult

logger = logging.getLogger(__name__)

# Statuses a retry cannot fix (bad API key, forbidden, unknown endpoint)
PERMANENT_STATUSES = frozenset({401, 403, 404})


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-interval, bounded retry policy."""

    interval_seconds: float = 30.0
    max_attempts: int = 5
    permanent_statuses: frozenset[int] = field(default=PERMANENT_STATUSES)

    def is_permanent(self, result: FetchResult) -> bool:
        return result.permanent or result.status_code in self.permanent_statuses


class RetryDriver:
    """
    Calls a fetch function until it succeeds.

    Waits ``policy.interval_seconds`` between attempts, with no backoff.
    Gives up immediately on a permanent failure and after
    ``policy.max_attempts`` retryable ones. The wait blocks the calling
    thread only.
    """

    def __init__(
        self,
        policy: RetryPolicy,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._policy = policy
        self._sleep = sleep

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def until_success(self, fetch: Callable[[], FetchResult]) -> QuoteDocument:
        """
        Return the first successfully fetched document.

        Raises:
            UpstreamPermanentError: the provider rejected the request.
            UpstreamUnavailableError: every allowed attempt failed.
        """
        max_attempts = self._policy.max_attempts
        result = None
        for attempt in range(1, max_attempts + 1):
            result = fetch()
            if result.ok:
                return result.document

            logger.warning(
                "remote service response: %d %s (attempt %d/%d)",
                result.status_code,
                result.reason,
                attempt,
                max_attempts,
            )
            if self._policy.is_permanent(result):
                raise UpstreamPermanentError(result.status_code, result.reason)
            if attempt < max_attempts:
                self._sleep(self._policy.interval_seconds)

        raise UpstreamUnavailableError(max_attempts, result.status_code)
