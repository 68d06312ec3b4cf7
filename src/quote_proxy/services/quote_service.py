"""Quote service: fetch, trim and encode the configured symbol's series."""

import logging

from quote_proxy.domain.models import QuoteDocument
from quote_proxy.providers.quote_provider import QuoteProvider
from quote_proxy.services.quote_trimmer import serialize_quote, trim_quote
from quote_proxy.services.retry import RetryDriver

logger = logging.getLogger(__name__)


class QuoteService:
    """
    Service behind the /quote endpoint.

    Wraps the provider with the retry driver, then trims the fetched series
    to the configured window.
    """

    def __init__(
        self,
        provider: QuoteProvider,
        retry_driver: RetryDriver,
        n_days: int,
    ):
        self._provider = provider
        self._retry_driver = retry_driver
        self._n_days = n_days

    def get_trimmed_quote(self) -> QuoteDocument:
        """Fetch the series and keep the most recent window."""
        document = self._retry_driver.until_success(self._provider.fetch)
        logger.debug(
            "fetched %d days, keeping %d", document.days_available, self._n_days
        )
        return trim_quote(document, self._n_days)

    def get_trimmed_quote_json(self) -> str:
        """Same as get_trimmed_quote, encoded as the response body."""
        return serialize_quote(self.get_trimmed_quote())
