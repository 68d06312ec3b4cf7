"""Quote provider protocol and base types."""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Optional, Protocol

from quote_proxy.domain.models import QuoteDocument


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of a single upstream call.

    ``status_code`` is the provider's own HTTP status on a decoded response,
    or a local status describing why no document could be produced.
    ``permanent`` marks failures that retrying cannot fix.
    """

    document: Optional[QuoteDocument]
    status_code: int
    reason: str = ""
    permanent: bool = False

    @property
    def ok(self) -> bool:
        return self.status_code == HTTPStatus.OK and self.document is not None


class QuoteProvider(Protocol):
    """
    Protocol for daily quote providers.

    Implementations perform exactly one upstream request per call and never
    retry; that is the RetryDriver's job.
    """

    def fetch(self) -> FetchResult:
        """Fetch the configured symbol's daily series."""
        ...
