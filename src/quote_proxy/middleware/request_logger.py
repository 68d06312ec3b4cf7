"""Per-request access log line with elapsed time."""

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Logs method, URL and elapsed time of every request, whatever the outcome."""

    def __init__(self, app: ASGIApp, clock: Callable[[], float] = time.perf_counter):
        super().__init__(app)
        self._clock = clock

    async def dispatch(self, request: Request, call_next):
        start = self._clock()
        try:
            return await call_next(request)
        finally:
            elapsed_ms = (self._clock() - start) * 1000
            logger.info('[%s] "%s" %.3fms', request.method, request.url, elapsed_ms)
