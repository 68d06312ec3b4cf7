"""Turns unhandled route exceptions into a logged 500."""

import logging
from http import HTTPStatus

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class RecoveryMiddleware(BaseHTTPMiddleware):
    """
    Turns any exception escaping a route into a 500 response.

    The fault is logged once; the failing request's task ends there and the
    server keeps serving other requests.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("panic: %s", exc, exc_info=exc)
            return PlainTextResponse(
                HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            )
