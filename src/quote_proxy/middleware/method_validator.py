"""Rejects non-GET requests before they reach a route."""

from http import HTTPStatus

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

# An empty method is treated as GET
ALLOWED_METHODS = frozenset({"", "GET"})


class MethodValidatorMiddleware(BaseHTTPMiddleware):
    """Rejects every method other than GET before routing."""

    async def dispatch(self, request: Request, call_next):
        if request.method in ALLOWED_METHODS:
            return await call_next(request)
        return PlainTextResponse(
            HTTPStatus.METHOD_NOT_ALLOWED.phrase,
            status_code=HTTPStatus.METHOD_NOT_ALLOWED,
        )
