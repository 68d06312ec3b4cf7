"""Request middleware chain shared by every route."""

from fastapi import FastAPI

from quote_proxy.middleware.method_validator import MethodValidatorMiddleware
from quote_proxy.middleware.request_logger import RequestLoggerMiddleware
from quote_proxy.middleware.recovery import RecoveryMiddleware

# Outermost first
MIDDLEWARE_CHAIN = (
    MethodValidatorMiddleware,
    RequestLoggerMiddleware,
    RecoveryMiddleware,
)


def install_middleware(app: FastAPI) -> None:
    """Register the chain so requests pass through it in MIDDLEWARE_CHAIN order."""
    # add_middleware wraps the existing stack, so the last one added runs first
    for middleware in reversed(MIDDLEWARE_CHAIN):
        app.add_middleware(middleware)


__all__ = [
    "MIDDLEWARE_CHAIN",
    "MethodValidatorMiddleware",
    "RequestLoggerMiddleware",
    "RecoveryMiddleware",
    "install_middleware",
]
