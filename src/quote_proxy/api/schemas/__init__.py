"""API schemas package."""

from quote_proxy.api.schemas.error import ErrorResponse

__all__ = [
    "ErrorResponse",
]
