"""Trimmed quote endpoint."""

from fastapi import APIRouter, Depends, Response

from quote_proxy.api.deps import get_quote_service
from quote_proxy.api.schemas import ErrorResponse
from quote_proxy.services import QuoteService

router = APIRouter(tags=["quote"])


@router.get(
    "/quote",
    responses={
        400: {"model": ErrorResponse, "description": "Insufficient data or malformed price"},
        500: {"model": ErrorResponse, "description": "Response could not be encoded"},
        502: {"model": ErrorResponse, "description": "Quote provider rejected the request"},
        503: {"model": ErrorResponse, "description": "Quote provider unavailable"},
    },
)
def get_quote(service: QuoteService = Depends(get_quote_service)) -> Response:
    """
    Get the configured symbol's most recent daily quotes with their average close.

    Sync on purpose: the retry driver sleeps between attempts, and FastAPI
    runs sync endpoints in its worker thread pool.
    """
    return Response(
        content=service.get_trimmed_quote_json(),
        media_type="application/json",
    )
