"""Pydantic schemas for error responses."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Response schema for application errors."""

    error: str
    message: str
