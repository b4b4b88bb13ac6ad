"""Pydantic models for the local HTTP surface."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error response."""

    code: str
    message: str


class HandlerResponse(BaseModel):
    """Status code and body produced for one weather request."""

    status_code: int
    body: str = ""
