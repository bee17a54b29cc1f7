"""Schemas shared by several endpoints."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str


class HealthStatus(BaseModel):
    status: str
    version: str
    timestamp: int
