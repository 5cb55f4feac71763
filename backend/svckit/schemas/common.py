"""
svckit: Error and Health Schemas
===================================

What:  Bodies that are not tied to a single call unit: the uniform error
       format used by the global exception handlers, and GET /health.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error body for transport-level failures.

    Domain errors never use this format; they travel inside the normal
    response as `err`.

    Example:
        {
            "error": "malformed_request",
            "message": "Request body could not be decoded as CountRequest",
            "details": {"errors": [...]},
            "request_id": "1f0c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    books: int = Field(description="Number of books currently in the catalog")
    uptime_seconds: float = Field(description="Seconds since service started")
