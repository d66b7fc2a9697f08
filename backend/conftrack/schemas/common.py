"""
ConfTrack Backend: Shared Schemas
=================================

What:  Error and health response formats used across all routes, and the
       base class of the PATCH bodies.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field, model_validator


class PartialUpdate(BaseModel):
    """
    Base for PATCH bodies: every field is optional, but a field the client
    sends explicitly may only be null if its column is nullable.

    Subclasses list those columns in `nullable_fields`.
    """
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class ErrorResponse(BaseModel):
    """
    Standardized error response for CRUD and health endpoints.

    Example:
        {
            "error": "not_found",
            "message": "Conference with ID '42' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
