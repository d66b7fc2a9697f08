"""
ConfTrack Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions, each tagged with an ErrorKind.
How:   Each exception carries a user-safe message and a context dict that is
       logged but never returned. Global handlers in main.py map them to
       HTTP responses.
Who:   Raised by repositories and services; caught by global handlers.

Exception Hierarchy:
    ConfTrackError (base)
    ├── ValidationError            → 400 Bad Request        [validation]
    ├── NotFoundError              → 404 Not Found          [not_found]
    ├── DatabaseError              → 500 Internal Error     [persistence_unavailable]
    │   └── ConstraintViolationError → 409 Conflict         [persistence_unavailable]
    └── WebhookProcessingError     → 404 + webhook envelope [kind of the cause]
"""

import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    """Internal failure taxonomy shared by CRUD and webhook paths."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence_unavailable"


class ConfTrackError(Exception):
    """
    Base exception for all ConfTrack application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
        kind:     ErrorKind tag used for logging and structured webhook errors
    """

    kind: ErrorKind = ErrorKind.PERSISTENCE

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ConfTrackError):
    """
    Raised when client input fails a business-level check.

    When:    Non-numeric identifier, unparseable timestamp.
    HTTP:    400 Bad Request. Schema-level problems are still FastAPI's 422.
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ConfTrackError):
    """
    Raised when a requested row does not exist.

    The message names the entity and the id, e.g.
    "Conference with ID '42' was not found".
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(ConfTrackError):
    """
    Raised when a datastore call fails or exceeds its time bound.

    The client always gets a generic message; driver details stay in the logs.
    """

    kind = ErrorKind.PERSISTENCE

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConstraintViolationError(DatabaseError):
    """
    Raised on integrity errors: a foreign key pointing at a missing row, or a
    delete blocked by ON DELETE RESTRICT while dependents exist.
    """

    def __init__(
        self,
        message: str = "The operation conflicts with related records.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class WebhookProcessingError(ConfTrackError):
    """
    Raised when a recording.started event could not be reconciled.

    Every underlying failure collapses into this one class with a fixed
    message; the original kind is kept on the instance for logging and for
    the optional structured error code.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str = "Failed to process recording start event.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.kind = kind
