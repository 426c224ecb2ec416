"""
BeerBarBrewery Backend - Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for client errors and server faults.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       `{"message": ..., "statusCode": ...}` JSON responses.
Who:   Raised by route handlers (validation, not-found) and by the services
       when a commit fails (DatabaseError).
When:  During request processing.

Exception Hierarchy:
    BeerBarBreweryError (base)   → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error (generic message)

Repositories and services never raise for an ordinary "not found": they
return None / False / an empty list, and the route layer decides whether that
becomes a NotFoundError.
"""

from typing import Any, Dict, Optional


class BeerBarBreweryError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BeerBarBreweryError):
    """
    Raised when client input fails validation.

    When:    Non-positive ids, malformed range queries, invalid assignment ids.
    HTTP:    400 Bad Request

    Body and query parsing errors detected by FastAPI itself arrive as
    RequestValidationError and are mapped to the same 400 shape in main.py.
    """

    status_code = 400

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


class NotFoundError(BeerBarBreweryError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/beer/{id} with an unknown id, an empty listing, or an
             assignment whose bar/brewery or beer is missing.
    HTTP:    404 Not Found

    The message is either given explicitly or built from resource/resource_id.
    """

    status_code = 404

    def __init__(
        self,
        message: Optional[str] = None,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found."
            if resource_id is not None:
                message = f"{resource} with ID {resource_id} not found."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(BeerBarBreweryError):
    """
    Raised by the services when committing staged work fails, e.g. on a
    foreign-key violation. See app.services.common.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Constraint
        names and SQL are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
