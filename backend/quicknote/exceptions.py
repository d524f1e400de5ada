"""
QuickNote Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the three ways a request can fail.
Why:   Services raise domain errors; global handlers in main.py translate them
       into HTTP status codes and a small JSON body, so routes stay free of
       try/except blocks.
How:   Each exception carries a user-facing message and an optional context
       dict. The message is returned to the client; the context is only logged.

Exception Hierarchy:
    QuickNoteError (base)        → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── AIUnavailableError       → 500 Internal Server Error (generic message)
"""

from typing import Any, Dict, Optional


class QuickNoteError(Exception):
    """
    Base exception for all QuickNote application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickNoteError):
    """
    Raised when client input fails validation.

    When:    Empty note content, empty correction text, malformed body.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Content is required"}
    """

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


class NotFoundError(QuickNoteError):
    """
    Raised when a requested resource does not exist.

    When:    DELETE /api/notes/{id} with an id the store never issued
             (or already deleted).
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class AIUnavailableError(QuickNoteError):
    """
    Raised when the external text-completion service fails.

    What:    Network error, non-2xx answer, blocked or malformed response.
    HTTP:    500 Internal Server Error

    The call is never retried. The message is generic ("Failed to correct
    text"); the underlying error is logged with the context dict only.
    """

    def __init__(
        self,
        message: str = "AI service is unavailable",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation
