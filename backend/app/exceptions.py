"""
Todo API Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions mapped to HTTP responses.
How:   Each exception carries a user-facing `message` and a `context` dict.
       Global handlers registered in main.py translate them into JSON bodies
       with the matching status code. `context` is logged, and only returned
       to the client where the handler says so.

Exception Hierarchy:
    TodoAPIError (base)     → 500 Internal Server Error
    ├── ValidationError     → 400 Bad Request
    ├── NotFoundError       → 404 Not Found
    └── DatabaseError       → 500 Internal Server Error (generic message)
"""

from typing import Any, Dict, Optional


class TodoAPIError(Exception):
    """
    Base exception for all Todo API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TodoAPIError):
    """
    Raised when input passes schema validation but breaks a business rule.

    Schema problems (wrong types, missing fields) never get this far:
    FastAPI rejects them with 422 before the route handler runs.
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


class NotFoundError(TodoAPIError):
    """
    Raised when a requested resource does not exist.

    When:  PUT or DELETE against a todo id that is not in the store.
    HTTP:  404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(TodoAPIError):
    """
    Raised when a database operation fails unexpectedly.

    The client always receives a generic message. The SQLAlchemy error type
    and the operation involved go into `context` and are logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
