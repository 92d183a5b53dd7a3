"""
Bug Tracker Backend — Custom Exception Hierarchy
==================================================

What:  Defines application-specific exceptions for the failure kinds the API reports.
How:   Each exception class carries a client-safe message and an optional
       context dict. Global exception handlers (registered in main.py) catch
       these and return JSON error bodies with the matching HTTP status code.
Who:   Raised by BugService; caught by the global handlers.

Exception Hierarchy:
    BugTrackerError (base)       → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional

GENERIC_ERROR_MESSAGE = "Something went wrong"


class BugTrackerError(Exception):
    """
    Base exception for all Bug Tracker application errors.

    Attributes:
        message:  Client-facing error description (returned as `error` in the body)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = GENERIC_ERROR_MESSAGE,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BugTrackerError):
    """
    Raised when the request body cannot be read as a bug payload.

    When:    Body is not a JSON object, or a field has a non-string value.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid request body",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(BugTrackerError):
    """
    Raised when an update targets a bug that does not exist.

    When:    PUT /api/bugs/{id} with an unknown or malformed id.
    HTTP:    404 Not Found

    The store reports a missing record as None; BugService converts that
    None into this exception so routes stay free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "Bug",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id


class DatabaseError(BugTrackerError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost, constraint violation, driver error.
    HTTP:    500 Internal Server Error

    The client always receives the generic message; the underlying error
    type and text live in `context` and are logged server-side only.
    """

    def __init__(
        self,
        message: str = GENERIC_ERROR_MESSAGE,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
