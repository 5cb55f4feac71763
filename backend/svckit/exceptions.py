"""
svckit: Custom Exception Hierarchy
=====================================

What:  Application-specific exceptions for the two error tiers.
How:   Each exception carries a message and optional context dict.
       Domain errors are raised by services and copied into response
       models by the endpoints. Transport errors are caught by the
       global handlers registered in main.py.

Exception Hierarchy:
    SvcKitError (base)
    ├── MalformedRequestError   → 400 Bad Request (body could not be decoded)
    ├── EmptyInputError         → embedded as `err` (uppercase of "")
    └── NotFoundError           → embedded as `err` (strict catalog lookup)
"""

from typing import Any, Dict, Optional


class SvcKitError(Exception):
    """
    Base exception for all svckit application errors.

    Attributes:
        message:  Error description; for domain errors this is the exact
                  text placed in a response's `err` field
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


class MalformedRequestError(SvcKitError):
    """
    Raised when a request body cannot be decoded into the operation's input.

    What:    Invalid JSON, an empty body, or a JSON type mismatch.
    When:    Before any endpoint runs; this is the only failure that
             short-circuits a transport binding.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "malformed_request",
            "message": "Request body could not be decoded as UppercaseRequest",
            "details": {"errors": [{"loc": ["s"], "msg": "Input should be a valid string", ...}]}
        }
    """

    def __init__(
        self,
        message: str = "Request body could not be decoded",
        errors: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if errors:
            ctx["errors"] = errors
        super().__init__(message=message, context=ctx)
        self.errors = errors or []


class EmptyInputError(SvcKitError):
    """Raised by StringService.uppercase for an empty input string."""

    def __init__(
        self,
        message: str = "empty string",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(SvcKitError):
    """
    Raised when a requested resource does not exist.

    Only raised by the catalog when strict lookup is enabled; otherwise a
    miss answers with a zero-valued Book.
    """

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
