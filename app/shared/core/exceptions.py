# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the medicine marketplace uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy rooted at MarketplaceAPIException: each type fixes its HTTP status and
# error code, collects structured details, and renders the {success, message, details?} envelope.
# 🔗 Dependencies:
# FastAPI status codes, typing
# 🔄 Connected Modules / Calls From:
# Handlers and repositories (raise), app.api.middleware.error_handling (render)

from typing import Any, Dict, List, Optional, Union

from fastapi import status

ErrorDetails = Union[Dict[str, Any], List[Any]]


def _collect(details: Optional[Dict[str, Any]], **fields: Any) -> Dict[str, Any]:
    """Merge the non-empty keyword fields into a copy of details."""
    merged = dict(details or {})
    merged.update({key: value for key, value in fields.items() if value is not None})
    return merged


class MarketplaceAPIException(Exception):
    """
    Base exception class for the marketplace API.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[ErrorDetails] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details if details is not None else {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    @property
    def exposes_details(self) -> bool:
        """Client errors carry details meant for the caller."""
        return self.status_code < 500 and bool(self.details)

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        """
        Convert exception to the response envelope.

        Args:
            include_details: Force details into the payload even for server
                errors (development mode only)

        Returns:
            Dict: {"success": False, "message": ..., "details"?: ...}
        """
        body: Dict[str, Any] = {"success": False, "message": self.message}
        if self.details and (include_details or self.exposes_details):
            body["details"] = self.details
        return body


# =============================================================================
# REQUEST EXCEPTIONS (4xx)
# =============================================================================

class ValidationError(MarketplaceAPIException):
    """
    Input rejected before any work was done.

    Details are a list of {"field", "message"} entries; passing only
    ``field`` produces a single entry carrying the message.
    """

    def __init__(
        self,
        message: str = "Validation error",
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None
    ):
        entries = list(errors or [])
        if field and not entries:
            entries.append({"field": field, "message": message})

        super().__init__(message, status.HTTP_400_BAD_REQUEST, entries, "VALIDATION_ERROR")


class InvalidIdError(MarketplaceAPIException):
    """A path identifier that is not a 24-character hex ObjectId."""

    def __init__(self, message: str = "Invalid ID format", resource_id: Optional[str] = None):
        super().__init__(
            message,
            status.HTTP_400_BAD_REQUEST,
            _collect(None, id=resource_id),
            "INVALID_ID"
        )


class NotFoundError(MarketplaceAPIException):
    """
    Well-formed id with no matching document.

    The envelope is just the message; the resource fields are kept for logs.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None
    ):
        super().__init__(
            message,
            status.HTTP_404_NOT_FOUND,
            _collect(None, resource_type=resource_type, resource_id=resource_id),
            "NOT_FOUND"
        )

    @property
    def exposes_details(self) -> bool:
        return False


class MedicineNotFoundError(NotFoundError):
    def __init__(self, medicine_id: str, message: str = "Medicine not found"):
        super().__init__(message, resource_type="medicine", resource_id=medicine_id)


class PromptNotFoundError(NotFoundError):
    def __init__(self, prompt_id: str, message: str = "Prompt not found"):
        super().__init__(message, resource_type="prompt", resource_id=prompt_id)


class RateLimitError(MarketplaceAPIException):
    """Too many AI requests from one client, or Gemini throttling us."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        limit: Optional[str] = None,
        retry_after: Optional[int] = None
    ):
        super().__init__(
            message,
            status.HTTP_429_TOO_MANY_REQUESTS,
            _collect(None, limit=limit, retry_after=retry_after),
            "RATE_LIMIT_EXCEEDED"
        )


# =============================================================================
# GENERATIVE MODEL EXCEPTIONS
# =============================================================================

class ExternalAPIError(MarketplaceAPIException):
    """
    A call to the generative model failed.

    ``service_response`` holds the upstream error text; it only reaches
    the client when error details are exposed (development with DEBUG).
    """

    def __init__(
        self,
        message: str = "External API error",
        service: Optional[str] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        service_response: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            status_code,
            _collect(details, service=service, service_response=service_response or None),
            "EXTERNAL_API_ERROR"
        )


class AIAuthenticationError(ExternalAPIError):
    """Raised when the model provider rejects or lacks an API key."""

    def __init__(self, message: str = "Invalid or missing API key", service: Optional[str] = "gemini"):
        super().__init__(message, service=service, status_code=status.HTTP_401_UNAUTHORIZED)
        self.error_code = "AI_AUTHENTICATION_ERROR"

    @property
    def exposes_details(self) -> bool:
        return False


class AITimeoutError(ExternalAPIError):
    """Raised when the model call exceeds its configured time bound."""

    def __init__(
        self,
        message: str = "AI service timed out",
        service: Optional[str] = "gemini",
        timeout_seconds: Optional[float] = None
    ):
        super().__init__(
            message,
            service=service,
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            details=_collect(None, timeout_seconds=timeout_seconds)
        )
        self.error_code = "AI_TIMEOUT"


# =============================================================================
# STORAGE EXCEPTIONS
# =============================================================================

class DatabaseError(MarketplaceAPIException):
    """MongoDB connection-level failure (unreachable, not initialized)."""

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            _collect(details, operation=operation),
            "DATABASE_ERROR"
        )


class RepositoryError(MarketplaceAPIException):
    """A driver error raised inside a repository method."""

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None
    ):
        super().__init__(
            message,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            _collect(None, operation=operation, entity=entity),
            "REPOSITORY_ERROR"
        )
