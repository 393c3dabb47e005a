# 📄 File: garden_care/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the garden care core uses to say what went wrong,
# for example a missing plant name, a care profile the AI could not produce, or a database
# write that failed.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes, error
# details, and serialization so an outer transport layer can surface them unchanged.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, the HTTP client, application handlers

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class GardenCareException(Exception):
    """
    Base exception class for the garden care core.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=self.to_dict()["error"]
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(GardenCareException):
    """
    Exception raised for data validation failures.
    Raised before any side effect when a required field is missing or malformed.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(GardenCareException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


# =============================================================================
# GENERATION & STORAGE EXCEPTIONS
# =============================================================================

class GenerationError(GardenCareException):
    """
    Exception raised when the content generator fails or returns output that
    cannot be parsed into a care profile. Never cached, never retried.
    """

    def __init__(
        self,
        message: str = "Care profile generation failed",
        plant_name: Optional[str] = None,
        provider: Optional[str] = None,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if plant_name:
            details["plant_name"] = plant_name
        if provider:
            details["provider"] = provider
        if reason:
            details["reason"] = reason

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="GENERATION_ERROR"
        )


class StorageError(GardenCareException):
    """
    Exception raised when a record store write fails.
    Callers holding a freshly generated profile log it and carry on.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        operation: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if key:
            details["key"] = key

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="STORAGE_ERROR"
        )


class RepositoryError(GardenCareException):
    """
    Exception raised for repository/database operation failures.
    Used when database operations fail at the repository layer.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


# =============================================================================
# EXTERNAL API EXCEPTIONS
# =============================================================================

class ExternalAPIError(GardenCareException):
    """
    Exception raised when an external API call fails.
    """

    def __init__(
        self,
        message: str = "External API error",
        api_name: Optional[str] = None,
        status_code_received: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_502_BAD_GATEWAY,
        error_code: str = "EXTERNAL_API_ERROR"
    ):
        if not details:
            details = {}

        if api_name:
            details["api_name"] = api_name
        if status_code_received:
            details["status_code_received"] = status_code_received

        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code=error_code
        )


class APITimeoutError(ExternalAPIError):
    """Exception raised when an external API call times out."""

    def __init__(self, message: str = "External API timed out", api_name: Optional[str] = None):
        super().__init__(
            message=message,
            api_name=api_name,
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            error_code="API_TIMEOUT"
        )


class APIAuthenticationError(ExternalAPIError):
    """Exception raised when an external API rejects our credentials."""

    def __init__(self, message: str = "External API authentication failed", api_name: Optional[str] = None):
        super().__init__(
            message=message,
            api_name=api_name,
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="API_AUTHENTICATION_ERROR"
        )


class RateLimitError(ExternalAPIError):
    """
    Exception raised when an external API throttles us.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        api_name: Optional[str] = None,
        retry_after: Optional[int] = None
    ):
        details = {}
        if retry_after:
            details["retry_after"] = retry_after

        super().__init__(
            message=message,
            api_name=api_name,
            details=details,
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            error_code="RATE_LIMIT_EXCEEDED"
        )
