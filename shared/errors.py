"""
Shared error handling for the club site service.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str


class SiteException(Exception):
    """Base exception for site services."""

    status_code: int = 400

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(message=self.message)


class ValidationError(SiteException):
    """Caller input errors."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class AuthenticationError(SiteException):
    """Authentication-related errors."""

    status_code = 401

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHENTICATION_ERROR", message, details)


class NotFoundError(SiteException):
    """Requested content does not exist."""

    status_code = 404

    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__("NOT_FOUND", message, details)


class ConfigurationError(SiteException):
    """A required setting is missing."""

    status_code = 500

    def __init__(self, message: str = "Service is not configured", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class ExternalServiceError(SiteException):
    """External service errors."""

    status_code = 500

    def __init__(
        self,
        service: str,
        message: str = "External service error",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.service = service
        super().__init__("EXTERNAL_SERVICE_ERROR", message, details, status_code)

    def __str__(self) -> str:
        return f"{self.service}: {self.message}"


class ContentQueryError(ExternalServiceError):
    """Content API query failed (transport, status, or GraphQL errors)."""

    def __init__(self, message: str = "Content query failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("content_api", message, details)
