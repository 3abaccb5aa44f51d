"""
Shared error handling for the CRPT access client.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import request_id_var


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class CrptClientException(Exception):
    """Base exception for the CRPT access client."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id_var.get(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class ConfigurationError(CrptClientException):
    """Invalid construction parameters or settings."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class NotAuthenticatedError(CrptClientException):
    """Submission attempted before a bearer token was obtained."""

    def __init__(
        self,
        message: str = "Authentication token is missing. Call authenticate() first.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__("NOT_AUTHENTICATED", message, details)


class RateLimitExceededError(CrptClientException):
    """No permit was available in the current window."""

    def __init__(
        self,
        message: str = "Request rate limit exceeded. Try again later.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__("RATE_LIMIT_EXCEEDED", message, details)


class TransportError(CrptClientException):
    """The remote service could not be reached (connect, timeout, broken transfer)."""

    def __init__(self, message: str = "Transport failure", details: Optional[Dict[str, Any]] = None):
        super().__init__("TRANSPORT_ERROR", message, details)


class ApiError(CrptClientException):
    """The remote service answered with an error."""

    def __init__(self, status_code: int, message: str, details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        details = {"status_code": status_code, **(details or {})}
        super().__init__("API_ERROR", message, details)


class DeserializationError(CrptClientException):
    """A successful response body did not match the expected shape."""

    def __init__(self, message: str = "Unexpected response body", details: Optional[Dict[str, Any]] = None):
        super().__init__("DESERIALIZATION_ERROR", message, details)


class ClientClosedError(CrptClientException):
    """The client was shut down and can no longer schedule work."""

    def __init__(self, message: str = "Client has been shut down", details: Optional[Dict[str, Any]] = None):
        super().__init__("CLIENT_CLOSED", message, details)
