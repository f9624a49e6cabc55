"""Error types shared by the GraphQL resolvers and the REST proxy.

Only configuration and transport problems raise. Shape surprises in upstream
payloads are absorbed by the normalizers, and a cache miss is just ``None``.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in REST error envelopes."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    RATE_LIMITED = "RATE_LIMITED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    API_ERROR = "API_ERROR"


class AppError(BaseModel):
    """Error payload rendered inside ``{"success": false, "error": ...}``."""

    code: ErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Technical error message")
    user_message: str = Field(..., description="Message safe to show end users")


class GatewayError(Exception):
    """Base class for errors the gateway reports to its callers."""

    code = ErrorCode.API_ERROR
    status_code = 500
    user_message = "Something went wrong. Please try again."

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_app_error(self) -> AppError:
        return AppError(code=self.code, message=self.message, user_message=self.user_message)


class ConfigurationError(GatewayError):
    """A provider credential is missing. Raised before any network call."""

    code = ErrorCode.CONFIGURATION_ERROR
    user_message = "This feature is not configured on the server."

    def __init__(self, variable: str) -> None:
        super().__init__(f"{variable} not configured")
        self.variable = variable


class UpstreamError(GatewayError):
    """A third-party provider answered with non-2xx or did not answer at all."""

    code = ErrorCode.UPSTREAM_ERROR
    user_message = "The data provider is unavailable. Please try again later."

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.upstream_status = status_code
        # No upstream status means timeout or connection failure.
        self.status_code = status_code or 502


class RateLimitError(GatewayError):
    code = ErrorCode.RATE_LIMITED
    status_code = 429
    user_message = "Rate limit exceeded. Please try again later."

    def __init__(self) -> None:
        super().__init__("Rate limit exceeded. Please try again later.")


class InvalidRequestError(GatewayError):
    """Bad or missing request parameters, or an unknown proxy route."""

    code = ErrorCode.VALIDATION_ERROR
    status_code = 400
    user_message = "Invalid request. Please check your input."

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code
        if status_code == 404:
            self.code = ErrorCode.NOT_FOUND
