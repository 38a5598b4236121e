"""
Core error classes for the CORS reconciler.
"""

from typing import Any


class CorsReconcilerError(Exception):
    """Base class for every error raised by the reconciler."""

    pass


class InvalidCorsConfigError(CorsReconcilerError):
    """Raised when a CORS configuration is missing required fields or is malformed."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class GatewayProviderError(CorsReconcilerError):
    """Raised when a gateway provider call fails for any reason other than not-found."""

    def __init__(self, message: str, code: str | None = None, operation: str | None = None) -> None:
        self.message = message
        self.code = code
        self.operation = operation
        super().__init__(f"{operation or 'gateway call'} failed ({code or 'unknown'}): {message}")


class GatewayResourceNotFoundError(GatewayProviderError):
    """Raised when the targeted method, resource or response does not exist."""

    pass
