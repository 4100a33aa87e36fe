"""
Custom exception hierarchy for the storefront discovery backend.

Exceptions are categorized as:
- NonRetryableError: deployment or caller mistakes (missing config, bad input)
- UpstreamError: Typesense, Shopify or Gemini unreachable or erroring

Routes and the registered exception handlers translate these into HTTP
responses; clients and services never raise HTTPException themselves.
"""
from typing import Optional


class StorefrontDiscoveryException(Exception):
    """Base exception for the storefront discovery backend."""
    pass


# ============================================
# NON-RETRYABLE ERRORS
# ============================================
class NonRetryableError(StorefrontDiscoveryException):
    """
    Base class for errors where retrying won't help.

    - Missing configuration (needs a deployment fix)
    - Invalid caller input
    """
    pass


class ConfigurationError(NonRetryableError):
    """A required configuration value is missing or malformed."""
    def __init__(self, missing_field: str, message: Optional[str] = None):
        self.missing_field = missing_field
        super().__init__(message or f"{missing_field} is not set")


class ValidationError(NonRetryableError):
    """Invalid caller-supplied input."""
    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message or f"Missing {field}"
        super().__init__(self.message)


# ============================================
# UPSTREAM ERRORS
# ============================================
class UpstreamError(StorefrontDiscoveryException):
    """
    Error from an external service (Typesense, Shopify, Gemini).

    Search surfaces it as a failure; suggestions and history expansion
    degrade to an empty or bare result instead.
    """
    def __init__(self, service: str, message: str, status_code: Optional[int] = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service} API error: {message}")


class ConnectionTimeoutError(UpstreamError):
    """Connection or read timeout talking to an external service."""
    def __init__(self, service: str, message: str = "request timed out"):
        super().__init__(service, message)


class SearchError(UpstreamError):
    """The primary search could not be answered. No partial results exist."""
    reason = "Search failed"

    def __init__(self, status_code: Optional[int] = None):
        super().__init__("Typesense", self.reason, status_code)
