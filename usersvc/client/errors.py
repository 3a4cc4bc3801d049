"""
Errors raised by ApiClient.

Callers branch on these classes instead of on status codes or httpx
exceptions. The underlying cause, when there is one, is chained.
"""


class ApiClientError(Exception):
    """Base class for every classified client error."""


class NotFoundError(ApiClientError):
    """The requested resource does not exist (HTTP 404)."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class UnauthorizedError(ApiClientError):
    """The provider rejected the credential (HTTP 401)."""

    def __init__(self, message: str = "unauthorized") -> None:
        super().__init__(message)


class UnavailableError(ApiClientError):
    """The provider could not be reached or answered with something unusable."""

    def __init__(self, message: str = "api unavailable") -> None:
        super().__init__(message)


class DecodeError(ApiClientError):
    """A response body could not be decoded into the expected shape."""
