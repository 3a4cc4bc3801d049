from .client import USER_AGENT, ApiClient
from .errors import (
    ApiClientError,
    DecodeError,
    NotFoundError,
    UnauthorizedError,
    UnavailableError,
)

__all__ = [
    "USER_AGENT",
    "ApiClient",
    "ApiClientError",
    "DecodeError",
    "NotFoundError",
    "UnauthorizedError",
    "UnavailableError",
]
