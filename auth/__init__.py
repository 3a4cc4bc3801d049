"""
Auth package for the user service.

Provides the time-bound bearer token check used by the request pipeline.
Designed to be importable by both the provider and consumers that need to
mint the same token.
"""

from .service import current_minute_token, expected_authorization, is_authorized

__all__ = ["current_minute_token", "expected_authorization", "is_authorized"]
