"""
Core authentication logic.

This module derives the expected bearer credential from the current minute
and validates inbound `Authorization` header values against it.

Rollover:
    There is no tolerance window. A token minted at 12:30:59 and checked at
    12:31:00 is rejected, because the expected value has moved on.
"""

import secrets
from datetime import datetime
from typing import Optional

from .config import BEARER_PREFIX, TOKEN_FORMAT


def current_minute_token(now: Optional[datetime] = None) -> str:
    """
    Return the token for the minute containing `now` (default: local time).

    Args:
        now (datetime, optional): Instant to derive the token from.

    Returns:
        str: e.g. "2024-01-01T12:30".
    """
    if now is None:
        now = datetime.now()
    return now.strftime(TOKEN_FORMAT)


def expected_authorization(now: Optional[datetime] = None) -> str:
    """Return the full header value the provider accepts at `now`."""
    return BEARER_PREFIX + current_minute_token(now)


def is_authorized(header_value: Optional[str], now: Optional[datetime] = None) -> bool:
    """
    Check an `Authorization` header value by exact match.

    Args:
        header_value (str | None): Raw header value; None when absent.
        now (datetime, optional): Instant of the check.

    Returns:
        bool: True only if the value equals "Bearer " + the current minute token.
    """
    if not header_value:
        return False
    expected = expected_authorization(now)
    return secrets.compare_digest(header_value.encode("utf-8"), expected.encode("utf-8"))
