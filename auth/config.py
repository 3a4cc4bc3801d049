"""
Configuration for the auth module.

The token is derived from the wall clock, not stored. Both sides format the
current local time to minute resolution with the same pattern, so there is
no secret to exchange.
"""

# strftime pattern of the token body, e.g. "2024-01-01T12:30"
TOKEN_FORMAT: str = "%Y-%m-%dT%H:%M"

AUTH_HEADER: str = "Authorization"
BEARER_PREFIX: str = "Bearer "
