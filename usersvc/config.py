"""
Runtime configuration for the user service
==========================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.
The store seed is the exception: the storage factory reads USERSVC_SEED
lazily so tests can change it per test.

Provider
--------
- USERSVC_SEED       : "default" (sally), "empty" or path to a JSON seed file
- USERSVC_HOST       : bind address for `python main.py` (default 127.0.0.1)
- USERSVC_PORT       : bind port (default 8080)
- USERSVC_LOG_LEVEL  : logging level name (default INFO; unknown names fall back to INFO)

Consumer
--------
- USERSVC_BASE_URL   : provider base URL used by fetch_user.py
"""

import logging
import os

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
CORRELATION_HEADER = "X-Api-Correlation-Id"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


class _Settings:
    # -------- Provider --------
    HOST: str = os.getenv("USERSVC_HOST", "127.0.0.1")
    PORT: int = _get_int("USERSVC_PORT", 8080)
    LOG_LEVEL: str = _get_log_level("USERSVC_LOG_LEVEL", "INFO")

    # -------- Consumer --------
    BASE_URL: str = os.getenv("USERSVC_BASE_URL", "http://localhost:8080")


settings = _Settings()
