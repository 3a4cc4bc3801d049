"""
Main API module for the user service.

Responsibilities:
    - Expose read-only endpoints for single-user and all-user lookups
    - Wrap the user routes in the request pipeline (correlation id, then auth)
    - Serialize users with the wire field names shared with the client

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The store is reached through a StoreHandle injected at construction;
      scenarios swap the handle's store instead of mutating it.
    - The clock used by the auth gate is injectable so tests can pin tokens.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    an injected store handle, and ordered middleware for tagging and auth."
"""

import logging
import re
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from usersvc.config import JSON_CONTENT_TYPE, settings
from usersvc.pipeline import RequestPipeline
from usersvc.storage import BaseUserStore, StoreHandle
from usersvc.storage.storage_factory import get_store

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")


class UTF8JSONResponse(JSONResponse):
    """JSONResponse that advertises its charset."""

    media_type = JSON_CONTENT_TYPE


def parse_user_id(raw: str) -> int:
    """
    Parse the last path segment as a signed decimal integer.

    Anything unparseable becomes 0, which matches no seeded user.
    """
    segment = raw.rsplit("/", 1)[-1]
    if _SIGNED_INT.fullmatch(segment):
        return int(segment)
    return 0


def create_app(
    store: Optional[BaseUserStore] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        store (BaseUserStore, optional): Initial store. Defaults to the seed
            selected by USERSVC_SEED.
        clock (callable, optional): Returns "now" for the auth gate.
            Defaults to datetime.now.

    Returns:
        FastAPI: A configured app. `app.state.store_handle` is the handle
                 used to swap stores between scenarios.
    """
    # Docs and openapi are not part of the service surface.
    app = FastAPI(
        title="User Service",
        description="Read-only user lookups behind a time-bound bearer token",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    log = logging.getLogger("usersvc")

    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable per scenario)
    # ----------------------------------------------------------------
    handle = StoreHandle(store if store is not None else get_store())
    app.state.store_handle = handle
    log.info("User service starting with %s", type(handle.current).__name__)

    app.add_middleware(
        BaseHTTPMiddleware,
        dispatch=RequestPipeline.default(clock=clock, paths=("/user/", "/users")),
    )

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/user/{raw_id:path}")
    def get_user(raw_id: str) -> Response:
        """
        Return a single user by numeric ID.

        Returns:
            200 with the user JSON, or 404 with an empty body. Both carry
            `Content-Type: application/json; charset=utf-8`.
        """
        user = handle.current.by_id(parse_user_id(raw_id))
        if user is None:
            return Response(status_code=404, media_type=JSON_CONTENT_TYPE)
        return UTF8JSONResponse(user.to_wire())

    @app.get("/users")
    def get_users() -> Response:
        """Return every user as a JSON array (empty store -> [])."""
        users = handle.current.get_users()
        return UTF8JSONResponse([user.to_wire() for user in users])

    return app


# `uvicorn main:app` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
