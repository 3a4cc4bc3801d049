"""
Request interceptors for the user service.

An interceptor is an async callable `(request, call_next) -> Response`. It may
do work before calling `call_next`, decorate the response afterwards, or
return a response of its own without calling `call_next` at all.
"""

import logging
import uuid
from datetime import datetime
from typing import Awaitable, Callable, Optional

from starlette.requests import Request
from starlette.responses import Response

from auth.config import AUTH_HEADER
from auth.service import is_authorized
from usersvc.config import CORRELATION_HEADER, JSON_CONTENT_TYPE

log = logging.getLogger("usersvc.pipeline")

CallNext = Callable[[Request], Awaitable[Response]]
Clock = Callable[[], datetime]


class CorrelationIdInterceptor:
    """Tags every request with a fresh correlation id, echoed as a response header."""

    header_name = CORRELATION_HEADER

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        correlation_id = str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        response = await call_next(request)
        response.headers[self.header_name] = correlation_id
        return response


class AuthGateInterceptor:
    """
    Rejects requests whose bearer token does not match the current minute.

    Rejected requests get a 401 with a JSON content type and no body; the
    rest of the chain does not run.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock = clock or datetime.now

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        if is_authorized(request.headers.get(AUTH_HEADER), now=self.clock()):
            return await call_next(request)

        log.info(
            "Rejected unauthenticated request %s %s (correlation_id=%s)",
            request.method,
            request.url.path,
            getattr(request.state, "correlation_id", None),
        )
        return Response(status_code=401, media_type=JSON_CONTENT_TYPE)
