"""
RequestPipeline – ordered interceptor chain around the route handlers.

The first interceptor is the outermost: it runs first on the way in and
sees the final response on the way out. The default pipeline is

    correlation id  ->  auth gate  ->  route handler

so the correlation header is present even on 401 responses.

The pipeline is installed as a single Starlette middleware:

    app.add_middleware(BaseHTTPMiddleware, dispatch=RequestPipeline.default())

`paths` scopes the chain: a path ending in "/" covers everything below it,
any other path covers itself and its subpaths. Requests outside the scope
go straight to routing. No `paths` means every request is wrapped.
"""

from typing import Iterable, List, Optional, Tuple

from starlette.requests import Request
from starlette.responses import Response

from .interceptors import (
    AuthGateInterceptor,
    CallNext,
    Clock,
    CorrelationIdInterceptor,
)


class RequestPipeline:
    def __init__(self, interceptors: Iterable = (), paths: Optional[Iterable[str]] = None) -> None:
        self._interceptors: List = list(interceptors)
        self.paths: Optional[Tuple[str, ...]] = tuple(paths) if paths is not None else None

    @classmethod
    def default(
        cls,
        clock: Optional[Clock] = None,
        paths: Optional[Iterable[str]] = None,
    ) -> "RequestPipeline":
        """Build the standard chain: correlation tagging, then authentication."""
        return cls([CorrelationIdInterceptor(), AuthGateInterceptor(clock=clock)], paths=paths)

    @property
    def interceptors(self) -> List:
        return list(self._interceptors)

    def use(self, interceptor) -> "RequestPipeline":
        """Append an interceptor as the new innermost step."""
        self._interceptors.append(interceptor)
        return self

    def covers(self, path: str) -> bool:
        if self.paths is None:
            return True
        for scope in self.paths:
            if scope.endswith("/"):
                if path.startswith(scope):
                    return True
            elif path == scope or path.startswith(scope + "/"):
                return True
        return False

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        if not self.covers(request.url.path):
            return await call_next(request)
        return await self._dispatch(0, request, call_next)

    async def _dispatch(self, index: int, request: Request, call_next: CallNext) -> Response:
        if index >= len(self._interceptors):
            return await call_next(request)

        async def next_step(req: Request) -> Response:
            return await self._dispatch(index + 1, req, call_next)

        return await self._interceptors[index](request, next_step)
