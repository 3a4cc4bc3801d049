"""
ApiClient – consumer-side wrapper around the user service HTTP API.

Responsibilities:
    - Build GET requests for `/user/{id}` and `/users` with fixed headers
      and an optional bearer token
    - Decode JSON bodies into `User` models
    - Classify failures of `get_user` into a small set of exceptions

Classification for `get_user`, first match wins:
    1. HTTP 404                            -> NotFoundError
    2. HTTP 401                            -> UnauthorizedError
    3. transport failure or undecodable body -> UnavailableError
    4. otherwise                           -> the decoded User

`get_users` deliberately does none of this: decode failures surface as
DecodeError and transport failures propagate as httpx raised them.

Concurrency:
    One client instance belongs to one caller. `with_token` mutates the
    instance it is called on. Use it as a context manager (`with ApiClient(...)`)
    to close the httpx client it creates; injected clients stay open.

LLM Prompt Example:
    "Show how a thin HTTP client can hide transport details behind a few
     typed exceptions while keeping status-based outcomes predictable."
"""

import logging
from typing import Dict, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from usersvc.models import User

from .errors import DecodeError, NotFoundError, UnauthorizedError, UnavailableError

log = logging.getLogger("usersvc.client")

USER_AGENT = "Admin Service"

_USER_LIST = TypeAdapter(List[User])


class ApiClient:
    def __init__(
        self,
        base_url: str,
        token: str = "",
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            base_url (str): Provider root, e.g. "http://localhost:8080".
            token (str): Bearer token; empty means no Authorization header.
            http_client (httpx.Client, optional): Injected client, e.g. a
                FastAPI TestClient or one built on httpx.MockTransport.
        """
        self.base_url = httpx.URL(base_url)
        self.token = token
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client()

    def with_token(self, token: str) -> "ApiClient":
        """Attach `token` to subsequent calls and return this client."""
        self.token = token
        return self

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ---- Requests ---------------------------------------------------------

    def _url(self, path: str) -> str:
        return str(self.base_url.join(path))

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get(self, path: str) -> httpx.Response:
        return self._http.get(self._url(path), headers=self._headers())

    # ---- Operations -------------------------------------------------------

    def get_user(self, user_id: int) -> User:
        """
        Fetch a single user.

        Raises:
            NotFoundError: Provider answered 404.
            UnauthorizedError: Provider answered 401.
            UnavailableError: Transport failure or a body that is not a user.
        """
        try:
            response = self._get(f"/user/{user_id}")
        except httpx.HTTPError as exc:
            log.warning("GET /user/%s failed: %s", user_id, exc)
            raise UnavailableError() from exc

        if response.status_code == 404:
            raise NotFoundError()
        if response.status_code == 401:
            raise UnauthorizedError()

        try:
            return User.model_validate(response.json())
        except ValueError as exc:
            log.warning(
                "GET /user/%s returned an undecodable body (status %s)",
                user_id,
                response.status_code,
            )
            raise UnavailableError() from exc

    def get_users(self) -> List[User]:
        """
        Fetch every user.

        Raises:
            DecodeError: The body is not a JSON array of users.
            httpx.HTTPError: Transport failure, unclassified.
        """
        response = self._get("/users")
        log.debug("GET /users -> %s", response.status_code)
        try:
            data = response.json()
            if data is None:
                return []
            return _USER_LIST.validate_python(data)
        except (ValueError, ValidationError) as exc:
            raise DecodeError(f"cannot decode users (status {response.status_code})") from exc
