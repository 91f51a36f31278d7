from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from ..app_logger import get_logger
from ..core.exceptions import (
    ApiError,
    AuthenticationError,
    ConnectivityError,
    NotFoundError,
    SessionExpiredError,
)
from ..users.session import SessionStore
from .connection import ApiConnection

logger = get_logger(__name__)

# 401 here means bad credentials, not an expired session.
AUTH_ENDPOINTS = ("/api/auth/login", "/api/auth/register")

SESSION_EXPIRED_MESSAGE = "Session expired. Please login again."


def _mask(body: Any) -> Any:
    if isinstance(body, Mapping) and "password" in body:
        masked = dict(body)
        masked["password"] = "***hidden***"
        return masked
    return body


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[dict]:
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None and v != ""}


def extract_error_message(data: Any, status_code: int) -> str:
    """Pull the backend's own message out of an error body."""

    if isinstance(data, Mapping):
        message = data.get("message")
        if message:
            return str(message)
        error = data.get("error")
        if isinstance(error, str) and error:
            return error
        if isinstance(error, Mapping) and error.get("message"):
            return str(error["message"])
    elif isinstance(data, str) and data.strip():
        return data.strip()
    return f"Request failed with status {status_code}"


class ApiClient:
    """Uniform request/response access to the school backend.

    Every call attaches the bearer token of the current session and maps
    failures onto the ``DomainError`` family.
    """

    def __init__(self, connection: ApiConnection, session: SessionStore):
        self._conn = connection
        self._session = session

    def get(self, path: str, *, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, *, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        headers = {"Accept": "application/json"}
        token = self._session.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug("API call %s %s%s", method, self._conn.base_url, path)
        if json is not None:
            logger.debug("Request body: %s", _mask(json))

        try:
            with self._conn.connect() as c:
                r = c.request(method, path, params=_clean_params(params), json=json, headers=headers)
        except httpx.TransportError as e:
            logger.warning("Backend unreachable for %s %s: %s", method, path, e)
            raise ConnectivityError(
                f"Cannot connect to backend server at {self._conn.base_url}. "
                "Please ensure the backend server is running."
            ) from e

        data = self._body(r)
        if r.is_success:
            return data

        message = extract_error_message(data, r.status_code)
        logger.warning("API error %s %s -> %s: %s", method, path, r.status_code, message)

        if r.status_code == 401:
            if path.startswith(AUTH_ENDPOINTS):
                raise AuthenticationError(message)
            self._session.clear()
            raise SessionExpiredError(SESSION_EXPIRED_MESSAGE, status_code=401)
        if r.status_code == 404:
            raise NotFoundError(message, status_code=404)
        raise ApiError(message, status_code=r.status_code)

    @staticmethod
    def _body(r: httpx.Response) -> Any:
        if not r.content:
            return None
        try:
            return r.json()
        except ValueError:
            return r.text
