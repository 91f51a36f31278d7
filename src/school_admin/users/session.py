"""Session context for the signed-in user.

The token and user live in one ``SessionStore`` owned by the application
(the Flask session in the web app) and are handed to the API client, so no
module keeps its own copy of the credentials.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from flask import session

from .model import SessionUser


class SessionStore(Protocol):
    def get_token(self) -> Optional[str]:
        raise NotImplementedError

    def get_user(self) -> Optional[SessionUser]:
        raise NotImplementedError

    def start(self, *, token: str, user: SessionUser) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


@dataclass
class InMemorySessionStore:
    """Session context for scripts and tests."""

    token: Optional[str] = None
    user: Optional[SessionUser] = None

    def get_token(self) -> Optional[str]:
        return self.token

    def get_user(self) -> Optional[SessionUser]:
        return self.user

    def start(self, *, token: str, user: SessionUser) -> None:
        self.token = token
        self.user = user

    def clear(self) -> None:
        self.token = None
        self.user = None


class FlaskSessionStore:
    """Session context backed by the signed Flask session cookie."""

    TOKEN_KEY = "token"
    USER_KEY = "user"

    def get_token(self) -> Optional[str]:
        return session.get(self.TOKEN_KEY)

    def get_user(self) -> Optional[SessionUser]:
        data = session.get(self.USER_KEY)
        return SessionUser.from_dict(data) if data else None

    def start(self, *, token: str, user: SessionUser) -> None:
        session[self.TOKEN_KEY] = token
        session[self.USER_KEY] = user.to_dict()

    def clear(self) -> None:
        session.pop(self.TOKEN_KEY, None)
        session.pop(self.USER_KEY, None)
