from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SessionUser, UserAccount


class AuthRepository(Protocol):
    def login(self, *, email: str, password: str, role: str) -> tuple[Optional[str], SessionUser]:
        raise NotImplementedError

    def current_user(self) -> Optional[SessionUser]:
        raise NotImplementedError


class UserRepository(Protocol):
    """Repository interface for login accounts (admin only)."""

    def list_all(self) -> Sequence[UserAccount]:
        raise NotImplementedError

    def create_teacher_account(self, *, teacher_id: str, email: str, password: str) -> None:
        raise NotImplementedError

    def update(self, user_id: str, fields: dict) -> None:
        raise NotImplementedError

    def delete(self, user_id: str) -> None:
        raise NotImplementedError
