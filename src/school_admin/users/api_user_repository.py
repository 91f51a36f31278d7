from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.schemas import AuthUserOut, CurrentUserOut, LoginOut, UserAccountOut, decode, decode_list
from ..core.enums import Role
from ..core.exceptions import DecodeError
from .model import SessionUser, UserAccount
from .repository import AuthRepository, UserRepository

_WIRE_NAMES = {"email": "email", "password": "password", "is_active": "isActive"}


def to_session_user(row: AuthUserOut) -> SessionUser:
    try:
        role = Role(row.role)
    except ValueError:
        raise DecodeError(f"Unknown role from backend: {row.role}") from None
    return SessionUser(
        user_id=row.id,
        email=row.email,
        role=role,
        full_name=row.full_name,
        class_id=row.class_id,
        teacher_id=row.teacher_id,
    )


class ApiAuthRepository(AuthRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, *, email: str, password: str, role: str) -> tuple[Optional[str], SessionUser]:
        out = decode(
            LoginOut,
            self._client.post("/api/auth/login", json={"email": email, "password": password, "role": role}),
        )
        return out.token, to_session_user(out.user)

    def current_user(self) -> Optional[SessionUser]:
        out = decode(CurrentUserOut, self._client.get("/api/auth/me"))
        return to_session_user(out.user) if out.user else None


class ApiUserRepository(UserRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[UserAccount]:
        rows = decode_list(UserAccountOut, self._client.get("/api/users"))
        out = []
        for r in rows:
            try:
                role = Role(r.role)
            except ValueError:
                raise DecodeError(f"Unknown role from backend: {r.role}") from None
            out.append(
                UserAccount(
                    user_id=r.id,
                    email=r.email,
                    role=role,
                    is_active=r.is_active,
                    teacher_id=r.teacher_ref.id if r.teacher_ref else None,
                    teacher_name=r.teacher_ref.full_name if r.teacher_ref else None,
                )
            )
        return out

    def create_teacher_account(self, *, teacher_id: str, email: str, password: str) -> None:
        self._client.post("/api/users/teacher", json={"teacherId": teacher_id, "email": email, "password": password})

    def update(self, user_id: str, fields: dict) -> None:
        body = {_WIRE_NAMES[k]: v for k, v in fields.items() if k in _WIRE_NAMES}
        self._client.put(f"/api/users/{user_id}", json=body)

    def delete(self, user_id: str) -> None:
        self._client.delete(f"/api/users/{user_id}")
