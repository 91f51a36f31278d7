from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """The signed-in account as reported by the backend."""

    user_id: str
    email: str
    role: Role
    full_name: Optional[str] = None
    class_id: Optional[str] = None
    teacher_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_teacher(self) -> bool:
        return self.role == Role.TEACHER

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "email": self.email,
            "role": self.role.value,
            "full_name": self.full_name,
            "class_id": self.class_id,
            "teacher_id": self.teacher_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionUser":
        return cls(
            user_id=str(data["user_id"]),
            email=data.get("email") or "",
            role=Role(data["role"]),
            full_name=data.get("full_name"),
            class_id=data.get("class_id"),
            teacher_id=data.get("teacher_id"),
        )


@dataclass(frozen=True)
class UserAccount:
    """Login account row shown in admin user management."""

    user_id: str
    email: str
    role: Role
    is_active: bool
    teacher_id: Optional[str] = None
    teacher_name: Optional[str] = None
