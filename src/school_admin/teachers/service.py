from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import AuthorizationError, ValidationError
from ..reports.filters import all_of, apply, contains_text
from ..users.model import SessionUser
from .model import Teacher
from .repository import TeacherRepository


class TeacherService:
    """Use case: manage teachers and their class assignment (admin)."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def list_teachers(self, *, search: Optional[str] = None) -> list[Teacher]:
        return apply(self._teachers.list_all(), all_of(contains_text(("full_name", "class_name"), search)))

    def teacher_of_class(self, class_id: str) -> Optional[Teacher]:
        return next((t for t in self._teachers.list_all() if t.class_id == class_id), None)

    def save(self, *, user: SessionUser, teacher_id: Optional[str] = None, data: dict) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can manage teachers")

        full_name = require_non_empty(data.get("fullName"), "Full name")
        email = (data.get("email") or "").strip() or None
        if email and "@" not in email:
            raise ValidationError("Email is not valid")
        phone = (data.get("phone") or "").strip() or None
        class_id = (data.get("classId") or "").strip() or None

        if teacher_id:
            self._teachers.update(
                teacher_id,
                {"full_name": full_name, "email": email, "phone": phone, "class_id": class_id},
            )
        else:
            self._teachers.create(full_name=full_name, email=email, phone=phone, class_id=class_id)

    def assign_class(self, *, user: SessionUser, teacher_id: str, class_id: Optional[str]) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can assign classes")
        self._teachers.update(teacher_id, {"class_id": (class_id or "").strip() or None})

    def delete(self, *, user: SessionUser, teacher_id: str) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can delete teachers")
        self._teachers.delete(teacher_id)
