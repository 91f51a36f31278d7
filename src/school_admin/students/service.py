from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_choice, require_non_empty
from ..core.constants import MIN_SEARCH_LENGTH
from ..core.enums import Part, Shift
from ..core.exceptions import AuthorizationError
from ..reports.filters import StudentFilters, apply
from ..users.model import SessionUser
from .model import ProgressResult, Student
from .progression import preview_progression, validate_from_parts
from .repository import StudentRepository


class StudentService:
    """Use case: list, search and maintain student records."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_for(self, user: SessionUser, filters: Optional[StudentFilters] = None) -> list[Student]:
        rows = list(self._students.list_all())
        # Teachers only see the students of their own class.
        if user.is_teacher and user.class_id:
            rows = [s for s in rows if s.class_id == user.class_id]
        if filters:
            rows = apply(rows, filters.predicate())
        return rows

    def search_by_name(self, query: Optional[str]) -> Sequence[Student]:
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_LENGTH:
            return []
        return self._students.search_by_name(query)

    def save(self, *, user: SessionUser, student_id: Optional[str] = None, data: dict) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can manage students")
        full_name = require_non_empty(data.get("fullName"), "Full name")
        class_id = require_non_empty(data.get("classId"), "Class")
        shift = require_choice(data.get("shift") or Shift.MORNING.value, Shift, "Shift")
        part = require_choice(data.get("Parts") or Part.NONE.value, Part, "Part")
        fields = dict(
            full_name=full_name,
            class_id=class_id,
            shift=shift.value,
            part=part.value,
            phone=(data.get("phone") or "").strip() or None,
            emergency_phone=(data.get("emergencyPhone") or "").strip() or None,
        )
        if student_id:
            self._students.update(student_id, **fields)
        else:
            self._students.create(**fields)

    def delete(self, *, user: SessionUser, student_id: str) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can delete students")
        self._students.delete(student_id)

    def preview_english_progression(self, from_parts: Optional[Sequence[str]] = None) -> dict[str, int]:
        return preview_progression(self._students.list_all(), from_parts)

    def progress_english_parts(self, *, user: SessionUser, from_parts: Optional[Sequence[str]] = None) -> ProgressResult:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can progress English parts")
        parts = validate_from_parts(from_parts)
        return self._students.progress_english_parts(from_parts=parts or None)
