from __future__ import annotations

from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import NOT_ASSIGNED
from ..core.exceptions import AuthorizationError, ValidationError
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from ..users.model import SessionUser
from .model import ClassOverview, SchoolClass
from .repository import ClassRepository


class ClassService:
    def __init__(self, classes: ClassRepository, students: StudentRepository, teachers: TeacherRepository):
        self._classes = classes
        self._students = students
        self._teachers = teachers

    def list_for(self, user: SessionUser) -> list[SchoolClass]:
        rows = list(self._classes.list_all())
        if user.is_teacher and user.class_id:
            rows = [c for c in rows if c.class_id == user.class_id]
        return rows

    def overview(self) -> list[ClassOverview]:
        students = self._students.list_all()
        teachers = self._teachers.list_all()

        out = []
        for c in self._classes.list_all():
            count = sum(1 for s in students if s.class_id == c.class_id)
            teacher = next((t for t in teachers if t.class_id == c.class_id), None)
            out.append(
                ClassOverview(
                    school_class=c,
                    student_count=count,
                    teacher_name=teacher.full_name if teacher else NOT_ASSIGNED,
                )
            )
        return out

    def save(self, *, user: SessionUser, class_id: Optional[str] = None, data: dict) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can manage classes")

        class_name = require_non_empty(data.get("className"), "Class name")
        numeric = data.get("classId")
        if numeric not in (None, ""):
            try:
                numeric = int(numeric)
            except (TypeError, ValueError):
                raise ValidationError("Class ID must be a number") from None
        else:
            numeric = None

        if class_id:
            self._classes.update(class_id, numeric_class_id=numeric, class_name=class_name)
        else:
            self._classes.create(numeric_class_id=numeric, class_name=class_name)

    def delete(self, *, user: SessionUser, class_id: str) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can delete classes")
        self._classes.delete(class_id)
