from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, ValidationError
from ..students.model import Student
from ..teachers.model import Teacher
from ..users.model import SessionUser
from .model import AttendanceSubmission, SubmissionEntry

MISSING_SELECTION = "Please select both class and teacher"
NOT_CLASS_TEACHER = "Only the teacher assigned to this class can take attendance"
NOT_OWN_CLASS = "You can only mark attendance for your assigned class"
NOT_SELF = "You can only mark attendance as yourself"
NOTHING_MARKED = "Please mark attendance for at least one student"


@dataclass(frozen=True)
class AttendanceSubmissionGuard:
    """Checks an attendance submission before anything is sent.

    Each violated rule raises with its own message, in this order:
    selection, teacher-role scope, teacher of record, non-empty roster.
    The first two need no backend data and run before anything is fetched.
    """

    def require_selection(self, *, class_id: Optional[str], teacher_id: Optional[str]) -> None:
        if not class_id or not teacher_id:
            raise ValidationError(MISSING_SELECTION)

    def precheck(self, *, user: SessionUser, class_id: Optional[str], teacher_id: Optional[str]) -> None:
        self.require_selection(class_id=class_id, teacher_id=teacher_id)
        if user.is_teacher:
            if user.class_id and class_id != user.class_id:
                raise AuthorizationError(NOT_OWN_CLASS)
            if user.teacher_id and teacher_id != user.teacher_id:
                raise AuthorizationError(NOT_SELF)

    def check(
        self,
        *,
        user: SessionUser,
        class_id: Optional[str],
        teacher_id: Optional[str],
        teachers: Sequence[Teacher],
        roster: Sequence[Student],
    ) -> None:
        self.precheck(user=user, class_id=class_id, teacher_id=teacher_id)

        assigned = any(t.teacher_id == teacher_id and t.class_id == class_id for t in teachers)
        if not assigned:
            raise AuthorizationError(NOT_CLASS_TEACHER)

        if not roster:
            raise ValidationError(NOTHING_MARKED)

    def build(
        self,
        *,
        user: SessionUser,
        class_id: Optional[str],
        teacher_id: Optional[str],
        day: str,
        teachers: Sequence[Teacher],
        roster: Sequence[Student],
        marks: Mapping[str, str],
    ) -> AttendanceSubmission:
        """Checked payload covering every enrolled student.

        Students without a mark are submitted as Absent; marks for students
        outside the roster are not sent.
        """

        self.check(user=user, class_id=class_id, teacher_id=teacher_id, teachers=teachers, roster=roster)

        entries = []
        for student in roster:
            status = marks.get(student.student_id) or AttendanceStatus.ABSENT.value
            try:
                status = AttendanceStatus(status).value
            except ValueError:
                raise ValidationError(f"Invalid status for {student.full_name}: {status}") from None
            entries.append(SubmissionEntry(student_id=student.student_id, shift=student.shift, status=status))

        return AttendanceSubmission(class_id=class_id, teacher_id=teacher_id, date=day, entries=tuple(entries))
