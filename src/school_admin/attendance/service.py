from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Optional

from ..app_logger import get_logger
from ..classes.repository import ClassRepository
from ..common.validators import require_choice
from ..core.enums import AttendanceStatus
from ..reports.filters import all_of, apply, equals
from ..students.repository import StudentRepository
from ..teachers.model import Teacher
from ..teachers.repository import TeacherRepository
from ..users.model import SessionUser
from .guard import AttendanceSubmissionGuard
from .model import AttendanceSubmission, RosterRow
from .repository import AttendanceRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class MarkingSheet:
    class_id: str
    class_name: Optional[str]
    day: str
    teacher: Optional[Teacher]
    rows: list[RosterRow]
    has_existing: bool
    is_english: bool

    @property
    def present_count(self) -> int:
        return sum(1 for r in self.rows if r.status == AttendanceStatus.PRESENT.value)

    @property
    def absent_count(self) -> int:
        return sum(1 for r in self.rows if r.status == AttendanceStatus.ABSENT.value)


def mark_all(rows: Iterable, status: str) -> dict[str, str]:
    """Marks giving every row (a roster student or sheet row) the same status."""

    status = require_choice(status, AttendanceStatus, "Status").value
    return {r.student_id: status for r in rows}


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        teachers: TeacherRepository,
        classes: ClassRepository,
        *,
        guard: Optional[AttendanceSubmissionGuard] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._teachers = teachers
        self._classes = classes
        self._guard = guard or AttendanceSubmissionGuard()

    def _roster(self, class_id: str):
        return [s for s in self._students.list_all() if s.class_id == class_id]

    def marking_sheet(
        self,
        *,
        class_id: str,
        day: date,
        shift: Optional[str] = None,
        part: Optional[str] = None,
    ) -> MarkingSheet:
        """Roster of a class for one day, with any statuses already submitted."""

        roster = self._roster(class_id)
        statuses = {s.student_id: AttendanceStatus.PRESENT.value for s in roster}

        existing = self._attendance.get_for_class_and_date(class_id, day)
        if existing is None:
            logger.debug("No existing attendance for class %s on %s", class_id, day)
        else:
            for e in existing.entries:
                if e.student_id:
                    statuses[e.student_id] = e.status or AttendanceStatus.PRESENT.value

        teachers = self._teachers.list_all()
        teacher = None
        if existing and existing.teacher_id:
            teacher = next((t for t in teachers if t.teacher_id == existing.teacher_id), None)
        if teacher is None:
            teacher = next((t for t in teachers if t.class_id == class_id), None)

        school_class = next((c for c in self._classes.list_all() if c.class_id == class_id), None)
        visible = apply(roster, all_of(equals("shift", shift), equals("part", part)))

        return MarkingSheet(
            class_id=class_id,
            class_name=school_class.class_name if school_class else None,
            day=day.strftime("%Y-%m-%d"),
            teacher=teacher,
            rows=[
                RosterRow(
                    student_id=s.student_id,
                    full_name=s.full_name,
                    shift=s.shift,
                    part=s.part,
                    status=statuses.get(s.student_id, AttendanceStatus.PRESENT.value),
                )
                for s in visible
            ],
            has_existing=existing is not None,
            is_english=bool(school_class and school_class.is_english),
        )

    def submit(
        self,
        *,
        user: SessionUser,
        class_id: Optional[str],
        teacher_id: Optional[str],
        day: date,
        marks: Mapping[str, str],
        mark_all_status: Optional[str] = None,
        shift: Optional[str] = None,
        part: Optional[str] = None,
    ) -> AttendanceSubmission:
        """Send the full session for ``class_id`` on ``day``.

        With ``mark_all_status`` every student matching ``shift``/``part`` gets
        that status; students outside the filter keep their own mark.
        """

        self._guard.precheck(user=user, class_id=class_id, teacher_id=teacher_id)

        roster = self._roster(class_id)
        if mark_all_status:
            visible = apply(roster, all_of(equals("shift", shift), equals("part", part)))
            marks = {**marks, **mark_all(visible, mark_all_status)}

        submission = self._guard.build(
            user=user,
            class_id=class_id,
            teacher_id=teacher_id,
            day=day.strftime("%Y-%m-%d"),
            teachers=self._teachers.list_all(),
            roster=roster,
            marks=marks,
        )

        if self._attendance.get_for_class_and_date(class_id, day) is None:
            self._attendance.create(submission)
        else:
            self._attendance.update(submission)

        logger.info(
            "Attendance saved for class %s on %s (%d present, %d absent)",
            class_id,
            submission.date,
            submission.present_count,
            submission.absent_count,
        )
        return submission
