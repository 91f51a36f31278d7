"""Attendance report aggregation.

Pure functions over fetched sessions: nothing here talks to the backend and
the input sessions are never modified. Call ``aggregate_attendance`` again
whenever the sessions or the filters change.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..app_logger import get_logger
from ..attendance.model import AttendanceSession
from ..classes.model import is_english_class
from ..common.datetime_utils import iso_day
from ..core.constants import UNKNOWN
from ..core.enums import AttendanceStatus, Part
from .calculator import mean_rounded, percentage
from .filters import AttendanceFilters, apply
from .model import AttendanceReport, DailyStat, FlatAttendanceRecord, StudentStat

logger = get_logger(__name__)

PRESENT = AttendanceStatus.PRESENT.value


def flatten_sessions(sessions: Iterable[AttendanceSession]) -> list[FlatAttendanceRecord]:
    records: list[FlatAttendanceRecord] = []
    for session in sessions:
        # Empty sessions must not create a day with zero students.
        if not session.entries:
            continue
        class_name = session.class_name or UNKNOWN
        english = is_english_class(class_name)
        for entry in session.entries:
            day = iso_day(entry.date) or iso_day(session.created_at)
            if day is None:
                logger.debug("Skipping undated entry for student %s in class %s", entry.student_id, class_name)
                continue
            records.append(
                FlatAttendanceRecord(
                    date=day,
                    class_name=class_name,
                    student_id=entry.student_id,
                    student_name=entry.student_name or UNKNOWN,
                    shift=entry.shift or UNKNOWN,
                    part=entry.part or Part.NONE.value,
                    status=entry.status or PRESENT,
                    is_english_class=english,
                )
            )
    return records


@dataclass
class _Counter:
    present: int = 0
    absent: int = 0

    def add(self, status: str) -> None:
        if status == PRESENT:
            self.present += 1
        else:
            self.absent += 1

    @property
    def total(self) -> int:
        return self.present + self.absent


@dataclass
class _StudentAccumulator(_Counter):
    name: str = UNKNOWN
    class_name: str = UNKNOWN
    shift: str = UNKNOWN
    part: str = Part.NONE.value


def daily_stats(records: Iterable[FlatAttendanceRecord]) -> list[DailyStat]:
    by_day: dict[str, _Counter] = {}
    for r in records:
        by_day.setdefault(r.date, _Counter()).add(r.status)
    return [
        DailyStat(
            date=day,
            present=c.present,
            absent=c.absent,
            total=c.total,
            percentage=percentage(c.present, c.total),
        )
        for day, c in sorted(by_day.items())
    ]


def student_stats(records: Iterable[FlatAttendanceRecord]) -> list[StudentStat]:
    by_student: dict[Optional[str], _StudentAccumulator] = {}
    for r in records:
        acc = by_student.setdefault(r.student_id, _StudentAccumulator())
        acc.name = r.student_name
        acc.class_name = r.class_name
        acc.shift = r.shift
        acc.part = r.part
        acc.add(r.status)
    return [
        StudentStat(
            student_id=student_id,
            name=acc.name,
            class_name=acc.class_name,
            shift=acc.shift,
            part=acc.part,
            present=acc.present,
            absent=acc.absent,
            percentage=percentage(acc.present, acc.total),
        )
        for student_id, acc in by_student.items()
    ]


def aggregate_attendance(
    sessions: Sequence[AttendanceSession],
    filters: Optional[AttendanceFilters] = None,
    *,
    selected_class_name: Optional[str] = None,
) -> AttendanceReport:
    """Build the attendance report for the current filter selection.

    Daily stats are recomputed from the filtered records, so percentages
    describe the filtered subset. Student stats are accumulated over all
    records of the period and then narrowed by class, shift and part.
    """

    filters = filters or AttendanceFilters()
    records = flatten_sessions(sessions)

    filtered = apply(records, filters.record_predicate())
    daily = daily_stats(filtered)
    students = apply(student_stats(records), filters.student_predicate())

    show_part_filter = is_english_class(selected_class_name) or any(
        is_english_class(s.class_name) for s in students
    )

    return AttendanceReport(
        total_days=len(daily),
        total_students=len(students),
        average_attendance=mean_rounded(s.percentage for s in students),
        daily_attendance=daily,
        student_attendance=students,
        records=filtered,
        present_students=[s for s in students if s.present > 0],
        absent_students=[s for s in students if s.absent > 0],
        show_part_filter=show_part_filter,
    )
