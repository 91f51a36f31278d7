from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from datetime import date
from typing import Callable, Optional, Sequence

from ..attendance.model import AttendanceSession
from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..common.datetime_utils import now_local, to_day
from ..core.constants import DEFAULT_DASHBOARD_WORKERS
from ..core.enums import AttendanceStatus
from ..finance.repository import FinanceRepository
from ..reports.finance_aggregator import summarize
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from ..users.model import SessionUser


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    total_teachers: int
    total_classes: int
    today_attendance: int
    monthly_income: float
    total_income: float

    def to_dict(self) -> dict:
        data = asdict(self)
        data["finance_overview"] = {"income": data.pop("monthly_income"), "total": data.pop("total_income")}
        return data


def count_present_on(sessions: Sequence[AttendanceSession], day: date) -> int:
    """Present students across the sessions submitted for ``day``.

    A session's day is taken from its first entry.
    """

    total = 0
    for s in sessions:
        if not s.entries or to_day(s.entries[0].date) != day:
            continue
        total += sum(1 for e in s.entries if e.status == AttendanceStatus.PRESENT.value)
    return total


class DashboardService:
    """Headline numbers built from five independent collections.

    The collections are fetched in parallel; the stats are only computed
    once every fetch has succeeded, and any failure fails the whole call.
    """

    def __init__(
        self,
        students: StudentRepository,
        teachers: TeacherRepository,
        classes: ClassRepository,
        attendance: AttendanceRepository,
        finance: FinanceRepository,
        *,
        max_workers: int = DEFAULT_DASHBOARD_WORKERS,
    ):
        self._students = students
        self._teachers = teachers
        self._classes = classes
        self._attendance = attendance
        self._finance = finance
        self._max_workers = max(1, int(max_workers))

    def get_stats(
        self,
        *,
        user: SessionUser,
        today: Optional[date] = None,
        context_wrapper: Optional[Callable[[Callable], Callable]] = None,
    ) -> DashboardStats:
        """``context_wrapper`` carries the caller's context (e.g. the Flask
        request holding the session token) into the worker threads."""

        today = today or now_local().date()
        wrap = context_wrapper or (lambda fn: fn)

        fetches = {
            "students": self._students.list_all,
            "teachers": self._teachers.list_all,
            "classes": self._classes.list_all,
            "attendance": self._attendance.list_all,
            "finance": self._finance.list_all,
        }
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = {name: executor.submit(wrap(fn)) for name, fn in fetches.items()}
            # .result() re-raises the first failure
            data = {name: f.result() for name, f in futures.items()}

        if user.is_teacher and user.class_id:
            students = [s for s in data["students"] if s.class_id == user.class_id]
            sessions = [a for a in data["attendance"] if a.class_id == user.class_id]
            return DashboardStats(
                total_students=len(students),
                total_teachers=1,
                total_classes=1,
                today_attendance=count_present_on(sessions, today),
                monthly_income=0,
                total_income=0,
            )

        summary = summarize(data["finance"], today=today)
        return DashboardStats(
            total_students=len(data["students"]),
            total_teachers=len(data["teachers"]),
            total_classes=len(data["classes"]),
            today_attendance=count_present_on(data["attendance"], today),
            monthly_income=summary.monthly_income,
            total_income=summary.total_income,
        )
