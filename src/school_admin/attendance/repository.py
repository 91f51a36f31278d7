from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceSession, AttendanceSubmission


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def get_for_class_and_date(self, class_id: str, day: date) -> Optional[AttendanceSession]:
        """None when the class has no session for that day."""

        raise NotImplementedError

    def create(self, submission: AttendanceSubmission) -> None:
        raise NotImplementedError

    def update(self, submission: AttendanceSubmission) -> None:
        raise NotImplementedError

    def get_report_sessions(
        self,
        *,
        start_date: date,
        end_date: date,
        class_id: Optional[str] = None,
    ) -> Sequence[AttendanceSession]:
        raise NotImplementedError
