from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.schemas import AttendanceSessionOut, decode, decode_list, unwrap_data
from ..core.exceptions import NotFoundError
from .model import AttendanceEntry, AttendanceSession, AttendanceSubmission
from .repository import AttendanceRepository


def to_session(row: AttendanceSessionOut) -> AttendanceSession:
    return AttendanceSession(
        session_id=row.id,
        class_id=row.class_ref.id if row.class_ref else None,
        class_name=row.class_ref.class_name if row.class_ref else None,
        teacher_id=row.teacher_ref.id if row.teacher_ref else None,
        teacher_name=row.teacher_ref.full_name if row.teacher_ref else None,
        created_at=row.created_at,
        entries=tuple(
            AttendanceEntry(
                student_id=e.student.id if e.student else None,
                student_name=e.student.full_name if e.student else None,
                shift=(e.student.shift if e.student else None) or e.shift,
                part=e.student.part if e.student else None,
                status=e.status,
                date=e.date,
            )
            for e in row.students
        ),
    )


def _to_body(submission: AttendanceSubmission) -> dict:
    return {
        "classId": submission.class_id,
        "teacherName": submission.teacher_id,
        "students": [
            {
                "studentName": e.student_id,
                "shift": e.shift,
                "status": e.status,
                "date": submission.date,
            }
            for e in submission.entries
        ],
    }


class ApiAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[AttendanceSession]:
        rows = decode_list(AttendanceSessionOut, self._client.get("/read/attendance"))
        return [to_session(r) for r in rows]

    def get_for_class_and_date(self, class_id: str, day: date) -> Optional[AttendanceSession]:
        try:
            data = self._client.get(f"/readByClass/{class_id}/{day.strftime('%Y-%m-%d')}")
        except NotFoundError:
            return None
        if not data:
            return None
        return to_session(decode(AttendanceSessionOut, data))

    def create(self, submission: AttendanceSubmission) -> None:
        self._client.post("/attendance", json=_to_body(submission))

    def update(self, submission: AttendanceSubmission) -> None:
        self._client.put("/update/attendance", json=_to_body(submission))

    def get_report_sessions(
        self,
        *,
        start_date: date,
        end_date: date,
        class_id: Optional[str] = None,
    ) -> Sequence[AttendanceSession]:
        payload = self._client.get(
            "/attendanceReport/daily",
            params={
                "classId": class_id,
                "startDate": start_date.strftime("%Y-%m-%d"),
                "endDate": end_date.strftime("%Y-%m-%d"),
            },
        )
        rows = decode_list(AttendanceSessionOut, unwrap_data(payload))
        return [to_session(r) for r in rows]
