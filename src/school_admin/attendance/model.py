from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceEntry:
    """One student's status inside a session."""

    student_id: Optional[str]
    student_name: Optional[str]
    shift: Optional[str]
    part: Optional[str]
    status: Optional[str]
    date: Optional[datetime]


@dataclass(frozen=True)
class AttendanceSession:
    """One class's attendance submission for one calendar date."""

    session_id: Optional[str]
    class_id: Optional[str]
    class_name: Optional[str]
    teacher_id: Optional[str]
    teacher_name: Optional[str]
    created_at: Optional[datetime]
    entries: tuple[AttendanceEntry, ...] = ()


@dataclass(frozen=True)
class SubmissionEntry:
    student_id: str
    shift: Optional[str]
    status: str


@dataclass(frozen=True)
class AttendanceSubmission:
    """Full-session payload sent to the backend."""

    class_id: str
    teacher_id: str
    date: str
    entries: tuple[SubmissionEntry, ...]

    @property
    def present_count(self) -> int:
        return sum(1 for e in self.entries if e.status == "Present")

    @property
    def absent_count(self) -> int:
        return len(self.entries) - self.present_count


@dataclass(frozen=True)
class RosterRow:
    """Marking sheet row: an enrolled student and their current status."""

    student_id: str
    full_name: str
    shift: Optional[str]
    part: str
    status: str
