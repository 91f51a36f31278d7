from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ProgressResult, Student


class StudentRepository(Protocol):
    """Repository interface for students.

    Services depend on this interface, not on the HTTP client directly.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def search_by_name(self, name: str) -> Sequence[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        full_name: str,
        class_id: str,
        shift: str,
        part: str,
        phone: Optional[str],
        emergency_phone: Optional[str],
    ) -> None:
        raise NotImplementedError

    def update(
        self,
        student_id: str,
        *,
        full_name: str,
        class_id: str,
        shift: str,
        part: str,
        phone: Optional[str],
        emergency_phone: Optional[str],
    ) -> None:
        raise NotImplementedError

    def delete(self, student_id: str) -> None:
        raise NotImplementedError

    def progress_english_parts(self, *, from_parts: Optional[Sequence[str]] = None) -> ProgressResult:
        raise NotImplementedError
