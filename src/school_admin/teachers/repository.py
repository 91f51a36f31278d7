from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Teacher


class TeacherRepository(Protocol):
    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def list_without_accounts(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def create(self, *, full_name: str, email: Optional[str], phone: Optional[str], class_id: Optional[str]) -> None:
        raise NotImplementedError

    def update(self, teacher_id: str, fields: dict) -> None:
        """Partial update; ``fields`` uses domain names (full_name, class_id, ...)."""

        raise NotImplementedError

    def delete(self, teacher_id: str) -> None:
        raise NotImplementedError
