from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.schemas import TeacherOut, decode_list
from .model import Teacher
from .repository import TeacherRepository

_WIRE_NAMES = {
    "full_name": "fullName",
    "email": "email",
    "phone": "phone",
    "class_id": "classId",
}


def to_teacher(row: TeacherOut) -> Teacher:
    return Teacher(
        teacher_id=row.id,
        full_name=row.full_name,
        email=row.email,
        phone=row.phone,
        class_id=row.class_ref.id if row.class_ref else None,
        class_name=row.class_ref.class_name if row.class_ref else None,
    )


class ApiTeacherRepository(TeacherRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Teacher]:
        return [to_teacher(r) for r in decode_list(TeacherOut, self._client.get("/read/teacher"))]

    def list_without_accounts(self) -> Sequence[Teacher]:
        rows = decode_list(TeacherOut, self._client.get("/api/teachers/without-accounts"))
        return [to_teacher(r) for r in rows]

    def create(self, *, full_name: str, email: Optional[str], phone: Optional[str], class_id: Optional[str]) -> None:
        self._client.post(
            "/teacher",
            json={"fullName": full_name, "email": email or "", "phone": phone or "", "classId": class_id or None},
        )

    def update(self, teacher_id: str, fields: dict) -> None:
        body = {_WIRE_NAMES[k]: v for k, v in fields.items() if k in _WIRE_NAMES}
        self._client.put(f"/update/teacher/{teacher_id}", json=body)

    def delete(self, teacher_id: str) -> None:
        self._client.delete(f"/delete/teacher/{teacher_id}")
