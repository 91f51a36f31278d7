from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.schemas import ProgressOut, StudentOut, decode, decode_list
from .model import ProgressResult, Student
from .repository import StudentRepository


def to_student(row: StudentOut) -> Student:
    return Student(
        student_id=row.id,
        full_name=row.full_name,
        class_id=row.class_ref.id if row.class_ref else None,
        class_name=row.class_ref.class_name if row.class_ref else None,
        shift=row.shift,
        part=row.part or "None",
        phone=row.phone,
        emergency_phone=row.emergency_phone,
    )


class ApiStudentRepository(StudentRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Student]:
        rows = decode_list(StudentOut, self._client.get("/read/student"))
        return [to_student(r) for r in rows]

    def search_by_name(self, name: str) -> Sequence[Student]:
        rows = decode_list(StudentOut, self._client.get("/search/student", params={"name": name}))
        return [to_student(r) for r in rows]

    @staticmethod
    def _payload(*, full_name, class_id, shift, part, phone, emergency_phone) -> dict:
        return {
            "fullName": full_name,
            "classId": class_id,
            "shift": shift,
            "Parts": part,
            "phone": phone or "",
            "emergencyPhone": emergency_phone or "",
        }

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
        self._client.post(
            "/student",
            json=self._payload(
                full_name=full_name,
                class_id=class_id,
                shift=shift,
                part=part,
                phone=phone,
                emergency_phone=emergency_phone,
            ),
        )

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
        self._client.put(
            f"/update/student/{student_id}",
            json=self._payload(
                full_name=full_name,
                class_id=class_id,
                shift=shift,
                part=part,
                phone=phone,
                emergency_phone=emergency_phone,
            ),
        )

    def delete(self, student_id: str) -> None:
        self._client.delete(f"/delete/student/{student_id}")

    def progress_english_parts(self, *, from_parts: Optional[Sequence[str]] = None) -> ProgressResult:
        body = {"fromParts": list(from_parts)} if from_parts else {}
        out = decode(ProgressOut, self._client.post("/progress/english-parts", json=body))
        return ProgressResult(message=out.message, updated=out.updated, details=dict(out.details))
