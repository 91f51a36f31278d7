from __future__ import annotations

from typing import Optional, Sequence, Union

from ..api.client import ApiClient
from ..api.schemas import ClassOut, decode_list
from .model import SchoolClass
from .repository import ClassRepository


class ApiClassRepository(ClassRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[SchoolClass]:
        rows = decode_list(ClassOut, self._client.get("/read/class"))
        return [
            SchoolClass(class_id=r.id, numeric_class_id=r.numeric_class_id, class_name=r.class_name)
            for r in rows
        ]

    def create(self, *, numeric_class_id: Optional[Union[int, str]], class_name: str) -> None:
        self._client.post("/class", json={"classId": numeric_class_id, "className": class_name})

    def update(self, class_id: str, *, numeric_class_id: Optional[Union[int, str]], class_name: str) -> None:
        self._client.put(
            f"/update/class/{class_id}",
            json={"classId": numeric_class_id, "className": class_name},
        )

    def delete(self, class_id: str) -> None:
        self._client.delete(f"/delete/class/{class_id}")
