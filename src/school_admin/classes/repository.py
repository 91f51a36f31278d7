from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union

from .model import SchoolClass


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def create(self, *, numeric_class_id: Optional[Union[int, str]], class_name: str) -> None:
        raise NotImplementedError

    def update(self, class_id: str, *, numeric_class_id: Optional[Union[int, str]], class_name: str) -> None:
        raise NotImplementedError

    def delete(self, class_id: str) -> None:
        raise NotImplementedError
