from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..classes.model import is_english_class


@dataclass(frozen=True)
class Student:
    student_id: str
    full_name: str
    class_id: Optional[str]
    class_name: Optional[str]
    shift: Optional[str]
    part: str = "None"
    phone: Optional[str] = None
    emergency_phone: Optional[str] = None

    @property
    def is_english(self) -> bool:
        return is_english_class(self.class_name)


@dataclass(frozen=True)
class ProgressResult:
    message: str
    updated: int
    details: dict
