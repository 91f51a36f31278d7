from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Teacher:
    teacher_id: str
    full_name: str
    email: Optional[str]
    phone: Optional[str]
    class_id: Optional[str]
    class_name: Optional[str] = None
