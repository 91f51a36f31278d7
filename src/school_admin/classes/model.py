from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.constants import ENGLISH_MARKER


def is_english_class(class_name: Optional[str]) -> bool:
    """English-track classes carry the curriculum 'part' dimension."""
    return ENGLISH_MARKER in (class_name or "").lower()


@dataclass(frozen=True)
class SchoolClass:
    class_id: str
    numeric_class_id: Optional[Union[int, str]]
    class_name: str

    @property
    def is_english(self) -> bool:
        return is_english_class(self.class_name)


@dataclass(frozen=True)
class ClassOverview:
    """Class list row with derived enrolment and teacher info."""

    school_class: SchoolClass
    student_count: int
    teacher_name: str
