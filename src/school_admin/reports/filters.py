"""Filter predicate composition.

Each filter dimension is an independent equality predicate. A record is
kept only when it satisfies every active predicate; an empty criterion is
not a predicate at all, so clearing a field means "match all".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")
Predicate = Callable[[Any], bool]


def _active(value: Any) -> bool:
    return value is not None and value != ""


def equals(attr: str, expected: Any) -> Optional[Predicate]:
    """Equality predicate on one attribute, or None when the criterion is empty."""

    if not _active(expected):
        return None
    return lambda record: getattr(record, attr, None) == expected


def contains_text(attrs: Sequence[str], text: Optional[str]) -> Optional[Predicate]:
    """Case-insensitive substring match against any of ``attrs``."""

    if not _active(text):
        return None
    needle = text.lower()

    def _match(record) -> bool:
        return any(needle in (getattr(record, a, None) or "").lower() for a in attrs)

    return _match


def all_of(*predicates: Optional[Predicate]) -> Predicate:
    active = [p for p in predicates if p is not None]
    return lambda record: all(p(record) for p in active)


def from_criteria(criteria: Mapping[str, Any]) -> Predicate:
    """AND of equality predicates, one per attribute in ``criteria``."""

    return all_of(*(equals(attr, value) for attr, value in criteria.items()))


def apply(records: Iterable[T], predicate: Predicate) -> List[T]:
    """Filtered copy; the input collection is never modified."""

    return [r for r in records if predicate(r)]


@dataclass(frozen=True)
class AttendanceFilters:
    class_name: Optional[str] = None
    shift: Optional[str] = None
    part: Optional[str] = None
    status: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not any(_active(v) for v in (self.class_name, self.shift, self.part, self.status))

    def record_predicate(self) -> Predicate:
        return from_criteria(
            {
                "class_name": self.class_name,
                "shift": self.shift,
                "part": self.part,
                "status": self.status,
            }
        )

    def student_predicate(self) -> Predicate:
        # Status describes a single day, not a student.
        return from_criteria({"class_name": self.class_name, "shift": self.shift, "part": self.part})


@dataclass(frozen=True)
class StudentFilters:
    search: Optional[str] = None
    class_id: Optional[str] = None
    shift: Optional[str] = None
    part: Optional[str] = None

    def predicate(self) -> Predicate:
        return all_of(
            contains_text(("full_name", "class_name"), self.search),
            equals("class_id", self.class_id),
            equals("shift", self.shift),
            equals("part", self.part),
        )
