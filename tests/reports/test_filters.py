from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from school_admin.reports.filters import AttendanceFilters, StudentFilters, all_of, apply, equals, from_criteria


@dataclass(frozen=True)
class Row:
    full_name: str
    class_id: Optional[str] = None
    class_name: Optional[str] = None
    shift: Optional[str] = None
    part: Optional[str] = None
    status: Optional[str] = None


ROWS = [
    Row("Ali Hassan", "c1", "Grade 5", "Morning", "None", "Present"),
    Row("Bashir Omar", "c1", "Grade 5", "Noon", "None", "Absent"),
    Row("Cawo Yusuf", "c2", "English A", "Morning", "Part 1", "Present"),
]


def test_empty_criterion_is_not_a_predicate():
    assert equals("shift", None) is None
    assert equals("shift", "") is None
    assert apply(ROWS, all_of(None, None)) == ROWS


def test_predicates_are_and_composed():
    rows = apply(ROWS, from_criteria({"shift": "Morning", "status": "Present", "part": None}))

    assert [r.full_name for r in rows] == ["Ali Hassan", "Cawo Yusuf"]

    rows = apply(ROWS, from_criteria({"shift": "Morning", "class_name": "Grade 5"}))
    assert [r.full_name for r in rows] == ["Ali Hassan"]


def test_apply_returns_a_copy():
    out = apply(ROWS, all_of())

    assert out == ROWS
    assert out is not ROWS


def test_attendance_filters_status_only_for_records():
    filters = AttendanceFilters(shift="Morning", status="Absent")

    assert apply(ROWS, filters.record_predicate()) == []
    assert len(apply(ROWS, filters.student_predicate())) == 2
    assert not filters.is_empty
    assert AttendanceFilters(shift="").is_empty


def test_student_filters_search_is_case_insensitive():
    assert [r.full_name for r in apply(ROWS, StudentFilters(search="bash").predicate())] == ["Bashir Omar"]
    assert [r.full_name for r in apply(ROWS, StudentFilters(search="english").predicate())] == ["Cawo Yusuf"]
    assert [r.full_name for r in apply(ROWS, StudentFilters(class_id="c1", shift="Noon").predicate())] == [
        "Bashir Omar"
    ]
