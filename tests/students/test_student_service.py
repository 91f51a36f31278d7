from __future__ import annotations

from typing import Optional, Sequence

import pytest

from school_admin.core.exceptions import AuthorizationError, ValidationError
from school_admin.reports.filters import StudentFilters
from school_admin.students.model import ProgressResult, Student
from school_admin.students.service import StudentService


class InMemoryStudents:
    def __init__(self, students):
        self._students = list(students)
        self.created: list[dict] = []
        self.updated: list[tuple[str, dict]] = []
        self.deleted: list[str] = []
        self.searched: list[str] = []
        self.progressed: list[Optional[Sequence[str]]] = []

    def list_all(self):
        return list(self._students)

    def search_by_name(self, name: str):
        self.searched.append(name)
        return [s for s in self._students if name.lower() in s.full_name.lower()]

    def create(self, **fields):
        self.created.append(fields)

    def update(self, student_id: str, **fields):
        self.updated.append((student_id, fields))

    def delete(self, student_id: str):
        self.deleted.append(student_id)

    def progress_english_parts(self, *, from_parts=None):
        self.progressed.append(from_parts)
        return ProgressResult(message="Progressed 1 students", updated=1, details={"Part 1 → Part 2": 1})


STUDENTS = [
    Student(student_id="s1", full_name="Ali Hassan", class_id="c1", class_name="Grade 5", shift="Morning"),
    Student(student_id="s2", full_name="Bashir Omar", class_id="c2", class_name="English A", shift="Noon", part="Part 1"),
]


def test_teacher_sees_only_own_class(teacher, admin):
    svc = StudentService(InMemoryStudents(STUDENTS))

    assert [s.student_id for s in svc.list_for(teacher)] == ["s1"]
    assert [s.student_id for s in svc.list_for(admin)] == ["s1", "s2"]
    assert [s.student_id for s in svc.list_for(admin, StudentFilters(shift="Noon"))] == ["s2"]


def test_short_search_does_not_hit_backend():
    repo = InMemoryStudents(STUDENTS)
    svc = StudentService(repo)

    assert svc.search_by_name(" a ") == []
    assert repo.searched == []
    assert [s.student_id for s in svc.search_by_name("bash")] == ["s2"]


def test_save_validates_and_maps_fields(admin):
    repo = InMemoryStudents(STUDENTS)
    svc = StudentService(repo)

    svc.save(user=admin, data={"fullName": " Cawo ", "classId": "c1", "shift": "Night", "phone": " 555 "})

    assert repo.created == [
        {
            "full_name": "Cawo",
            "class_id": "c1",
            "shift": "Night",
            "part": "None",
            "phone": "555",
            "emergency_phone": None,
        }
    ]

    svc.save(user=admin, student_id="s1", data={"fullName": "Ali", "classId": "c1", "Parts": "Part 3"})
    assert repo.updated[0][0] == "s1"
    assert repo.updated[0][1]["part"] == "Part 3"


@pytest.mark.parametrize(
    "data",
    [
        {"classId": "c1"},
        {"fullName": "X"},
        {"fullName": "X", "classId": "c1", "shift": "Evening"},
        {"fullName": "X", "classId": "c1", "Parts": "Part 12"},
    ],
)
def test_save_rejects_bad_input(admin, data):
    repo = InMemoryStudents(STUDENTS)

    with pytest.raises(ValidationError):
        StudentService(repo).save(user=admin, data=data)
    assert repo.created == []


def test_teachers_cannot_change_students(teacher):
    repo = InMemoryStudents(STUDENTS)
    svc = StudentService(repo)

    with pytest.raises(AuthorizationError):
        svc.save(user=teacher, data={"fullName": "X", "classId": "c1"})
    with pytest.raises(AuthorizationError):
        svc.delete(user=teacher, student_id="s1")
    with pytest.raises(AuthorizationError):
        svc.progress_english_parts(user=teacher)
    assert repo.deleted == []


def test_progression_forwards_selected_parts(admin):
    repo = InMemoryStudents(STUDENTS)
    svc = StudentService(repo)

    result = svc.progress_english_parts(user=admin, from_parts=["Part 1"])
    svc.progress_english_parts(user=admin)

    assert result.updated == 1
    assert repo.progressed == [["Part 1"], None]
    assert svc.preview_english_progression()["Part 1 → Part 2"] == 1
