from __future__ import annotations

import pytest

from school_admin.core.enums import Part
from school_admin.core.exceptions import ValidationError
from school_admin.students.model import Student
from school_admin.students.progression import (
    PART_TRANSITIONS,
    next_part,
    preview_progression,
    transition_label,
    validate_from_parts,
)


def _student(student_id, part, class_name="English A"):
    return Student(student_id=student_id, full_name=student_id, class_id="c", class_name=class_name, shift="Morning", part=part)


def test_named_levels_follow_part_seven():
    assert next_part("Part 6") is Part.PART_7
    assert next_part("Part 7") is Part.NEW_TOP_ONE
    assert next_part("New Top One") is Part.TOP_ONE
    assert next_part("Top One") is Part.CONGRATULATIONS
    assert next_part("Congratulations") is None
    assert next_part("None") is None
    assert next_part("Part 99") is None


def test_transition_label():
    assert transition_label(Part.PART_7) == "Part 7 → New Top One"


def test_validate_from_parts():
    assert validate_from_parts(None) == []
    assert validate_from_parts(["Part 1", "Part 1", "Top One"]) == ["Part 1", "Top One"]
    with pytest.raises(ValidationError):
        validate_from_parts(["Congratulations"])
    with pytest.raises(ValidationError):
        validate_from_parts(["Part X"])


def test_preview_counts_only_english_students():
    students = [
        _student("a", "Part 1"),
        _student("b", "Part 1"),
        _student("c", "Part 7"),
        _student("d", "Congratulations"),
        _student("e", "Part 1", class_name="Grade 5"),
    ]

    preview = preview_progression(students)

    assert len(preview) == len(PART_TRANSITIONS)
    assert preview["Part 1 → Part 2"] == 2
    assert preview["Part 7 → New Top One"] == 1
    assert preview["Part 0 → Part 1"] == 0


def test_preview_respects_selected_parts():
    students = [_student("a", "Part 1"), _student("c", "Part 7")]

    preview = preview_progression(students, ["Part 7"])

    assert preview["Part 1 → Part 2"] == 0
    assert preview["Part 7 → New Top One"] == 1
