from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access checks."""

    ADMIN = "admin"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Status of one student inside an attendance session."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    EXCUSED = "Excused"


class Shift(str, Enum):
    """Class time-slot a student is enrolled in."""

    MORNING = "Morning"
    NOON = "Noon"
    AFTERNOON = "AfterNoon"
    NIGHT = "Night"
    THURSDAY_FRIDAY = "Khamiis iyo Jimco"


class Part(str, Enum):
    """Curriculum progress tag for English-track students."""

    NONE = "None"
    PART_0 = "Part 0"
    PART_1 = "Part 1"
    PART_2 = "Part 2"
    PART_3 = "Part 3"
    PART_4 = "Part 4"
    PART_5 = "Part 5"
    PART_6 = "Part 6"
    PART_7 = "Part 7"
    NEW_TOP_ONE = "New Top One"
    TOP_ONE = "Top One"
    CONGRATULATIONS = "Congratulations"


class Purpose(str, Enum):
    """What a finance payment was made for."""

    TUITION = "Tuition"
    EXAM = "Exam"
    REGISTRATION = "Registration"
    OTHER = "Other"
