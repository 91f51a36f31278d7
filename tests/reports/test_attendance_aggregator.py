from __future__ import annotations

from datetime import datetime, timezone

import pytest

from school_admin.attendance.model import AttendanceEntry, AttendanceSession
from school_admin.reports.attendance_aggregator import aggregate_attendance, flatten_sessions
from school_admin.reports.filters import AttendanceFilters


def _entry(student_id, name, status, day, *, shift="Morning", part=None):
    return AttendanceEntry(
        student_id=student_id,
        student_name=name,
        shift=shift,
        part=part,
        status=status,
        date=day,
    )


def _session(entries, *, class_name="Grade 5", created_at=None):
    return AttendanceSession(
        session_id="s",
        class_id="c1",
        class_name=class_name,
        teacher_id="t1",
        teacher_name="Amina",
        created_at=created_at,
        entries=tuple(entries),
    )


JAN_1 = datetime(2024, 1, 1)
JAN_2 = datetime(2024, 1, 2)


def _two_days():
    return [
        _session(
            [
                _entry("s1", "Ali", "Present", JAN_1),
                _entry("s2", "Bashir", "Present", JAN_1),
                _entry("s3", "Cawo", "Absent", JAN_1),
            ]
        ),
        _session(
            [
                _entry("s1", "Ali", "Present", JAN_2),
                _entry("s2", "Bashir", "Present", JAN_2),
                _entry("s3", "Cawo", "Present", JAN_2),
            ]
        ),
    ]


def test_daily_percentages_round_half_up():
    report = aggregate_attendance(_two_days())

    assert [(d.date, d.present, d.absent, d.total, d.percentage) for d in report.daily_attendance] == [
        ("2024-01-01", 2, 1, 3, 67),
        ("2024-01-02", 3, 0, 3, 100),
    ]
    assert report.total_days == 2
    assert report.total_students == 3


def test_student_stats_and_average():
    report = aggregate_attendance(_two_days())

    by_id = {s.student_id: s for s in report.student_attendance}
    assert by_id["s1"].percentage == 100
    assert (by_id["s3"].present, by_id["s3"].absent, by_id["s3"].percentage) == (1, 1, 50)
    # (100 + 100 + 50) / 3 = 83.33
    assert report.average_attendance == 83


def test_mixed_student_is_in_both_groups():
    report = aggregate_attendance(_two_days())

    assert "s3" in {s.student_id for s in report.present_students}
    assert "s3" in {s.student_id for s in report.absent_students}
    assert "s1" not in {s.student_id for s in report.absent_students}


def test_status_filter_narrows_daily_stats():
    report = aggregate_attendance(_two_days(), AttendanceFilters(status="Absent"))

    assert [(d.date, d.present, d.absent, d.percentage) for d in report.daily_attendance] == [
        ("2024-01-01", 0, 1, 0),
    ]
    assert all(r.status == "Absent" for r in report.records)
    # status does not narrow the per-student list
    assert report.total_students == 3


def test_clearing_filters_restores_unfiltered_report():
    sessions = _two_days()
    unfiltered = aggregate_attendance(sessions)

    aggregate_attendance(sessions, AttendanceFilters(shift="Noon", status="Absent"))
    again = aggregate_attendance(sessions, AttendanceFilters())

    assert again == unfiltered
    assert len(sessions[0].entries) == 3


def test_empty_sessions_do_not_create_days():
    sessions = _two_days() + [_session([], created_at=datetime(2024, 1, 3))]

    report = aggregate_attendance(sessions)

    assert [d.date for d in report.daily_attendance] == ["2024-01-01", "2024-01-02"]


def test_entry_without_date_falls_back_to_session_timestamp():
    session = _session([_entry("s1", "Ali", "Present", None)], created_at=datetime(2024, 2, 5, 9, 30))

    records = flatten_sessions([session])

    assert records[0].date == "2024-02-05"


def test_utc_timestamps_keep_their_calendar_day():
    day = datetime(2024, 3, 4, 0, 0, tzinfo=timezone.utc)

    records = flatten_sessions([_session([_entry("s1", "Ali", "Present", day)])])

    assert records[0].date == "2024-03-04"


def test_missing_fields_get_defaults():
    entry = AttendanceEntry(student_id="s9", student_name=None, shift=None, part=None, status=None, date=JAN_1)

    record = flatten_sessions([_session([entry], class_name=None)])[0]

    assert record.student_name == "Unknown"
    assert record.class_name == "Unknown"
    assert record.shift == "Unknown"
    assert record.part == "None"
    assert record.status == "Present"


def test_part_filter_shown_for_english_classes():
    sessions = [
        _session([_entry("s1", "Ali", "Present", JAN_1, part="Part 2")], class_name="English A"),
    ]

    assert aggregate_attendance(sessions).show_part_filter is True
    assert aggregate_attendance(_two_days()).show_part_filter is False


def test_part_filter_applies_to_records_and_students():
    sessions = [
        _session(
            [
                _entry("s1", "Ali", "Present", JAN_1, part="Part 2"),
                _entry("s2", "Bashir", "Absent", JAN_1, part="Part 3"),
            ],
            class_name="English A",
        )
    ]

    report = aggregate_attendance(sessions, AttendanceFilters(part="Part 3"))

    assert [s.student_id for s in report.student_attendance] == ["s2"]
    assert report.daily_attendance[0].percentage == 0


def test_no_sessions_gives_empty_report():
    report = aggregate_attendance([])

    assert report.total_days == 0
    assert report.total_students == 0
    assert report.average_attendance == 0


def test_late_and_excused_count_as_absent_but_filter_by_raw_status():
    sessions = [
        _session(
            [
                _entry("s1", "Ali", "Present", JAN_1),
                _entry("s2", "Bashir", "Late", JAN_1),
                _entry("s3", "Cawo", "Excused", JAN_1),
            ]
        )
    ]

    report = aggregate_attendance(sessions)
    day = report.daily_attendance[0]
    assert (day.present, day.absent, day.percentage) == (1, 2, 33)

    late = aggregate_attendance(sessions, AttendanceFilters(status="Late"))
    assert [(d.present, d.absent) for d in late.daily_attendance] == [(0, 1)]
    assert [r.status for r in late.records] == ["Late"]


@pytest.mark.parametrize(
    "filters",
    [
        AttendanceFilters(),
        AttendanceFilters(status="Present"),
        AttendanceFilters(status="Absent"),
        AttendanceFilters(shift="Noon"),
        AttendanceFilters(class_name="Grade 5", shift="Morning", status="Present"),
        AttendanceFilters(class_name="Elsewhere"),
    ],
)
def test_daily_totals_add_up_to_filtered_records(filters):
    sessions = _two_days() + [
        _session([_entry("s4", "Dahir", "Late", JAN_2, shift="Noon")]),
    ]

    report = aggregate_attendance(sessions, filters)

    assert sum(d.present + d.absent for d in report.daily_attendance) == len(report.records)
    assert all(d.total == d.present + d.absent for d in report.daily_attendance)


def test_entry_without_any_date_is_left_out():
    report = aggregate_attendance([_session([_entry("s1", "Ali", "Present", None)], created_at=None)])

    assert report.records == []
    assert report.total_students == 0
