from __future__ import annotations

import json
from datetime import date, datetime

import httpx
import pytest

from school_admin.api.client import ApiClient
from school_admin.api.connection import ApiConfig, ApiConnection
from school_admin.attendance.api_attendance_repository import ApiAttendanceRepository
from school_admin.attendance.model import AttendanceSubmission, SubmissionEntry
from school_admin.core.exceptions import DecodeError
from school_admin.finance.api_finance_repository import ApiFinanceRepository
from school_admin.students.api_student_repository import ApiStudentRepository
from school_admin.users.api_user_repository import ApiAuthRepository
from school_admin.users.session import InMemorySessionStore


class FakeBackend:
    """Canned JSON per (method, path); records every request."""

    def __init__(self, routes):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Not found"})
        status, body = self.routes[key]
        return httpx.Response(status, json=body)

    def body(self, index: int = -1):
        return json.loads(self.requests[index].content)


def _client(backend: FakeBackend) -> ApiClient:
    conn = ApiConnection(ApiConfig(base_url="http://backend.test"), transport=httpx.MockTransport(backend))
    return ApiClient(conn, InMemorySessionStore())


def test_student_class_may_be_id_or_object():
    backend = FakeBackend(
        {
            ("GET", "/read/student"): (
                200,
                [
                    {"_id": "s1", "fullName": "Ali", "classId": {"_id": "c1", "className": "Grade 5"}, "shift": "Morning"},
                    {"_id": "s2", "fullName": "Bashir", "classId": "c2", "Parts": "Part 3", "extra": True},
                    {"_id": "s3", "fullName": "Cawo", "classId": None},
                ],
            )
        }
    )

    students = ApiStudentRepository(_client(backend)).list_all()

    assert [(s.student_id, s.class_id, s.class_name, s.part) for s in students] == [
        ("s1", "c1", "Grade 5", "None"),
        ("s2", "c2", None, "Part 3"),
        ("s3", None, None, "None"),
    ]


def test_malformed_payload_is_decode_error():
    backend = FakeBackend({("GET", "/read/student"): (200, [{"fullName": "no id"}])})

    with pytest.raises(DecodeError):
        ApiStudentRepository(_client(backend)).list_all()


def test_attendance_sessions_decode_with_populated_refs():
    backend = FakeBackend(
        {
            ("GET", "/attendanceReport/daily"): (
                200,
                {
                    "success": True,
                    "data": [
                        {
                            "_id": "a1",
                            "classId": {"_id": "c1", "className": "English A"},
                            "teacherName": {"_id": "t1", "fullName": "Amina"},
                            "createdAt": "2024-01-01T08:00:00.000Z",
                            "students": [
                                {
                                    "studentName": {"_id": "s1", "fullName": "Ali", "shift": "Noon", "Parts": "Part 2"},
                                    "status": "Absent",
                                    "date": "2024-01-01T00:00:00.000Z",
                                },
                                {"studentName": "s2", "status": "Present", "date": "2024-01-01"},
                            ],
                        }
                    ],
                },
            )
        }
    )

    sessions = ApiAttendanceRepository(_client(backend)).get_report_sessions(
        start_date=date(2024, 1, 1), end_date=date(2024, 1, 7), class_id=None
    )

    params = dict(backend.requests[0].url.params)
    assert params == {"startDate": "2024-01-01", "endDate": "2024-01-07"}
    s = sessions[0]
    assert (s.class_name, s.teacher_name) == ("English A", "Amina")
    first, second = s.entries
    assert (first.student_name, first.shift, first.part, first.status) == ("Ali", "Noon", "Part 2", "Absent")
    assert second.student_id == "s2"
    assert second.date == datetime(2024, 1, 1)


def test_missing_session_for_day_is_none():
    backend = FakeBackend({})

    assert ApiAttendanceRepository(_client(backend)).get_for_class_and_date("c1", date(2024, 1, 1)) is None
    assert backend.requests[0].url.path == "/readByClass/c1/2024-01-01"


def test_submission_body_uses_backend_names():
    backend = FakeBackend({("POST", "/attendance"): (201, {"message": "Attendance created"})})
    submission = AttendanceSubmission(
        class_id="c1",
        teacher_id="t1",
        date="2024-01-01",
        entries=(SubmissionEntry("s1", "Morning", "Present"),),
    )

    ApiAttendanceRepository(_client(backend)).create(submission)

    assert backend.body() == {
        "classId": "c1",
        "teacherName": "t1",
        "students": [{"studentName": "s1", "shift": "Morning", "status": "Present", "date": "2024-01-01"}],
    }


def test_finance_transactions_and_payment_status():
    backend = FakeBackend(
        {
            ("GET", "/read/finance"): (
                200,
                [
                    {
                        "_id": "f1",
                        "fullName": {"_id": "s1", "fullName": "Ali"},
                        "classId": "c1",
                        "month": "March",
                        "year": 2024,
                        "amountPaid": 50,
                        "purpose": "Tuition",
                        "datePaid": "2024-03-02T00:00:00.000Z",
                    }
                ],
            ),
            ("GET", "/report/students/payment-status"): (
                200,
                {
                    "total": 2,
                    "paid": 1,
                    "unpaid": 1,
                    "filter": {"month": "March", "year": 2024},
                    "students": {
                        "paid": [
                            {
                                "_id": "s1",
                                "fullName": "Ali",
                                "classId": {"_id": "c1", "className": "Grade 5"},
                                "financeRecords": [{"month": "March", "year": 2024, "amountPaid": 50}],
                            }
                        ],
                        "unpaid": [{"_id": "s2", "fullName": "Bashir"}],
                    },
                },
            ),
        }
    )
    repo = ApiFinanceRepository(_client(backend))

    tx = repo.list_all()[0]
    status = repo.get_payment_status(month="March", year=2024)

    assert (tx.student_name, tx.amount_paid, tx.date_paid) == ("Ali", 50.0, date(2024, 3, 2))
    assert status.period == "March 2024"
    assert status.paid_students[0].total_paid == 50
    assert status.unpaid_students[0].records == ()


def test_finance_body_formats_dates():
    backend = FakeBackend({("POST", "/finance"): (201, {})})

    ApiFinanceRepository(_client(backend)).create(
        {"student_id": "s1", "amount_paid": 20.0, "date_paid": date(2024, 5, 1), "purpose": "Exam"}
    )

    assert backend.body() == {"fullName": "s1", "amountPaid": 20.0, "datePaid": "2024-05-01", "purpose": "Exam"}


def test_login_accepts_either_id_key():
    backend = FakeBackend(
        {
            ("POST", "/api/auth/login"): (
                200,
                {"token": "jwt", "user": {"_id": "u1", "email": "t@s.o", "role": "teacher", "name": "Amina", "classId": "c1"}},
            )
        }
    )

    token, user = ApiAuthRepository(_client(backend)).login(email="t@s.o", password="secret1", role="teacher")

    assert token == "jwt"
    assert (user.user_id, user.full_name, user.class_id, user.is_teacher) == ("u1", "Amina", "c1", True)
