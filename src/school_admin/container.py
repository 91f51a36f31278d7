from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from .api.client import ApiClient
from .api.connection import ApiConfig, ApiConnection
from .attendance.api_attendance_repository import ApiAttendanceRepository
from .attendance.service import AttendanceService
from .classes.api_class_repository import ApiClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_DASHBOARD_WORKERS
from .dashboard.service import DashboardService
from .finance.api_finance_repository import ApiFinanceRepository
from .finance.service import FinanceService
from .reports.service import AttendanceReportService, FinanceReportService
from .students.api_student_repository import ApiStudentRepository
from .students.service import StudentService
from .teachers.api_teacher_repository import ApiTeacherRepository
from .teachers.service import TeacherService
from .users.api_user_repository import ApiAuthRepository, ApiUserRepository
from .users.service import AuthService, UserService
from .users.session import SessionStore


@dataclass(frozen=True)
class Container:
    client: ApiClient
    session: SessionStore

    students_repo: ApiStudentRepository
    teachers_repo: ApiTeacherRepository
    classes_repo: ApiClassRepository
    attendance_repo: ApiAttendanceRepository
    finance_repo: ApiFinanceRepository
    auth_repo: ApiAuthRepository
    users_repo: ApiUserRepository

    auth_service: AuthService
    user_service: UserService
    student_service: StudentService
    teacher_service: TeacherService
    class_service: ClassService
    attendance_service: AttendanceService
    finance_service: FinanceService
    attendance_report_service: AttendanceReportService
    finance_report_service: FinanceReportService
    dashboard_service: DashboardService


def build_container(
    *,
    api_config: dict,
    session: SessionStore,
    transport: Optional[httpx.BaseTransport] = None,
    dashboard_workers: int = DEFAULT_DASHBOARD_WORKERS,
) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]).rstrip("/"),
        timeout=float(api_config.get("timeout", 20)),
    )
    client = ApiClient(ApiConnection(config, transport=transport), session)

    students_repo = ApiStudentRepository(client)
    teachers_repo = ApiTeacherRepository(client)
    classes_repo = ApiClassRepository(client)
    attendance_repo = ApiAttendanceRepository(client)
    finance_repo = ApiFinanceRepository(client)
    auth_repo = ApiAuthRepository(client)
    users_repo = ApiUserRepository(client)

    return Container(
        client=client,
        session=session,
        students_repo=students_repo,
        teachers_repo=teachers_repo,
        classes_repo=classes_repo,
        attendance_repo=attendance_repo,
        finance_repo=finance_repo,
        auth_repo=auth_repo,
        users_repo=users_repo,
        auth_service=AuthService(auth_repo, session),
        user_service=UserService(users_repo, teachers_repo),
        student_service=StudentService(students_repo),
        teacher_service=TeacherService(teachers_repo),
        class_service=ClassService(classes_repo, students_repo, teachers_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo, teachers_repo, classes_repo),
        finance_service=FinanceService(finance_repo),
        attendance_report_service=AttendanceReportService(attendance_repo, classes_repo),
        finance_report_service=FinanceReportService(finance_repo),
        dashboard_service=DashboardService(
            students_repo,
            teachers_repo,
            classes_repo,
            attendance_repo,
            finance_repo,
            max_workers=dashboard_workers,
        ),
    )
