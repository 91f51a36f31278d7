from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..classes.repository import ClassRepository
from ..core.constants import MONTHS
from ..core.exceptions import AuthorizationError, ValidationError
from ..finance.model import PaymentStatus
from ..finance.repository import FinanceRepository
from ..users.model import SessionUser
from .attendance_aggregator import aggregate_attendance
from .filters import AttendanceFilters
from .finance_aggregator import month_report, year_report
from .model import AttendanceReport, FinanceReport


@dataclass(frozen=True)
class AttendanceReportQuery:
    """Server-side scope of the attendance report."""

    start: date
    end: date
    class_id: Optional[str] = None


@dataclass(frozen=True)
class FinanceReportQuery:
    year: int
    month: Optional[str] = None


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository, classes: ClassRepository):
        self._attendance = attendance
        self._classes = classes

    def build_report(
        self,
        *,
        user: SessionUser,
        query: AttendanceReportQuery,
        shift: Optional[str] = None,
        part: Optional[str] = None,
        status: Optional[str] = None,
    ) -> AttendanceReport:
        if query.start > query.end:
            raise ValidationError("Start date must be before end date")

        class_id = query.class_id
        if user.is_teacher and user.class_id:
            if class_id and class_id != user.class_id:
                raise AuthorizationError("You can only view reports for your assigned class")
            class_id = user.class_id

        sessions = self._attendance.get_report_sessions(start_date=query.start, end_date=query.end, class_id=class_id)

        class_name = None
        if class_id:
            class_name = next((c.class_name for c in self._classes.list_all() if c.class_id == class_id), None)

        filters = AttendanceFilters(class_name=class_name, shift=shift, part=part, status=status)
        return aggregate_attendance(sessions, filters, selected_class_name=class_name)


class FinanceReportService:
    def __init__(self, finance: FinanceRepository):
        self._finance = finance

    @staticmethod
    def _require_admin(user: SessionUser) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can view finance reports")

    def build_report(self, *, user: SessionUser, query: FinanceReportQuery) -> FinanceReport:
        self._require_admin(user)
        if query.month:
            if query.month not in MONTHS:
                raise ValidationError(f"Unknown month: {query.month}")
            return month_report(self._finance.get_month_report(month=query.month, year=query.year))
        return year_report(self._finance.get_monthly_report(year=query.year), year=query.year)

    def payment_status(self, *, user: SessionUser, query: FinanceReportQuery) -> PaymentStatus:
        self._require_admin(user)
        return self._finance.get_payment_status(month=query.month, year=query.year)
