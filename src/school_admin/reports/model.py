from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class FlatAttendanceRecord:
    """One student's status on one day, flattened out of a session."""

    date: str
    class_name: str
    student_id: Optional[str]
    student_name: str
    shift: str
    part: str
    status: str
    is_english_class: bool


@dataclass(frozen=True)
class DailyStat:
    date: str
    present: int
    absent: int
    total: int
    percentage: int


@dataclass(frozen=True)
class StudentStat:
    student_id: Optional[str]
    name: str
    class_name: str
    shift: str
    part: str
    present: int
    absent: int
    percentage: int


@dataclass(frozen=True)
class AttendanceReport:
    total_days: int
    total_students: int
    average_attendance: int
    daily_attendance: list[DailyStat]
    student_attendance: list[StudentStat]
    records: list[FlatAttendanceRecord]
    present_students: list[StudentStat]
    absent_students: list[StudentStat]
    show_part_filter: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class IncomeLine:
    name: str
    amount: float


@dataclass(frozen=True)
class MonthlyIncome:
    month: Union[int, str]
    year: Optional[int]
    income: float
    expenses: float = 0


@dataclass(frozen=True)
class FinanceReport:
    """Either a purpose breakdown (one month) or a month trend (one year)."""

    mode: str
    income: list[IncomeLine] = field(default_factory=list)
    monthly: list[MonthlyIncome] = field(default_factory=list)
    total_income: float = 0
    total_expenses: float = 0

    @property
    def net_balance(self) -> float:
        # No expense tracking exists.
        return self.total_income - self.total_expenses

    def to_dict(self) -> dict:
        data = asdict(self)
        data["net_balance"] = self.net_balance
        return data


@dataclass(frozen=True)
class FinanceSummary:
    total_income: float
    monthly_income: float
    weekly_income: float
    per_purpose: list[IncomeLine]

    def to_dict(self) -> dict:
        return asdict(self)
