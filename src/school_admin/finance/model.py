from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union


@dataclass(frozen=True)
class FinanceTransaction:
    """One payment received from a student."""

    transaction_id: str
    student_id: Optional[str]
    student_name: Optional[str]
    class_id: Optional[str]
    class_name: Optional[str]
    month: Optional[str]
    year: Optional[int]
    amount_paid: float
    purpose: Optional[str]
    date_paid: Optional[date]


@dataclass(frozen=True)
class MonthlyTotal:
    """Server-side income bucket of the yearly report."""

    month: Optional[Union[int, str]]
    year: Optional[int]
    total_amount: float


@dataclass(frozen=True)
class PaymentRecord:
    month: Optional[str]
    year: Optional[int]
    amount_paid: float
    purpose: Optional[str]


@dataclass(frozen=True)
class PaymentStudent:
    student_id: str
    full_name: str
    class_name: Optional[str]
    shift: Optional[str]
    records: tuple[PaymentRecord, ...] = ()

    @property
    def total_paid(self) -> float:
        return sum(r.amount_paid for r in self.records)


@dataclass(frozen=True)
class PaymentStatus:
    total: int
    paid: int
    unpaid: int
    period: Optional[str]
    paid_students: tuple[PaymentStudent, ...] = ()
    unpaid_students: tuple[PaymentStudent, ...] = ()
