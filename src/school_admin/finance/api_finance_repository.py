from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..api.schemas import FinanceOut, MonthlyTotalOut, PaymentStatusOut, PaymentStudentOut, decode, decode_list
from ..common.datetime_utils import to_day
from .model import FinanceTransaction, MonthlyTotal, PaymentRecord, PaymentStatus, PaymentStudent
from .repository import FinanceRepository

_WIRE_NAMES = {
    "student_id": "fullName",
    "class_id": "classId",
    "month": "month",
    "year": "year",
    "amount_paid": "amountPaid",
    "purpose": "purpose",
    "date_paid": "datePaid",
}


def to_transaction(row: FinanceOut) -> FinanceTransaction:
    return FinanceTransaction(
        transaction_id=row.id,
        student_id=row.student.id if row.student else None,
        student_name=row.student.full_name if row.student else None,
        class_id=row.class_ref.id if row.class_ref else None,
        class_name=row.class_ref.class_name if row.class_ref else None,
        month=row.month,
        year=row.year,
        amount_paid=float(row.amount_paid or 0),
        purpose=row.purpose,
        date_paid=to_day(row.date_paid),
    )


def _to_payment_student(row: PaymentStudentOut) -> PaymentStudent:
    return PaymentStudent(
        student_id=row.id,
        full_name=row.full_name,
        class_name=row.class_ref.class_name if row.class_ref else None,
        shift=row.shift,
        records=tuple(
            PaymentRecord(month=r.month, year=r.year, amount_paid=float(r.amount_paid or 0), purpose=r.purpose)
            for r in row.finance_records
        ),
    )


def _to_body(fields: dict) -> dict:
    body = {}
    for key, value in fields.items():
        if key not in _WIRE_NAMES:
            continue
        if key == "date_paid" and value is not None:
            value = value.strftime("%Y-%m-%d")
        body[_WIRE_NAMES[key]] = value
    return body


class ApiFinanceRepository(FinanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[FinanceTransaction]:
        return [to_transaction(r) for r in decode_list(FinanceOut, self._client.get("/read/finance"))]

    def create(self, fields: dict) -> None:
        self._client.post("/finance", json=_to_body(fields))

    def update(self, transaction_id: str, fields: dict) -> None:
        self._client.put(f"/update/finance/{transaction_id}", json=_to_body(fields))

    def delete(self, transaction_id: str) -> None:
        self._client.delete(f"/delete/finance/{transaction_id}")

    def get_month_report(self, *, month: str, year: int) -> Sequence[FinanceTransaction]:
        data = self._client.get("/report/month", params={"month": month, "year": year})
        return [to_transaction(r) for r in decode_list(FinanceOut, data)]

    def get_monthly_report(self, *, year: int) -> Sequence[MonthlyTotal]:
        rows = decode_list(MonthlyTotalOut, self._client.get("/report/monthly", params={"year": year}))
        return [
            MonthlyTotal(
                month=r.bucket.month if r.bucket else None,
                year=r.bucket.year if r.bucket else None,
                total_amount=float(r.total_amount or 0),
            )
            for r in rows
        ]

    def get_payment_status(self, *, month: Optional[str] = None, year: Optional[int] = None) -> PaymentStatus:
        out = decode(
            PaymentStatusOut,
            self._client.get("/report/students/payment-status", params={"month": month, "year": year}),
        )
        if out.filter is None or isinstance(out.filter, str):
            period = None
        else:
            period = " ".join(str(p) for p in (out.filter.month, out.filter.year) if p is not None) or None
        return PaymentStatus(
            total=out.total,
            paid=out.paid,
            unpaid=out.unpaid,
            period=period,
            paid_students=tuple(_to_payment_student(s) for s in out.students.paid),
            unpaid_students=tuple(_to_payment_student(s) for s in out.students.unpaid),
        )
