from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import month_name, now_local, parse_iso_date
from ..common.validators import require_choice, require_non_empty, require_positive_number
from ..core.constants import MONTHS
from ..core.enums import Purpose
from ..core.exceptions import AuthorizationError, ValidationError
from ..reports.finance_aggregator import summarize
from ..reports.model import FinanceSummary
from ..users.model import SessionUser
from .model import FinanceTransaction
from .repository import FinanceRepository


class FinanceService:
    """Use case: record student payments (admin)."""

    def __init__(self, finance: FinanceRepository):
        self._finance = finance

    def list_transactions(self) -> list[FinanceTransaction]:
        return list(self._finance.list_all())

    def summary(self, *, today: Optional[date] = None) -> FinanceSummary:
        today = today or now_local().date()
        return summarize(self._finance.list_all(), today=today)

    def save(self, *, user: SessionUser, transaction_id: Optional[str] = None, data: dict) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can manage finance records")

        today = now_local().date()
        student_id = require_non_empty(data.get("fullName"), "Student")
        class_id = (data.get("classId") or "").strip() or None
        month = data.get("month") or month_name(today)
        if month not in MONTHS:
            raise ValidationError(f"Unknown month: {month}")
        try:
            year = int(data.get("year") or today.year)
        except (TypeError, ValueError):
            raise ValidationError("Year must be a number") from None
        amount = require_positive_number(data.get("amountPaid"), "Amount")
        purpose = require_choice(data.get("purpose") or Purpose.TUITION.value, Purpose, "Purpose")
        try:
            date_paid = parse_iso_date(data["datePaid"]) if data.get("datePaid") else today
        except ValueError:
            raise ValidationError("Date paid must be YYYY-MM-DD") from None

        fields = {
            "student_id": student_id,
            "class_id": class_id,
            "month": month,
            "year": year,
            "amount_paid": amount,
            "purpose": purpose.value,
            "date_paid": date_paid,
        }
        if transaction_id:
            self._finance.update(transaction_id, fields)
        else:
            self._finance.create(fields)

    def delete(self, *, user: SessionUser, transaction_id: str) -> None:
        if not user.is_admin:
            raise AuthorizationError("Only administrators can delete finance records")
        self._finance.delete(transaction_id)
