"""Finance aggregation over fetched transactions.

The month query and the year query produce differently shaped reports and
are never merged.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import month_name
from ..core.constants import WEEKLY_INCOME_DAYS
from ..core.enums import Purpose
from ..finance.model import FinanceTransaction, MonthlyTotal
from .model import FinanceReport, FinanceSummary, IncomeLine, MonthlyIncome

MONTH_MODE = "month"
YEAR_MODE = "year"


def _amount(t: FinanceTransaction) -> float:
    return float(t.amount_paid or 0)


def income_by_purpose(transactions: Iterable[FinanceTransaction]) -> list[IncomeLine]:
    totals: dict[str, float] = {}
    for t in transactions:
        purpose = t.purpose or Purpose.OTHER.value
        totals[purpose] = totals.get(purpose, 0) + _amount(t)
    return [IncomeLine(name=name, amount=amount) for name, amount in totals.items()]


def month_report(transactions: Sequence[FinanceTransaction]) -> FinanceReport:
    income = income_by_purpose(transactions)
    return FinanceReport(
        mode=MONTH_MODE,
        income=income,
        total_income=sum(line.amount for line in income),
    )


def year_report(buckets: Sequence[MonthlyTotal], *, year: int) -> FinanceReport:
    monthly = [
        MonthlyIncome(
            month=b.month if b.month is not None else "Unknown",
            year=b.year if b.year is not None else year,
            income=float(b.total_amount or 0),
        )
        for b in buckets
    ]
    return FinanceReport(
        mode=YEAR_MODE,
        monthly=monthly,
        total_income=sum(m.income for m in monthly),
    )


def summarize(transactions: Sequence[FinanceTransaction], *, today: date) -> FinanceSummary:
    """Live totals over the full transaction list."""

    current_month = month_name(today)
    week_start = today - timedelta(days=WEEKLY_INCOME_DAYS - 1)

    monthly = [t for t in transactions if t.month == current_month and t.year == today.year]
    weekly = [t for t in transactions if t.date_paid is not None and week_start <= t.date_paid <= today]

    return FinanceSummary(
        total_income=sum(_amount(t) for t in transactions),
        monthly_income=sum(_amount(t) for t in monthly),
        weekly_income=sum(_amount(t) for t in weekly),
        per_purpose=income_by_purpose(transactions),
    )
