from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import FinanceTransaction, MonthlyTotal, PaymentStatus


class FinanceRepository(Protocol):
    def list_all(self) -> Sequence[FinanceTransaction]:
        raise NotImplementedError

    def create(self, fields: dict) -> None:
        raise NotImplementedError

    def update(self, transaction_id: str, fields: dict) -> None:
        raise NotImplementedError

    def delete(self, transaction_id: str) -> None:
        raise NotImplementedError

    def get_month_report(self, *, month: str, year: int) -> Sequence[FinanceTransaction]:
        raise NotImplementedError

    def get_monthly_report(self, *, year: int) -> Sequence[MonthlyTotal]:
        raise NotImplementedError

    def get_payment_status(self, *, month: Optional[str] = None, year: Optional[int] = None) -> PaymentStatus:
        raise NotImplementedError
