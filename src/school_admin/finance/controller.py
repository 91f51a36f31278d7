from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, json_errors, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    _, admin_required = make_guards(container.session)

    @app.route("/finance", methods=["GET"], endpoint="finance")
    @admin_required
    @json_errors
    def finance():
        transactions = container.finance_service.list_transactions()
        summary = container.finance_service.summary()
        return ok({"transactions": transactions, "summary": summary.to_dict()})

    @app.route("/finance", methods=["POST"], endpoint="create_finance")
    @admin_required
    @json_errors
    def create_finance():
        container.finance_service.save(user=current_user(container.session), data=request.get_json(silent=True) or {})
        return ok(message="Payment recorded", status=201)

    @app.route("/finance/<transaction_id>", methods=["PUT"], endpoint="update_finance")
    @admin_required
    @json_errors
    def update_finance(transaction_id: str):
        container.finance_service.save(
            user=current_user(container.session),
            transaction_id=transaction_id,
            data=request.get_json(silent=True) or {},
        )
        return ok(message="Payment updated")

    @app.route("/finance/<transaction_id>", methods=["DELETE"], endpoint="delete_finance")
    @admin_required
    @json_errors
    def delete_finance(transaction_id: str):
        container.finance_service.delete(user=current_user(container.session), transaction_id=transaction_id)
        return ok(message="Payment deleted")
