from __future__ import annotations

from flask import Flask, copy_current_request_context

from ..common.web import current_user, json_errors, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.session)

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    @json_errors
    def dashboard():
        # Worker threads read the bearer token from the request's session.
        stats = container.dashboard_service.get_stats(
            user=current_user(container.session),
            context_wrapper=copy_current_request_context,
        )
        return ok(stats.to_dict())
