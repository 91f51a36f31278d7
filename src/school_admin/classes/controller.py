from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, json_errors, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.session)

    @app.route("/classes", methods=["GET"], endpoint="classes")
    @login_required
    @json_errors
    def classes():
        rows = container.class_service.list_for(current_user(container.session))
        return ok({"classes": rows})

    @app.route("/classes/overview", methods=["GET"], endpoint="classes_overview")
    @admin_required
    @json_errors
    def classes_overview():
        return ok({"classes": container.class_service.overview()})

    @app.route("/classes", methods=["POST"], endpoint="create_class")
    @admin_required
    @json_errors
    def create_class():
        container.class_service.save(user=current_user(container.session), data=request.get_json(silent=True) or {})
        return ok(message="Class created", status=201)

    @app.route("/classes/<class_id>", methods=["PUT"], endpoint="update_class")
    @admin_required
    @json_errors
    def update_class(class_id: str):
        container.class_service.save(
            user=current_user(container.session),
            class_id=class_id,
            data=request.get_json(silent=True) or {},
        )
        return ok(message="Class updated")

    @app.route("/classes/<class_id>", methods=["DELETE"], endpoint="delete_class")
    @admin_required
    @json_errors
    def delete_class(class_id: str):
        container.class_service.delete(user=current_user(container.session), class_id=class_id)
        return ok(message="Class deleted")
