from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, json_errors, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.session)

    @app.route("/teachers", methods=["GET"], endpoint="teachers")
    @login_required
    @json_errors
    def teachers():
        rows = container.teacher_service.list_teachers(search=request.args.get("search"))
        return ok({"teachers": rows, "total": len(rows)})

    @app.route("/teachers", methods=["POST"], endpoint="create_teacher")
    @admin_required
    @json_errors
    def create_teacher():
        container.teacher_service.save(user=current_user(container.session), data=request.get_json(silent=True) or {})
        return ok(message="Teacher created", status=201)

    @app.route("/teachers/<teacher_id>", methods=["PUT"], endpoint="update_teacher")
    @admin_required
    @json_errors
    def update_teacher(teacher_id: str):
        container.teacher_service.save(
            user=current_user(container.session),
            teacher_id=teacher_id,
            data=request.get_json(silent=True) or {},
        )
        return ok(message="Teacher updated")

    @app.route("/teachers/<teacher_id>/class", methods=["PUT"], endpoint="assign_teacher_class")
    @admin_required
    @json_errors
    def assign_teacher_class(teacher_id: str):
        data = request.get_json(silent=True) or {}
        container.teacher_service.assign_class(
            user=current_user(container.session),
            teacher_id=teacher_id,
            class_id=data.get("classId"),
        )
        return ok(message="Class assignment saved")

    @app.route("/teachers/<teacher_id>", methods=["DELETE"], endpoint="delete_teacher")
    @admin_required
    @json_errors
    def delete_teacher(teacher_id: str):
        container.teacher_service.delete(user=current_user(container.session), teacher_id=teacher_id)
        return ok(message="Teacher deleted")
