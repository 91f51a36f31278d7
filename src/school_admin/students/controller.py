from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, json_errors, make_guards, ok
from ..container import Container
from ..reports.filters import StudentFilters


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.session)

    @app.route("/students", methods=["GET"], endpoint="students")
    @login_required
    @json_errors
    def students():
        filters = StudentFilters(
            search=request.args.get("search"),
            class_id=request.args.get("classId"),
            shift=request.args.get("shift"),
            part=request.args.get("part"),
        )
        rows = container.student_service.list_for(current_user(container.session), filters)
        return ok({"students": rows, "total": len(rows)})

    @app.route("/students/search", methods=["GET"], endpoint="search_students")
    @login_required
    @json_errors
    def search_students():
        return ok({"students": container.student_service.search_by_name(request.args.get("name"))})

    @app.route("/students", methods=["POST"], endpoint="create_student")
    @admin_required
    @json_errors
    def create_student():
        container.student_service.save(user=current_user(container.session), data=request.get_json(silent=True) or {})
        return ok(message="Student created", status=201)

    @app.route("/students/<student_id>", methods=["PUT"], endpoint="update_student")
    @admin_required
    @json_errors
    def update_student(student_id: str):
        container.student_service.save(
            user=current_user(container.session),
            student_id=student_id,
            data=request.get_json(silent=True) or {},
        )
        return ok(message="Student updated")

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @admin_required
    @json_errors
    def delete_student(student_id: str):
        container.student_service.delete(user=current_user(container.session), student_id=student_id)
        return ok(message="Student deleted")

    @app.route("/students/progression", methods=["GET"], endpoint="english_progression_preview")
    @admin_required
    @json_errors
    def english_progression_preview():
        from_parts = request.args.getlist("fromParts") or None
        return ok({"transitions": container.student_service.preview_english_progression(from_parts)})

    @app.route("/students/progression", methods=["POST"], endpoint="english_progression")
    @admin_required
    @json_errors
    def english_progression():
        data = request.get_json(silent=True) or {}
        result = container.student_service.progress_english_parts(
            user=current_user(container.session),
            from_parts=data.get("fromParts"),
        )
        return ok(result, message=result.message)
