from __future__ import annotations

from flask import Flask, request

from ..common.web import current_user, fail, json_errors, make_guards, ok
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container.session)

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    @json_errors
    def login():
        if request.method == "GET":
            user = container.session.get_user()
            if user is None:
                return fail("Please login to continue", 401)
            return ok({"user": user.to_dict()})

        data = request.get_json(silent=True) or request.form
        user = container.auth_service.login(
            email=data.get("email", ""),
            password=data.get("password", ""),
            role=data.get("role") or "teacher",
        )
        return ok({"user": user.to_dict()}, message="Login successful")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        return ok(message="Logged out")

    @app.route("/me", endpoint="me")
    @login_required
    @json_errors
    def me():
        user = container.auth_service.current_user()
        if user is None:
            return fail("Please login to continue", 401)
        return ok({"user": user.to_dict()})

    @app.route("/admin/users", methods=["GET"], endpoint="admin_users")
    @admin_required
    @json_errors
    def admin_users():
        user = current_user(container.session)
        return ok(
            {
                "users": container.user_service.list_accounts(user=user),
                "teachers_without_accounts": container.user_service.teachers_without_accounts(user=user),
            }
        )

    @app.route("/admin/users", methods=["POST"], endpoint="admin_create_user")
    @admin_required
    @json_errors
    def admin_create_user():
        data = request.get_json(silent=True) or {}
        container.user_service.create_teacher_account(
            user=current_user(container.session),
            teacher_id=data.get("teacherId", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
        )
        return ok(message="Teacher account created", status=201)

    @app.route("/admin/users/<user_id>", methods=["PUT"], endpoint="admin_update_user")
    @admin_required
    @json_errors
    def admin_update_user(user_id: str):
        data = request.get_json(silent=True) or {}
        if "isActive" not in data and "email" not in data and not data.get("password"):
            raise ValidationError("Nothing to update")
        user = current_user(container.session)
        if "isActive" in data:
            container.user_service.set_active(user=user, user_id=user_id, is_active=bool(data["isActive"]))
        if "email" in data or data.get("password"):
            container.user_service.update_account(
                user=user,
                user_id=user_id,
                email=data.get("email"),
                password=data.get("password"),
            )
        return ok(message="Account updated")

    @app.route("/admin/users/<user_id>", methods=["DELETE"], endpoint="admin_delete_user")
    @admin_required
    @json_errors
    def admin_delete_user(user_id: str):
        container.user_service.delete_account(user=current_user(container.session), user_id=user_id)
        return ok(message="Account deleted")
