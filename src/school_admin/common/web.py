"""Shared helpers for the Flask controllers."""
from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from functools import wraps
from typing import Any, Optional, Type, TypeVar

from flask import jsonify, url_for
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..app_logger import get_logger
from ..core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConnectivityError,
    DecodeError,
    DomainError,
    NotFoundError,
    SessionExpiredError,
    ValidationError,
)
from ..users.model import SessionUser
from ..users.session import SessionStore
from .datetime_utils import parse_iso_date

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def to_json(value):
    """Dataclasses, enums and dates into plain JSON-ready values."""

    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def ok(data=None, *, message: Optional[str] = None, status: int = 200):
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = to_json(data)
    return jsonify(body), status


def fail(message: str, status: int, **extra):
    return jsonify({"success": False, "message": message, **extra}), status


def error_response(e: DomainError):
    """Map a domain/backend failure onto a JSON error response."""

    if isinstance(e, SessionExpiredError):
        return fail(str(e), 401, redirect=url_for("login"))
    if isinstance(e, ValidationError):
        return fail(str(e), 400)
    if isinstance(e, AuthenticationError):
        return fail(str(e), 401)
    if isinstance(e, AuthorizationError):
        return fail(str(e), 403)
    if isinstance(e, NotFoundError):
        return fail(str(e), 404)
    if isinstance(e, ConnectivityError):
        return fail(str(e), 503)
    if isinstance(e, DecodeError):
        return fail(str(e), 502)
    if isinstance(e, ApiError):
        code = e.status_code if e.status_code and 400 <= e.status_code < 500 else 502
        return fail(str(e), code)
    return fail(str(e), 400)


def json_errors(view):
    """Errors are handled where the user action happened: here, per view."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return fail("System error, please try again", 500)

    return wrapper


def make_guards(session: SessionStore):
    """Build login/admin decorators bound to the application's session store."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not session.get_token() or session.get_user() is None:
                return fail("Please login to continue", 401, redirect=url_for("login"))
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = session.get_user()
            if not session.get_token() or user is None:
                return fail("Please login to continue", 401, redirect=url_for("login"))
            if not user.is_admin:
                return fail("Admin access required", 403)
            return view(*args, **kwargs)

        return wrapper

    return login_required, admin_required


def current_user(session: SessionStore) -> SessionUser:
    user = session.get_user()
    if user is None:
        raise SessionExpiredError("Please login to continue", status_code=401)
    return user


def parse_date_arg(value: Any, default: Optional[date] = None) -> Optional[date]:
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date: {value}")
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None


def parse_int_arg(value: Optional[str], field_name: str, default: Optional[int] = None) -> Optional[int]:
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number") from None


def decode_request(model: Type[M], data: Any) -> M:
    """Validate a JSON request body; shape errors are bad input, not crashes."""

    try:
        return model.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        err = e.errors()[0]
        where = ".".join(str(p) for p in err.get("loc", ())) or "body"
        raise ValidationError(f"Invalid request field '{where}': {err.get('msg')}") from None
