from __future__ import annotations

from typing import Optional, Sequence

from ..app_logger import get_logger
from ..common.validators import require_choice, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, SessionExpiredError, ValidationError
from ..teachers.model import Teacher
from ..teachers.repository import TeacherRepository
from .model import SessionUser, UserAccount
from .repository import AuthRepository, UserRepository
from .session import SessionStore

logger = get_logger(__name__)


class AuthService:
    """Use case: sign in against the backend and keep the session context."""

    def __init__(self, auth: AuthRepository, session: SessionStore):
        self._auth = auth
        self._session = session

    def login(self, *, email: str, password: str, role: str = Role.TEACHER.value) -> SessionUser:
        email = require_non_empty(email, "Email")
        if not password:
            raise ValidationError("Password is required")
        role = require_choice(role, Role, "Role")

        token, user = self._auth.login(email=email, password=password, role=role.value)
        if not token:
            raise AuthenticationError("Login failed. No token received from server.")

        self._session.start(token=token, user=user)
        logger.info("User %s signed in as %s", user.email, user.role.value)
        return user

    def current_user(self) -> Optional[SessionUser]:
        """Re-verify the stored token; a rejected token clears the session."""

        if not self._session.get_token():
            self._session.clear()
            return None
        try:
            user = self._auth.current_user()
        except SessionExpiredError:
            return None
        if user is None:
            self._session.clear()
            return None
        self._session.start(token=self._session.get_token(), user=user)
        return user

    def logout(self) -> None:
        self._session.clear()


class UserService:
    """Use case: manage teacher login accounts (admin)."""

    def __init__(self, users: UserRepository, teachers: TeacherRepository):
        self._users = users
        self._teachers = teachers

    @staticmethod
    def _require_admin(user: SessionUser) -> None:
        if not user.is_admin:
            raise AuthorizationError("Admin access required")

    def list_accounts(self, *, user: SessionUser) -> Sequence[UserAccount]:
        self._require_admin(user)
        return self._users.list_all()

    def teachers_without_accounts(self, *, user: SessionUser) -> Sequence[Teacher]:
        self._require_admin(user)
        return self._teachers.list_without_accounts()

    def create_teacher_account(self, *, user: SessionUser, teacher_id: str, email: str, password: str) -> None:
        self._require_admin(user)
        teacher_id = require_non_empty(teacher_id, "Teacher")
        email = require_non_empty(email, "Email")
        if "@" not in email:
            raise ValidationError("Email is not valid")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        self._users.create_teacher_account(teacher_id=teacher_id, email=email, password=password)

    def update_account(
        self,
        *,
        user: SessionUser,
        user_id: str,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> None:
        self._require_admin(user)
        fields: dict = {}
        if email is not None:
            email = require_non_empty(email, "Email")
            if "@" not in email:
                raise ValidationError("Email is not valid")
            fields["email"] = email
        if password:
            fields["password"] = require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        if not fields:
            raise ValidationError("Nothing to update")
        self._users.update(user_id, fields)

    def set_active(self, *, user: SessionUser, user_id: str, is_active: bool) -> None:
        self._require_admin(user)
        if user_id == user.user_id and not is_active:
            raise ValidationError("You cannot deactivate your own account")
        self._users.update(user_id, {"is_active": bool(is_active)})

    def delete_account(self, *, user: SessionUser, user_id: str) -> None:
        self._require_admin(user)
        if user_id == user.user_id:
            raise ValidationError("You cannot delete your own account")
        self._users.delete(user_id)
