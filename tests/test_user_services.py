from __future__ import annotations

from typing import Optional

import pytest

from school_admin.core.enums import Role
from school_admin.core.exceptions import AuthenticationError, AuthorizationError, SessionExpiredError, ValidationError
from school_admin.users.model import SessionUser
from school_admin.users.service import AuthService, UserService
from school_admin.users.session import InMemorySessionStore

TEACHER_USER = SessionUser(user_id="u-t1", email="amina@school.test", role=Role.TEACHER, class_id="c1", teacher_id="t1")


class FakeAuth:
    def __init__(self, *, token: Optional[str] = "jwt", me=TEACHER_USER, expired: bool = False):
        self._token = token
        self._me = me
        self._expired = expired
        self.logins = []

    def login(self, *, email: str, password: str, role: str):
        self.logins.append((email, role))
        return self._token, TEACHER_USER

    def current_user(self):
        if self._expired:
            raise SessionExpiredError("Session expired. Please login again.", status_code=401)
        return self._me


class FakeUsers:
    def __init__(self):
        self.created = []
        self.updates = []
        self.deleted = []

    def list_all(self):
        return []

    def create_teacher_account(self, *, teacher_id: str, email: str, password: str):
        self.created.append((teacher_id, email))

    def update(self, user_id: str, fields: dict):
        self.updates.append((user_id, fields))

    def delete(self, user_id: str):
        self.deleted.append(user_id)


class FakeTeachers:
    def list_without_accounts(self):
        return []


def test_login_starts_session():
    session = InMemorySessionStore()
    auth = FakeAuth()

    user = AuthService(auth, session).login(email=" amina@school.test ", password="secret1")

    assert user == TEACHER_USER
    assert session.get_token() == "jwt"
    assert auth.logins == [("amina@school.test", "teacher")]


@pytest.mark.parametrize(
    "email,password,role",
    [("", "secret1", "teacher"), ("a@b.c", "", "teacher"), ("a@b.c", "secret1", "principal")],
)
def test_login_validates_input(email, password, role):
    auth = FakeAuth()

    with pytest.raises(ValidationError):
        AuthService(auth, InMemorySessionStore()).login(email=email, password=password, role=role)
    assert auth.logins == []


def test_login_without_token_fails():
    session = InMemorySessionStore()

    with pytest.raises(AuthenticationError):
        AuthService(FakeAuth(token=None), session).login(email="a@b.c", password="secret1")
    assert session.get_token() is None


def test_current_user_reverifies_token():
    session = InMemorySessionStore()
    session.start(token="jwt", user=TEACHER_USER)

    assert AuthService(FakeAuth(), session).current_user() == TEACHER_USER
    assert AuthService(FakeAuth(expired=True), session).current_user() is None
    assert AuthService(FakeAuth(), InMemorySessionStore()).current_user() is None


def test_logout_clears_session():
    session = InMemorySessionStore()
    session.start(token="jwt", user=TEACHER_USER)

    AuthService(FakeAuth(), session).logout()

    assert session.get_user() is None


def test_account_management_is_admin_only(teacher):
    svc = UserService(FakeUsers(), FakeTeachers())

    with pytest.raises(AuthorizationError):
        svc.list_accounts(user=teacher)
    with pytest.raises(AuthorizationError):
        svc.create_teacher_account(user=teacher, teacher_id="t1", email="a@b.c", password="secret1")


def test_create_account_validates(admin):
    users = FakeUsers()
    svc = UserService(users, FakeTeachers())

    with pytest.raises(ValidationError):
        svc.create_teacher_account(user=admin, teacher_id="t1", email="nope", password="secret1")
    with pytest.raises(ValidationError):
        svc.create_teacher_account(user=admin, teacher_id="t1", email="a@b.c", password="123")

    svc.create_teacher_account(user=admin, teacher_id="t1", email="a@b.c", password="123456")
    assert users.created == [("t1", "a@b.c")]


def test_admin_cannot_remove_own_account(admin):
    users = FakeUsers()
    svc = UserService(users, FakeTeachers())

    with pytest.raises(ValidationError):
        svc.delete_account(user=admin, user_id=admin.user_id)
    with pytest.raises(ValidationError):
        svc.set_active(user=admin, user_id=admin.user_id, is_active=False)

    svc.set_active(user=admin, user_id="u-t1", is_active=False)
    svc.update_account(user=admin, user_id="u-t1", email="new@school.test")
    assert users.updates == [("u-t1", {"is_active": False}), ("u-t1", {"email": "new@school.test"})]
