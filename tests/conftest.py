from __future__ import annotations

import pytest

from school_admin.core.enums import Role
from school_admin.users.model import SessionUser


@pytest.fixture
def admin() -> SessionUser:
    return SessionUser(user_id="u-admin", email="admin@school.test", role=Role.ADMIN, full_name="Admin")


@pytest.fixture
def teacher() -> SessionUser:
    return SessionUser(
        user_id="u-t1",
        email="amina@school.test",
        role=Role.TEACHER,
        full_name="Amina",
        class_id="c1",
        teacher_id="t1",
    )
