"""Tests for the role gate predicate."""

import pytest

from shared.models import AuthenticatedUser, Role
from modules.auth.roles import require_role
from modules.auth.exceptions import InsufficientPermissionsError


class TestRequireRole:
    def test_allowed_role_passes_through(self):
        user = AuthenticatedUser(id="admin-1", role=Role.ADMIN)
        assert require_role(user, [Role.ADMIN]) is user

    def test_any_of_several_roles(self):
        user = AuthenticatedUser(id="user-1", role=Role.USER)
        assert require_role(user, [Role.ADMIN, Role.USER]) is user

    def test_rejects_other_role(self):
        user = AuthenticatedUser(id="user-1", role=Role.USER)
        with pytest.raises(InsufficientPermissionsError) as exc_info:
            require_role(user, [Role.ADMIN])
        assert exc_info.value.message == "Role 'user' is not authorized to access this route"
        assert exc_info.value.details == {"required_roles": ["admin"], "user_role": "user"}

    def test_accepts_string_roles(self):
        user = AuthenticatedUser(id="admin-1", role=Role.ADMIN)
        assert require_role(user, ["admin"]) is user

    def test_empty_allowed_set_rejects_everyone(self):
        user = AuthenticatedUser(id="admin-1", role=Role.ADMIN)
        with pytest.raises(InsufficientPermissionsError):
            require_role(user, [])
