import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser, Role
from modules.auth.models import (
    LoginRequest,
    PasswordUpdateRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    TokenPayload,
)


class TestAuthenticatedUser:
    def test_create_user(self):
        """Should create an authenticated user."""
        user = AuthenticatedUser(id="user-123", role="admin")
        assert user.id == "user-123"
        assert user.role == Role.ADMIN
        assert user.is_admin is True

    def test_user_is_immutable(self):
        """AuthenticatedUser should be immutable."""
        user = AuthenticatedUser(id="user-123")
        with pytest.raises(ValidationError):
            user.id = "different-id"

    def test_default_role(self):
        """AuthenticatedUser should have default role 'user'."""
        user = AuthenticatedUser(id="user-123")
        assert user.role == Role.USER
        assert user.is_admin is False


class TestTokenPayload:
    def test_valid_payload(self):
        payload = TokenPayload(sub="user-123", role="user", iat=1, exp=2)
        assert payload.role == Role.USER

    def test_rejects_unknown_role(self):
        with pytest.raises(ValidationError):
            TokenPayload(sub="user-123", role="authenticated", iat=1, exp=2)

    def test_rejects_empty_subject(self):
        with pytest.raises(ValidationError):
            TokenPayload(sub="", role="user", iat=1, exp=2)


class TestRegisterRequest:
    def test_normalizes_email_and_name(self):
        """Email should be trimmed and lower-cased, name trimmed."""
        request = RegisterRequest(name="  Jane Doe ", email="  Jane@Example.COM ", password="secret123")
        assert request.email == "jane@example.com"
        assert request.name == "Jane Doe"

    @pytest.mark.parametrize("name", ["J", "x" * 51, "   "])
    def test_rejects_bad_name_length(self, name):
        with pytest.raises(ValidationError):
            RegisterRequest(name=name, email="jane@example.com", password="secret123")

    def test_rejects_short_password(self):
        with pytest.raises(ValidationError):
            RegisterRequest(name="Jane", email="jane@example.com", password="12345")

    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError):
            RegisterRequest(name="Jane", email="not-an-email", password="secret123")

    def test_reports_every_invalid_field(self):
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest(name="J", email="nope", password="1")
        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"name", "email", "password"}

    def test_ignores_role_field(self):
        """A client-supplied role is not part of the registration body."""
        request = RegisterRequest(name="Jane", email="jane@example.com", password="secret123", role="admin")
        assert not hasattr(request, "role")


class TestOtherRequests:
    def test_login_lowercases_email(self):
        assert LoginRequest(email="A@B.COM", password="x").email == "a@b.com"

    def test_profile_update_is_partial(self):
        request = ProfileUpdateRequest(name="New Name")
        assert request.model_dump(exclude_none=True) == {"name": "New Name"}

    def test_profile_update_lowercases_email(self):
        assert ProfileUpdateRequest(email="New@Example.com").email == "new@example.com"

    def test_password_update_requires_new_length(self):
        with pytest.raises(ValidationError):
            PasswordUpdateRequest(current_password="secret123", new_password="short")
