"""
Authentication module data models.

These models define the token claims and the request bodies accepted
by the auth endpoints.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator

from shared.models import Role
from modules.users.models import User

PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)]


def normalize_email(value):
    """Trim and lower-case an email address before format validation."""
    return value.strip().lower() if isinstance(value, str) else value


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    role: Role = Field(..., description="Role at issuance time")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class RegisterRequest(BaseModel):
    """Request to create an account."""

    name: PersonName
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, value):
        return normalize_email(value)


class LoginRequest(BaseModel):
    """Request to sign in."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, value):
        return normalize_email(value)


class ProfileUpdateRequest(BaseModel):
    """Partial profile update. Omitted fields are left unchanged."""

    name: Optional[PersonName] = None
    email: Optional[EmailStr] = None

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, value):
        return normalize_email(value)


class PasswordUpdateRequest(BaseModel):
    """Request to rotate the current user's password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=128)


class IssuedSession(BaseModel):
    """A user together with a freshly issued session token."""

    user: User
    token: str
