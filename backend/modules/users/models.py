"""
Users module data models.

UserRecord mirrors a row of the users table, including the password hash.
User is the public shape returned by every endpoint; it has no hash field.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import Role


class User(BaseModel):
    """Public view of an account."""

    id: str
    name: str
    email: str
    role: Role = Role.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserRecord(User):
    """Stored account including credentials. Never serialized to clients."""

    password_hash: str = Field(..., repr=False)

    def to_public(self) -> User:
        return User(**self.model_dump(exclude={"password_hash"}))


class RoleUpdateRequest(BaseModel):
    """Admin request to change a user's role."""

    role: Role


class UserStats(BaseModel):
    """Account counts per role."""

    total: int
    admins: int
    users: int
