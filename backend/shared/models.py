"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, Field


class Role(str, Enum):
    """Account role."""
    USER = "user"
    ADMIN = "admin"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is rebuilt from the session token claims on every request
    and made available to route handlers via dependency injection.
    The role is the one embedded in the token at issuance time.
    """

    id: str = Field(..., description="User ID (UUID)")
    role: Role = Field(default=Role.USER, description="Role claim from the token")

    model_config = {
        "frozen": True,  # Make immutable for safety
    }

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
