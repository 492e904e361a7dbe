"""
Users module interface.

Account administration operations, used by the admin endpoints.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser, Role
from shared.pagination import Pagination

from .models import User, UserStats


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for account administration.

    Callers are expected to have passed the admin role gate.
    """

    async def list_users(self, page: int = 1, limit: int = 10) -> tuple[list[User], Pagination]:
        """List accounts, newest first."""
        ...

    async def get_user(self, user_id: str) -> User:
        """
        Get a single account.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def update_role(self, actor: AuthenticatedUser, user_id: str, role: Role) -> User:
        """
        Change a user's role. Takes effect for that user's next token.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def delete_user(self, actor: AuthenticatedUser, user_id: str) -> None:
        """
        Delete an account. Admins may delete their own account.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...

    async def get_stats(self) -> UserStats:
        """Count accounts in total and per role."""
        ...
