"""
User administration service implementation.
"""

import asyncio
import logging

from shared.models import AuthenticatedUser, Role
from shared.pagination import Pagination, paginate

from .interfaces import IUserService
from .models import User, UserRecord, UserStats
from .exceptions import UserNotFoundError
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Account administration backed by the users table."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def list_users(self, page: int = 1, limit: int = 10) -> tuple[list[User], Pagination]:
        offset = (page - 1) * limit
        records, total = await asyncio.gather(
            asyncio.to_thread(self._repository.list_users, offset, limit),
            asyncio.to_thread(self._repository.count),
        )
        return [r.to_public() for r in records], paginate(total, page, limit)

    async def get_user(self, user_id: str) -> User:
        return self._get_record(user_id).to_public()

    async def update_role(self, actor: AuthenticatedUser, user_id: str, role: Role) -> User:
        updated = self._repository.update(user_id, {"role": role.value})
        if updated is None:
            raise UserNotFoundError(user_id)

        logger.info("Admin %s changed role of user %s to %s", actor.id, user_id, role.value)
        return updated.to_public()

    async def delete_user(self, actor: AuthenticatedUser, user_id: str) -> None:
        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)

        logger.info("Admin %s deleted user %s", actor.id, user_id)

    async def get_stats(self) -> UserStats:
        total, admins, users = await asyncio.gather(
            asyncio.to_thread(self._repository.count),
            asyncio.to_thread(self._repository.count, Role.ADMIN),
            asyncio.to_thread(self._repository.count, Role.USER),
        )
        return UserStats(total=total, admins=admins, users=users)

    def _get_record(self, user_id: str) -> UserRecord:
        record = self._repository.get_by_id(user_id)
        if record is None:
            raise UserNotFoundError(user_id)
        return record
