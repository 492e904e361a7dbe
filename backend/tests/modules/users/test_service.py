"""Tests for the user administration service."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone

from shared.models import AuthenticatedUser, Role
from modules.users.exceptions import UserNotFoundError
from modules.users.models import UserRecord
from modules.users.service import UserService

ACTOR = AuthenticatedUser(id="admin-1", role=Role.ADMIN)


def make_record(user_id: str = "user-1", role: Role = Role.USER) -> UserRecord:
    now = datetime.now(timezone.utc)
    return UserRecord(
        id=user_id,
        name="Jane Doe",
        email=f"{user_id}@example.com",
        role=role,
        password_hash="$2b$04$hash",
        created_at=now,
        updated_at=now,
    )


class TestUserService:
    @pytest.fixture
    def repository(self):
        return MagicMock()

    @pytest.fixture
    def service(self, repository):
        return UserService(repository)

    @pytest.mark.asyncio
    async def test_list_users_paginates(self, service, repository):
        repository.list_users.return_value = [make_record("user-1"), make_record("user-2")]
        repository.count.return_value = 12

        users, pagination = await service.list_users(page=2, limit=10)

        repository.list_users.assert_called_once_with(10, 10)
        assert [u.id for u in users] == ["user-1", "user-2"]
        assert pagination.pages == 2
        assert all(not hasattr(u, "password_hash") for u in users)

    @pytest.mark.asyncio
    async def test_get_user_missing(self, service, repository):
        repository.get_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await service.get_user("missing")

    @pytest.mark.asyncio
    async def test_promote_user(self, service, repository):
        repository.update.return_value = make_record(role=Role.ADMIN)

        user = await service.update_role(ACTOR, "user-1", Role.ADMIN)

        repository.update.assert_called_once_with("user-1", {"role": "admin"})
        assert user.role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_demote_only_admin(self, service, repository):
        """Role changes are not restricted by how many admins remain."""
        repository.update.return_value = make_record("admin-1", Role.USER)

        user = await service.update_role(ACTOR, "admin-1", Role.USER)

        repository.update.assert_called_once_with("admin-1", {"role": "user"})
        repository.count.assert_not_called()
        assert user.role == Role.USER

    @pytest.mark.asyncio
    async def test_update_role_missing_user(self, service, repository):
        repository.update.return_value = None
        with pytest.raises(UserNotFoundError):
            await service.update_role(ACTOR, "missing", Role.ADMIN)

    @pytest.mark.asyncio
    async def test_admin_deletes_own_account(self, service, repository):
        """An admin may delete themself even when no other admin exists."""
        repository.delete.return_value = True

        await service.delete_user(ACTOR, ACTOR.id)

        repository.delete.assert_called_once_with(ACTOR.id)
        repository.count.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_user(self, service, repository):
        repository.delete.return_value = True

        await service.delete_user(ACTOR, "user-1")

        repository.delete.assert_called_once_with("user-1")

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, service, repository):
        repository.delete.return_value = False
        with pytest.raises(UserNotFoundError):
            await service.delete_user(ACTOR, "missing")

    @pytest.mark.asyncio
    async def test_get_stats(self, service, repository):
        counts = {None: 5, Role.ADMIN: 2, Role.USER: 3}
        repository.count.side_effect = lambda role=None: counts[role]

        stats = await service.get_stats()

        assert stats.model_dump() == {"total": 5, "admins": 2, "users": 3}
