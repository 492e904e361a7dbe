"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from typing import Any, Optional

from shared.models import Role
from shared.repository import BaseRepository
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    All methods return UserRecord models. Callers convert to the public
    User model before anything leaves the service layer.

    Note: This repository does NOT perform authorization checks.
    """

    table_name = "users"

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._table().select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._table().select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        """Whether an account other than ``exclude_id`` uses this email."""
        query = self._table().select("id").eq("email", email)
        if exclude_id is not None:
            query = query.neq("id", exclude_id)
        return bool(query.execute().data)

    def list_users(self, offset: int, limit: int) -> list[UserRecord]:
        """List users, newest first."""
        result = (
            self._table()
            .select("*")
            .order("created_at", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [self._map_to_user(row) for row in result.data]

    def count(self, role: Optional[Role] = None) -> int:
        query = self._table().select("id", count="exact")
        if role is not None:
            query = query.eq("role", role.value)
        return query.execute().count or 0

    def create(self, name: str, email: str, password_hash: str, role: Role = Role.USER) -> UserRecord:
        data = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "role": role.value,
        }
        result = self._table().insert(data).execute()
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        """
        Update fields of a user.

        Returns:
            The updated record, or None if no row has that ID.
        """
        data = {**data, "updated_at": self._now()}
        result = self._table().update(data).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Returns:
            True if a row was deleted.
        """
        result = self._table().delete().eq("id", user_id).execute()
        return bool(result.data)

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            role=Role(data.get("role", Role.USER.value)),
            password_hash=data["password_hash"],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
