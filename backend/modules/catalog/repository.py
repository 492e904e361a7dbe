"""
Bag repository for database access.

Encapsulates all Supabase queries and data mapping for the bags table.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .models import Bag, BagCategory
from .query import CatalogQuery


class BagRepository(BaseRepository[Bag]):
    """
    Repository for bag data access.

    Handles all database operations for catalog products.
    All methods return Pydantic models with proper mapping from database rows.

    Note: This repository does NOT perform authorization checks.
    Admin-only mutations are gated at the route level.
    """

    table_name = "bags"

    def find(self, query: CatalogQuery) -> list[Bag]:
        """
        Fetch one page of bags matching a catalog query.

        Args:
            query: Predicate, sort order and window to apply.

        Returns:
            The bags on the requested page (empty past the last page).
        """
        builder = query.apply_predicate(self._table().select("*"))
        result = (
            builder.order(query.sort.column, desc=query.sort.descending)
            .range(query.skip, query.skip + query.limit - 1)
            .execute()
        )
        return [self._map_to_bag(row) for row in result.data]

    def count(self, query: CatalogQuery) -> int:
        """Count all bags matching the query's predicate, ignoring the window."""
        builder = query.apply_predicate(self._table().select("id", count="exact"))
        return builder.execute().count or 0

    def get_by_id(self, bag_id: str) -> Optional[Bag]:
        result = self._table().select("*").eq("id", bag_id).execute()
        if not result.data:
            return None
        return self._map_to_bag(result.data[0])

    def create(self, data: dict[str, Any]) -> Bag:
        """
        Create a new bag record.

        Returns:
            Created Bag with generated ID and timestamps.
        """
        result = self._table().insert(data).execute()
        return self._map_to_bag(result.data[0])

    def update(self, bag_id: str, data: dict[str, Any]) -> Optional[Bag]:
        """
        Update fields of a bag.

        Returns:
            The updated bag, or None if no row has that ID.
        """
        data = {**data, "updated_at": self._now()}
        result = self._table().update(data).eq("id", bag_id).execute()
        if not result.data:
            return None
        return self._map_to_bag(result.data[0])

    def delete(self, bag_id: str) -> bool:
        """
        Delete a bag.

        Returns:
            True if a row was deleted.
        """
        result = self._table().delete().eq("id", bag_id).execute()
        return bool(result.data)

    def _map_to_bag(self, data: dict[str, Any]) -> Bag:
        """Map database row to Bag model."""
        return Bag(
            id=str(data["id"]),
            name=data["name"],
            description=data["description"],
            price=float(data["price"]),
            category=BagCategory(data["category"]),
            image=data["image"],
            stock=int(data.get("stock", 0)),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
