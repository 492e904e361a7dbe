"""
Catalog service implementation.

Composes the query builder, the bag repository and the pagination
calculator into the catalog operations.
"""

import asyncio
import logging
from typing import Optional

from shared.pagination import Pagination, paginate

from .interfaces import ICatalogService
from .models import Bag, BagCategory, BagCreate, BagUpdate, ListingFilter
from .exceptions import BagNotFoundError
from .query import build_catalog_query
from .repository import BagRepository

logger = logging.getLogger(__name__)


class CatalogService(ICatalogService):
    """Catalog service backed by the bags table."""

    def __init__(self, repository: BagRepository):
        self._repository = repository

    async def list_bags(self, listing: ListingFilter) -> tuple[list[Bag], Pagination]:
        query = build_catalog_query(listing)

        # Page and total are independent reads
        bags, total = await asyncio.gather(
            asyncio.to_thread(self._repository.find, query),
            asyncio.to_thread(self._repository.count, query),
        )

        return bags, paginate(total, listing.page, listing.limit)

    async def get_bag(self, bag_id: str) -> Optional[Bag]:
        return self._repository.get_by_id(bag_id)

    async def create_bag(self, request: BagCreate) -> Bag:
        bag = self._repository.create(request.to_row())
        logger.info("Created bag %s", bag.id)
        return bag

    async def update_bag(self, bag_id: str, request: BagUpdate) -> Bag:
        changes = request.to_row()
        if not changes:
            bag = self._repository.get_by_id(bag_id)
        else:
            bag = self._repository.update(bag_id, changes)

        if bag is None:
            raise BagNotFoundError(bag_id)

        logger.info("Updated bag %s (%s)", bag_id, ", ".join(sorted(changes)) or "no changes")
        return bag

    async def delete_bag(self, bag_id: str) -> None:
        if not self._repository.delete(bag_id):
            raise BagNotFoundError(bag_id)
        logger.info("Deleted bag %s", bag_id)

    def list_categories(self) -> list[BagCategory]:
        return list(BagCategory)
