"""
Catalog module interface.

The API layer depends on ICatalogService for all product operations.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.pagination import Pagination

from .models import Bag, BagCategory, BagCreate, BagUpdate, ListingFilter


@runtime_checkable
class ICatalogService(Protocol):
    """
    Interface for catalog operations.

    Reads are public; the API layer gates mutations to admins.
    """

    async def list_bags(self, listing: ListingFilter) -> tuple[list[Bag], Pagination]:
        """
        List bags matching a filter.

        Args:
            listing: Category, search, price range, sort and page parameters

        Returns:
            The bags on the requested page and the page metadata
        """
        ...

    async def get_bag(self, bag_id: str) -> Optional[Bag]:
        """Get a bag by ID, or None if it does not exist."""
        ...

    async def create_bag(self, request: BagCreate) -> Bag:
        """Add a bag to the catalog."""
        ...

    async def update_bag(self, bag_id: str, request: BagUpdate) -> Bag:
        """
        Apply a partial update to a bag.

        Raises:
            BagNotFoundError: If the bag doesn't exist
        """
        ...

    async def delete_bag(self, bag_id: str) -> None:
        """
        Remove a bag from the catalog.

        Raises:
            BagNotFoundError: If the bag doesn't exist
        """
        ...

    def list_categories(self) -> list[BagCategory]:
        """Get the fixed list of categories."""
        ...
