"""
Catalog module.

Bag products: filtered listing, single reads and admin-only mutations.

Public API:
- ICatalogService: Interface for catalog operations
- Bag, BagCreate, BagUpdate, ListingFilter: Data models
- build_catalog_query: Listing filter to store query
- BagNotFoundError: Raised for unknown bag IDs
"""

from .interfaces import ICatalogService
from .models import Bag, BagCategory, BagCreate, BagUpdate, ListingFilter, SortKey
from .query import CatalogQuery, build_catalog_query
from .exceptions import BagNotFoundError

__all__ = [
    # Interface
    "ICatalogService",
    # Models
    "Bag",
    "BagCategory",
    "BagCreate",
    "BagUpdate",
    "ListingFilter",
    "SortKey",
    # Query
    "CatalogQuery",
    "build_catalog_query",
    # Exceptions
    "BagNotFoundError",
]
