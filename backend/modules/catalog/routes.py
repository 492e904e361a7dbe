"""
Bag API endpoints.

Listing and reads are public; mutations require the admin role.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import require_admin
from api.dependencies import get_catalog_service
from shared.models import AuthenticatedUser
from shared.responses import ApiResponse

from .interfaces import ICatalogService
from .models import Bag, BagCategory, BagCreate, BagUpdate, ListingFilter, SortKey
from .exceptions import BagNotFoundError

router = APIRouter()


@router.get("", response_model=ApiResponse[list[Bag]], response_model_exclude_none=True)
async def list_bags(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=12, ge=1, le=100, description="Items per page"),
    category: Optional[BagCategory] = Query(default=None, description="Filter by category"),
    search: Optional[str] = Query(default=None, description="Text to find in name or description"),
    min_price: Optional[float] = Query(default=None, ge=0, alias="minPrice"),
    max_price: Optional[float] = Query(default=None, ge=0, alias="maxPrice"),
    sort: SortKey = Query(default=SortKey.CREATED_AT_DESC, description="Sort key, '-' prefix for descending"),
    service: ICatalogService = Depends(get_catalog_service),
) -> ApiResponse[list[Bag]]:
    """
    List bags with filtering, search, sorting and pagination.

    Pages past the last one return an empty list with accurate metadata.
    """
    listing = ListingFilter(
        category=category,
        search=search,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
        page=page,
        limit=limit,
    )
    bags, pagination = await service.list_bags(listing)
    return ApiResponse(data=bags, pagination=pagination)


@router.get("/categories", response_model=ApiResponse[list[BagCategory]], response_model_exclude_none=True)
async def list_categories(
    service: ICatalogService = Depends(get_catalog_service),
) -> ApiResponse[list[BagCategory]]:
    """Get all bag categories."""
    return ApiResponse(data=service.list_categories())


@router.get("/{bag_id}", response_model=ApiResponse[Bag], response_model_exclude_none=True)
async def get_bag(
    bag_id: UUID,
    service: ICatalogService = Depends(get_catalog_service),
) -> ApiResponse[Bag]:
    """Get a single bag."""
    bag = await service.get_bag(str(bag_id))
    if bag is None:
        raise BagNotFoundError(str(bag_id))
    return ApiResponse(data=bag)


@router.post("", response_model=ApiResponse[Bag], response_model_exclude_none=True, status_code=201)
async def create_bag(
    request: BagCreate,
    user: AuthenticatedUser = Depends(require_admin),
    service: ICatalogService = Depends(get_catalog_service),
) -> ApiResponse[Bag]:
    """Add a bag to the catalog. Admin only."""
    bag = await service.create_bag(request)
    return ApiResponse(message="Bag created successfully", data=bag)


@router.put("/{bag_id}", response_model=ApiResponse[Bag], response_model_exclude_none=True)
async def update_bag(
    bag_id: UUID,
    request: BagUpdate,
    user: AuthenticatedUser = Depends(require_admin),
    service: ICatalogService = Depends(get_catalog_service),
) -> ApiResponse[Bag]:
    """Update a bag. Admin only."""
    bag = await service.update_bag(str(bag_id), request)
    return ApiResponse(message="Bag updated successfully", data=bag)


@router.delete("/{bag_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_bag(
    bag_id: UUID,
    user: AuthenticatedUser = Depends(require_admin),
    service: ICatalogService = Depends(get_catalog_service),
) -> ApiResponse[None]:
    """Delete a bag. Admin only."""
    await service.delete_bag(str(bag_id))
    return ApiResponse(message="Bag deleted successfully")
