"""
Pagination metadata.

Turns a raw total count into the page metadata returned next to list data.
"""

import math

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    """Page metadata for a listing response."""

    page: int = Field(..., ge=1, description="Requested page (1-indexed)")
    limit: int = Field(..., ge=1, description="Items per page")
    total: int = Field(..., ge=0, description="Total matching records")
    pages: int = Field(..., ge=0, description="Number of pages")

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(total: int, page: int, limit: int) -> Pagination:
    """
    Build page metadata for a listing.

    The page is not clamped against the page count: asking for a page past
    the end yields accurate metadata next to an empty result set.

    Args:
        total: Total number of matching records
        page: Requested page number (1-indexed)
        limit: Page size

    Returns:
        Pagination with pages = ceil(total / limit), 0 when total is 0
    """
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit),
    )
