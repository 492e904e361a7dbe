"""
Catalog module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, Field, HttpUrl, StringConstraints, field_validator


class BagCategory(str, Enum):
    """Fixed set of bag categories."""
    HANDBAG = "handbag"
    BACKPACK = "backpack"
    CROSSBODY = "crossbody"
    TOTE = "tote"
    CLUTCH = "clutch"
    MESSENGER = "messenger"
    DUFFEL = "duffel"
    LAPTOP = "laptop"


class SortKey(str, Enum):
    """Listing sort options. A leading '-' means descending."""
    PRICE = "price"
    PRICE_DESC = "-price"
    NAME = "name"
    NAME_DESC = "-name"
    CREATED_AT = "createdAt"
    CREATED_AT_DESC = "-createdAt"


BagName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
BagDescription = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=1000)]


class Bag(BaseModel):
    """A catalog product."""

    id: str
    name: str
    description: str
    price: float = Field(..., ge=0)
    category: BagCategory
    image: str
    stock: int = Field(..., ge=0)
    created_at: datetime
    updated_at: datetime


class BagCreate(BaseModel):
    """Request to add a bag to the catalog."""

    name: BagName
    description: BagDescription
    price: float = Field(..., ge=0)
    category: BagCategory
    image: HttpUrl
    stock: int = Field(..., ge=0, strict=True)

    def to_row(self) -> dict:
        return self.model_dump(mode="json")


class BagUpdate(BaseModel):
    """Partial update of a bag. Omitted fields are left unchanged."""

    name: Optional[BagName] = None
    description: Optional[BagDescription] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[BagCategory] = None
    image: Optional[HttpUrl] = None
    stock: Optional[int] = Field(None, ge=0, strict=True)

    def to_row(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class ListingFilter(BaseModel):
    """
    Parameters of a catalog listing.

    Absent optional fields do not constrain the result.
    """

    model_config = {"frozen": True}

    category: Optional[BagCategory] = None
    search: Optional[str] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    sort: SortKey = SortKey.CREATED_AT_DESC
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=12, ge=1, le=100)

    @field_validator("search", mode="before")
    @classmethod
    def blank_search_is_absent(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value
