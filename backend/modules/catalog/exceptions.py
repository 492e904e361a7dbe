"""
Catalog module exceptions.
"""

from shared.exceptions import NotFoundError


class BagNotFoundError(NotFoundError):
    """Raised when a bag is not found."""

    def __init__(self, bag_id: str):
        super().__init__(
            "Bag not found",
            code="BAG_NOT_FOUND",
            details={"bag_id": bag_id},
        )
