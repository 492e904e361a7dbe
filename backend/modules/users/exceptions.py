"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
