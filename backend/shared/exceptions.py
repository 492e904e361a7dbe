"""
Base exception classes for the Bag Store backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps every base class to one HTTP status code.
"""

from typing import Optional, Any


class BagStoreError(Exception):
    """
    Base exception for all Bag Store errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "success": False,
            "message": self.message,
            "code": self.code,
        }


class NotFoundError(BagStoreError):
    """Resource not found."""

    pass


class ValidationError(BagStoreError):
    """Input validation failed."""

    pass


class ConflictError(BagStoreError):
    """A unique value (e.g. an email address) is already taken."""

    pass


class AuthenticationError(BagStoreError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(BagStoreError):
    """Authorization failed (insufficient permissions)."""

    pass
