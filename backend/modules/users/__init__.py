"""
Users module.

Account records and their administration.

Public API:
- IUserService: Interface for admin account operations
- User: Public account model (no password hash)
- UserRecord: Stored account including the password hash
- UserNotFoundError: Module exception
"""

from .interfaces import IUserService
from .models import User, UserRecord, UserStats, RoleUpdateRequest
from .exceptions import UserNotFoundError

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserRecord",
    "UserStats",
    "RoleUpdateRequest",
    # Exceptions
    "UserNotFoundError",
]
