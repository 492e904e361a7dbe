"""
Shared infrastructure for the Bag Store backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- pagination: Page metadata calculation
- responses: JSON response envelope

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    BagStoreError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
)
from .models import AuthenticatedUser, Role
from .pagination import Pagination, paginate
from .responses import ApiResponse

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "BagStoreError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "AuthenticatedUser",
    "Role",
    "Pagination",
    "paginate",
    "ApiResponse",
]
