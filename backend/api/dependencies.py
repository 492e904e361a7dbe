"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import SessionTokenManager
    from modules.catalog.interfaces import ICatalogService
    from modules.catalog.repository import BagRepository
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._token_manager: "SessionTokenManager | None" = None
        self._user_repository: "UserRepository | None" = None
        self._bag_repository: "BagRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._catalog_service: "ICatalogService | None" = None

    @property
    def db(self) -> "Client":
        """Get the process-wide Supabase client."""
        from shared.database import get_supabase_client
        return get_supabase_client()

    @property
    def tokens(self) -> "SessionTokenManager":
        """Get the session token manager."""
        if self._token_manager is None:
            from modules.auth.tokens import SessionTokenManager
            self._token_manager = SessionTokenManager.from_settings()
        return self._token_manager

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def bag_repository(self) -> "BagRepository":
        """Get the bag repository instance."""
        if self._bag_repository is None:
            from modules.catalog.repository import BagRepository
            self._bag_repository = BagRepository(self.db)
        return self._bag_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user administration service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(repository=self.user_repository)
        return self._user_service

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.service import CatalogService
            self._catalog_service = CatalogService(repository=self.bag_repository)
        return self._catalog_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._token_manager = None
        self._user_repository = None
        self._bag_repository = None
        self._auth_service = None
        self._user_service = None
        self._catalog_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_manager() -> "SessionTokenManager":
    """FastAPI dependency for the session token manager."""
    return get_container().tokens


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user administration service."""
    return get_container().users


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog
