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
    from modules.auth.policies import AccessPolicy
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.products.interfaces import IProductService
    from modules.favorites.interfaces import IFavoriteService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._policy: "AccessPolicy | None" = None
        self._user_repository: "UserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._product_service: "IProductService | None" = None
        self._favorite_service: "IFavoriteService | None" = None

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def policy(self) -> "AccessPolicy":
        """Get the access policy built from settings."""
        if self._policy is None:
            from modules.auth.policies import AccessPolicy
            from shared.config import get_settings
            self._policy = AccessPolicy.from_settings(get_settings())
        return self._policy

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository (shared by auth and users)."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.models import TokenConfig
            from modules.auth.service import AuthService
            from shared.config import get_settings
            self._auth_service = AuthService(
                config=TokenConfig.from_settings(get_settings()),
                users=self.user_repository,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            from shared.config import get_settings
            self._user_service = UserService(
                repository=self.user_repository,
                policy=self.policy,
                allow_role_on_registration=get_settings().allow_role_on_registration,
            )
        return self._user_service

    @property
    def products(self) -> "IProductService":
        """Get the product service instance."""
        if self._product_service is None:
            from modules.products.repository import ProductRepository
            from modules.products.service import ProductService
            self._product_service = ProductService(
                repository=ProductRepository(self.db),
                policy=self.policy,
            )
        return self._product_service

    @property
    def favorites(self) -> "IFavoriteService":
        """Get the favorite service instance."""
        if self._favorite_service is None:
            from modules.favorites.repository import FavoriteRepository
            from modules.favorites.service import FavoriteService
            self._favorite_service = FavoriteService(repository=FavoriteRepository(self.db))
        return self._favorite_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._policy = None
        self._user_repository = None
        self._auth_service = None
        self._user_service = None
        self._product_service = None
        self._favorite_service = None


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

    The next call to get_container() will create a fresh container with
    new service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_product_service() -> "IProductService":
    """FastAPI dependency for product service."""
    return get_container().products


def get_favorite_service() -> "IFavoriteService":
    """FastAPI dependency for favorite service."""
    return get_container().favorites
