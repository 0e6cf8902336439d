"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.assistant.interfaces import IAssistantService
    from modules.todos.interfaces import ITodoService
    from modules.todos.repository import TodoRepository
    from modules.sharing.interfaces import ISharingService
    from modules.sharing.repository import SharingRepository
    from modules.recently_deleted.interfaces import IRecentlyDeletedService
    from modules.recently_deleted.repository import RecentlyDeletedRepository
    from modules.realtime.hub import RealtimeHub
    from modules.realtime.listener import SupabaseRealtimeListener


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._assistant_service: "IAssistantService | None" = None
        self._todo_service: "ITodoService | None" = None
        self._sharing_service: "ISharingService | None" = None
        self._recently_deleted_service: "IRecentlyDeletedService | None" = None
        self._todo_repository: "TodoRepository | None" = None
        self._sharing_repository: "SharingRepository | None" = None
        self._recently_deleted_repository: "RecentlyDeletedRepository | None" = None
        self._realtime_hub: "RealtimeHub | None" = None
        self._realtime_listener: "SupabaseRealtimeListener | None" = None

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def todo_repository(self) -> "TodoRepository":
        """Get the todo repository instance."""
        if self._todo_repository is None:
            from modules.todos.repository import TodoRepository
            from shared.database import get_supabase_client
            self._todo_repository = TodoRepository(get_supabase_client())
        return self._todo_repository

    @property
    def sharing_repository(self) -> "SharingRepository":
        """Get the sharing repository instance."""
        if self._sharing_repository is None:
            from modules.sharing.repository import SharingRepository
            from shared.database import get_supabase_client
            self._sharing_repository = SharingRepository(get_supabase_client())
        return self._sharing_repository

    @property
    def recently_deleted_repository(self) -> "RecentlyDeletedRepository":
        """Get the recently-deleted repository instance."""
        if self._recently_deleted_repository is None:
            from modules.recently_deleted.repository import RecentlyDeletedRepository
            from shared.database import get_supabase_client
            self._recently_deleted_repository = RecentlyDeletedRepository(get_supabase_client())
        return self._recently_deleted_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def assistant(self) -> "IAssistantService":
        """Get the assistant service instance."""
        if self._assistant_service is None:
            from modules.assistant.service import AssistantService
            self._assistant_service = AssistantService()
        return self._assistant_service

    @property
    def todos(self) -> "ITodoService":
        """Get the todo service instance."""
        if self._todo_service is None:
            from modules.todos.service import TodoService
            self._todo_service = TodoService(
                todos=self.todo_repository,
                sharing=self.sharing_repository,
                recently_deleted=self.recently_deleted_repository,
                auth=self.auth,
                assistant=self.assistant,
            )
        return self._todo_service

    @property
    def sharing(self) -> "ISharingService":
        """Get the sharing service instance."""
        if self._sharing_service is None:
            from modules.sharing.service import SharingService
            self._sharing_service = SharingService(
                sharing=self.sharing_repository,
                todos=self.todo_repository,
                auth=self.auth,
            )
        return self._sharing_service

    @property
    def recently_deleted(self) -> "IRecentlyDeletedService":
        """Get the recently-deleted service instance."""
        if self._recently_deleted_service is None:
            from modules.recently_deleted.service import RecentlyDeletedService
            self._recently_deleted_service = RecentlyDeletedService(
                recently_deleted=self.recently_deleted_repository,
                todos=self.todo_repository,
                sharing=self.sharing_repository,
            )
        return self._recently_deleted_service

    # -------------------------------------------------------------------------
    # Realtime
    # -------------------------------------------------------------------------

    @property
    def realtime_hub(self) -> "RealtimeHub":
        """Get the realtime hub instance."""
        if self._realtime_hub is None:
            from modules.realtime.hub import RealtimeHub
            self._realtime_hub = RealtimeHub()
        return self._realtime_hub

    @property
    def realtime_listener(self) -> "SupabaseRealtimeListener":
        """Get the realtime listener instance."""
        if self._realtime_listener is None:
            from modules.realtime.listener import SupabaseRealtimeListener
            self._realtime_listener = SupabaseRealtimeListener(self.realtime_hub)
        return self._realtime_listener

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._assistant_service = None
        self._todo_service = None
        self._sharing_service = None
        self._recently_deleted_service = None
        self._todo_repository = None
        self._sharing_repository = None
        self._recently_deleted_repository = None
        self._realtime_hub = None
        self._realtime_listener = None


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


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_assistant_service() -> "IAssistantService":
    """FastAPI dependency for assistant service."""
    return get_container().assistant


def get_todo_service() -> "ITodoService":
    """FastAPI dependency for todo service."""
    return get_container().todos


def get_sharing_service() -> "ISharingService":
    """FastAPI dependency for sharing service."""
    return get_container().sharing


def get_recently_deleted_service() -> "IRecentlyDeletedService":
    """FastAPI dependency for recently-deleted service."""
    return get_container().recently_deleted


def get_realtime_hub() -> "RealtimeHub":
    """FastAPI dependency for the realtime hub."""
    return get_container().realtime_hub
