"""
Recently-deleted module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import RecentlyDeletedTodo, RestoreResult


@runtime_checkable
class IRecentlyDeletedService(Protocol):
    """
    Interface for the recently-deleted bin.

    Records are kept for 30 days after deletion. Expired records are
    never listed or restored.
    """

    async def list_deleted(self, user: AuthenticatedUser) -> list[RecentlyDeletedTodo]:
        """Unexpired records in the user's bin, most recent deletion first."""
        ...

    async def restore(self, user: AuthenticatedUser, record_id: str) -> RestoreResult:
        """
        Restore a record.

        A todo_deleted record becomes a new todo owned by the user. An
        access_revoked record re-creates the user's share link.

        Raises:
            DeletedTodoNotFoundError: If missing, expired or not the user's
            TodoGoneError: If the shared todo has been deleted meanwhile
        """
        ...

    async def delete_permanently(self, user: AuthenticatedUser, record_id: str) -> None:
        """
        Remove a record for good.

        Raises:
            DeletedTodoNotFoundError: If missing or not the user's
        """
        ...

    async def purge_expired(self) -> int:
        """Remove every expired record. Returns the number removed."""
        ...
