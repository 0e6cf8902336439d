"""
Recently-deleted service implementation with Supabase.

Restores deleted todos and revoked shares from 30-day snapshots.
"""

import logging

from shared.models import AuthenticatedUser
from shared.repository import utc_now
from modules.sharing.models import SharePermission
from modules.sharing.repository import SharingRepository
from modules.todos.repository import TodoRepository

from .interfaces import IRecentlyDeletedService
from .models import DeletionType, RecentlyDeletedTodo, RestoreResult
from .repository import RecentlyDeletedRepository
from .exceptions import DeletedTodoNotFoundError, TodoGoneError

logger = logging.getLogger(__name__)


class RecentlyDeletedService(IRecentlyDeletedService):
    """
    Recently-deleted service with Supabase backend.

    Implements IRecentlyDeletedService protocol with real database operations.
    """

    def __init__(
        self,
        recently_deleted: RecentlyDeletedRepository,
        todos: TodoRepository,
        sharing: SharingRepository,
    ):
        self._recently_deleted = recently_deleted
        self._todos = todos
        self._sharing = sharing

    async def list_deleted(self, user: AuthenticatedUser) -> list[RecentlyDeletedTodo]:
        """List the user's unexpired records."""
        return self._recently_deleted.list_for_user(user.id, utc_now())

    async def restore(self, user: AuthenticatedUser, record_id: str) -> RestoreResult:
        """Restore a todo or a share link, then drop the record."""
        record = self._get_own_record(user, record_id)

        if record.deletion_type == DeletionType.ACCESS_REVOKED:
            result = self._restore_access(user, record)
        else:
            result = self._restore_todo(user, record)

        try:
            self._recently_deleted.delete(record.id)
        except Exception as e:
            logger.error(f"Restored record {record.id} but failed to remove it: {e}")

        logger.info(f"User {user.id} restored {record.deletion_type.value} record {record.id}")
        return result

    async def delete_permanently(self, user: AuthenticatedUser, record_id: str) -> None:
        """Remove one of the user's records."""
        record = self._get_own_record(user, record_id, allow_expired=True)
        self._recently_deleted.delete(record.id)
        logger.info(f"User {user.id} permanently deleted record {record.id}")

    async def purge_expired(self) -> int:
        """Remove every record past its expiry."""
        purged = self._recently_deleted.delete_expired(utc_now())
        if purged:
            logger.info(f"Purged {purged} expired recently-deleted records")
        return purged

    # -------------------------------------------------------------------------
    # Restore paths
    # -------------------------------------------------------------------------

    def _restore_access(self, user: AuthenticatedUser, record: RecentlyDeletedTodo) -> RestoreResult:
        todo_id = record.shared_todo_id or record.todo_id
        if self._todos.get_by_id(todo_id) is None:
            raise TodoGoneError(record.id, todo_id)

        link = self._sharing.get_link(todo_id, user.email)
        if link is None:
            link = self._sharing.create_link({
                "todo_id": todo_id,
                "recipient_email": user.email,
                "owner_email": record.owner,
                "original_owner": record.original_owner,
                "permission": (record.permission or SharePermission.VIEW).value,
            })
        self._todos.set_shared_count(todo_id, self._sharing.count_links_for_todo(todo_id))

        return RestoreResult(
            record_id=record.id,
            deletion_type=record.deletion_type,
            shared_link=link,
        )

    def _restore_todo(self, user: AuthenticatedUser, record: RecentlyDeletedTodo) -> RestoreResult:
        todo = self._todos.create({
            "title": record.title,
            "description": record.description or "",
            "category": record.category.value,
            "due_date": record.due_date.isoformat() if record.due_date else None,
            "priority": record.priority.value,
            "completed": record.completed,
            "ai_content": record.ai_content,
            "user_id": user.id,
            "owner": user.email,
            "original_owner": user.email,
            "shared_count": 0,
        })
        return RestoreResult(
            record_id=record.id,
            deletion_type=record.deletion_type,
            todo=todo,
        )

    def _get_own_record(
        self,
        user: AuthenticatedUser,
        record_id: str,
        allow_expired: bool = False,
    ) -> RecentlyDeletedTodo:
        record = self._recently_deleted.get_by_id(record_id)
        if record is None or record.user_id != user.id:
            raise DeletedTodoNotFoundError(record_id)
        if not allow_expired and record.expires_at <= utc_now():
            raise DeletedTodoNotFoundError(record_id)
        return record
