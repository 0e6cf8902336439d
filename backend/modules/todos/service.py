"""
Todos service implementation with Supabase.

Provides todo CRUD scoped to the calling user. The API uses the
service-role client, so ownership and share permissions are checked here
before any write.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Any

from shared.models import AuthenticatedUser
from shared.repository import utc_now
from modules.sharing.models import SharedTodo, SharePermission
from modules.sharing.repository import SharingRepository
from modules.recently_deleted.models import DeletionType, build_snapshot
from modules.recently_deleted.repository import RecentlyDeletedRepository

from .interfaces import ITodoService
from .models import (
    CreateTodoRequest,
    PRIORITY_RANK,
    SortBy,
    StatusFilter,
    Todo,
    TodoCategory,
    TodoListResponse,
    TodoView,
    UpdateTodoRequest,
)
from .repository import TodoRepository
from .exceptions import TodoNotFoundError, TodoReadOnlyError

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class TodoService(ITodoService):
    """
    Todo service with Supabase backend.

    Implements ITodoService protocol with real database operations.
    """

    def __init__(
        self,
        todos: TodoRepository,
        sharing: SharingRepository,
        recently_deleted: RecentlyDeletedRepository,
        auth: Any = None,       # IAuthService - injected
        assistant: Any = None,  # IAssistantService - injected
    ):
        self._todos = todos
        self._sharing = sharing
        self._recently_deleted = recently_deleted
        self._auth = auth
        self._assistant = assistant

    async def create_todo(
        self,
        user: AuthenticatedUser,
        request: CreateTodoRequest,
    ) -> TodoView:
        """Create a todo owned by the current user."""
        data = {
            **request.model_dump(mode="json"),
            "completed": False,
            "user_id": user.id,
            "owner": user.email,
            "original_owner": user.email,
            "shared_count": 0,
        }
        todo = self._todos.create(data)
        logger.info(f"User {user.id} created todo {todo.id}")
        return self._to_view(todo)

    async def list_todos(
        self,
        user: AuthenticatedUser,
        status: StatusFilter = StatusFilter.ALL,
        category: Optional[TodoCategory] = None,
        sort_by: SortBy = SortBy.DATE,
    ) -> TodoListResponse:
        """List owned todos plus todos shared with the user."""
        views = [self._to_view(todo) for todo in self._todos.list_owned(user.id)]
        seen = {view.id for view in views}

        links = self._sharing.list_links_for_recipient(user.email)
        links_by_todo = {link.todo_id: link for link in links if link.todo_id not in seen}
        for todo in self._todos.get_many(list(links_by_todo)):
            if todo.id in seen:
                continue
            views.append(self._to_view(todo, links_by_todo[todo.id]))
            seen.add(todo.id)

        if status == StatusFilter.PENDING:
            views = [v for v in views if not v.completed]
        elif status == StatusFilter.COMPLETED:
            views = [v for v in views if v.completed]

        if category is not None:
            views = [v for v in views if v.category == category]

        views = sort_todos(views, sort_by)
        return TodoListResponse(todos=views, total=len(views))

    async def get_todo(self, user: AuthenticatedUser, todo_id: str) -> TodoView:
        """Get one todo the user owns or holds a share link for."""
        todo, link = self._resolve_access(user, todo_id)
        return self._to_view(todo, link)

    async def toggle_todo(self, user: AuthenticatedUser, todo_id: str) -> TodoView:
        """Flip completed on the canonical todo row."""
        todo, link = self._resolve_access(user, todo_id)
        self._require_edit(todo, link)

        updated = self._todos.update(todo_id, {
            "completed": not todo.completed,
            "last_edited_by": user.email,
        })
        if updated is None:
            raise TodoNotFoundError(todo_id)
        return self._to_view(updated, link)

    async def update_todo(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        request: UpdateTodoRequest,
    ) -> TodoView:
        """Apply a partial edit. Ownership columns are never written."""
        todo, link = self._resolve_access(user, todo_id)
        self._require_edit(todo, link)

        changes = request.to_update_dict()
        if not changes:
            return self._to_view(todo, link)

        changes["last_edited_by"] = user.email
        updated = self._todos.update(todo_id, changes)
        if updated is None:
            raise TodoNotFoundError(todo_id)
        return self._to_view(updated, link)

    async def delete_todo(self, user: AuthenticatedUser, todo_id: str) -> None:
        """Delete for everyone (owner) or leave the todo (collaborator)."""
        todo, link = self._resolve_access(user, todo_id)
        deleted_at = utc_now()

        if link is None:
            await self._delete_as_owner(user, todo, deleted_at)
        else:
            self._leave_as_collaborator(user, todo, link, deleted_at)

    async def assist_todo(self, user: AuthenticatedUser, todo_id: str) -> TodoView:
        """Generate AI assistance for a todo and store it as ai_content."""
        todo, link = self._resolve_access(user, todo_id)
        self._require_edit(todo, link)

        assistance = await self._assistant.suggest(todo.title, todo.description or "")
        updated = self._todos.update(todo_id, {
            "ai_content": assistance.model_dump(mode="json", by_alias=True),
            "last_edited_by": user.email,
        })
        if updated is None:
            raise TodoNotFoundError(todo_id)
        return self._to_view(updated, link)

    # -------------------------------------------------------------------------
    # Delete paths
    # -------------------------------------------------------------------------

    async def _delete_as_owner(
        self,
        user: AuthenticatedUser,
        todo: Todo,
        deleted_at: datetime,
    ) -> None:
        links = self._sharing.list_links_for_todo(todo.id)

        self._recently_deleted.insert(build_snapshot(
            todo,
            user_id=user.id,
            deleted_by=user.email,
            deleted_at=deleted_at,
            deletion_type=DeletionType.TODO_DELETED,
            is_shared=bool(links),
        ))

        for link in links:
            profile = await self._auth.get_user_by_email(link.recipient_email)
            if profile is None:
                logger.warning(
                    f"No profile for collaborator {link.recipient_email} on todo {todo.id}, "
                    "skipping their recently-deleted record"
                )
                continue
            self._recently_deleted.insert(build_snapshot(
                todo,
                user_id=profile.id,
                deleted_by=user.email,
                deleted_at=deleted_at,
                deletion_type=DeletionType.TODO_DELETED,
                link=link,
            ))

        if links:
            self._sharing.delete_links_for_todo(todo.id)
        self._todos.delete(todo.id)
        logger.info(f"User {user.id} deleted todo {todo.id} ({len(links)} collaborators affected)")

    def _leave_as_collaborator(
        self,
        user: AuthenticatedUser,
        todo: Todo,
        link: SharedTodo,
        deleted_at: datetime,
    ) -> None:
        self._recently_deleted.insert(build_snapshot(
            todo,
            user_id=user.id,
            deleted_by=user.email,
            deleted_at=deleted_at,
            deletion_type=DeletionType.ACCESS_REVOKED,
            link=link,
        ))
        self._sharing.delete_link(link.id)
        self._todos.set_shared_count(todo.id, self._sharing.count_links_for_todo(todo.id))
        logger.info(f"User {user.id} removed their access to todo {todo.id}")

    # -------------------------------------------------------------------------
    # Access helpers
    # -------------------------------------------------------------------------

    def _resolve_access(
        self,
        user: AuthenticatedUser,
        todo_id: str,
    ) -> tuple[Todo, Optional[SharedTodo]]:
        """
        Load a todo and the user's share link for it.

        Returns (todo, None) for the owner and (todo, link) for a
        collaborator.

        Raises:
            TodoNotFoundError: If the todo is missing or the user has no access
        """
        todo = self._todos.get_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)

        if todo.is_owned_by(user.id, user.email):
            return todo, None

        link = self._sharing.get_link(todo_id, user.email)
        if link is None:
            raise TodoNotFoundError(todo_id)
        return todo, link

    @staticmethod
    def _require_edit(todo: Todo, link: Optional[SharedTodo]) -> None:
        if link is not None and link.permission != SharePermission.EDIT:
            raise TodoReadOnlyError(todo.id)

    @staticmethod
    def _to_view(todo: Todo, link: Optional[SharedTodo] = None) -> TodoView:
        data = todo.model_dump()
        if link is None:
            return TodoView(**data, is_owner=True)
        return TodoView(
            **data,
            is_owner=False,
            is_shared=True,
            shared_id=link.id,
            owner_email=link.owner_email,
            permission=link.permission,
        )


def sort_todos(views: list[TodoView], sort_by: SortBy) -> list[TodoView]:
    """Order todo views newest first, or by priority (newest first within a priority)."""
    by_date = sorted(views, key=lambda v: v.created_at or _EPOCH, reverse=True)
    if sort_by == SortBy.PRIORITY:
        return sorted(by_date, key=lambda v: PRIORITY_RANK[v.priority], reverse=True)
    return by_date
