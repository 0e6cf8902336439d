"""
Per-user live todo list.

A TodoFeed holds one user's current list and decides, for each change
event, whether to ignore it, patch the list, or refetch everything.
"""

import logging
from typing import Any

from shared.exceptions import NotFoundError
from shared.models import AuthenticatedUser
from modules.todos.interfaces import ITodoService
from modules.todos.models import TodoView

from .models import ChangeEvent, ChangeType

logger = logging.getLogger(__name__)

TODOS_TABLE = "todos"
SHARED_TODOS_TABLE = "shared_todos"


class TodoFeed:
    """
    One subscriber's todo list, kept in step with database changes.

    Rules:
    - todos change touching my rows (user_id, original_owner, or an id
      already in my list): refetch everything.
    - shared_todos change addressed to my email: INSERT fetches that todo
      and prepends it, DELETE drops it by share link id, anything else
      refetches.
    - everything else is ignored.
    """

    def __init__(self, user: AuthenticatedUser, todos: ITodoService):
        self._user = user
        self._service = todos
        self.todos: list[TodoView] = []

    async def refresh(self) -> None:
        """Replace the list with a fresh fetch."""
        response = await self._service.list_todos(self._user)
        self.todos = response.todos

    async def apply(self, event: ChangeEvent) -> bool:
        """
        Apply one change event.

        Returns:
            True if the list changed (or was refetched), False if ignored.
        """
        if event.table == TODOS_TABLE:
            if self._touches_my_todos(event):
                await self.refresh()
                return True
            return False

        if event.table == SHARED_TODOS_TABLE:
            if not self._addressed_to_me(event):
                return False
            if event.type == ChangeType.INSERT:
                await self._add_shared(event.record)
            elif event.type == ChangeType.DELETE:
                self._remove_shared(event.old_record.get("id"))
            else:
                await self.refresh()
            return True

        return False

    def to_payload(self) -> list[dict[str, Any]]:
        """JSON-ready list for the SSE stream."""
        return [todo.model_dump(mode="json") for todo in self.todos]

    # -------------------------------------------------------------------------
    # Matching
    # -------------------------------------------------------------------------

    def _touches_my_todos(self, event: ChangeEvent) -> bool:
        my_ids = {todo.id for todo in self.todos}
        for row in event.rows():
            if str(row.get("user_id", "")) == self._user.id:
                return True
            if row.get("original_owner") == self._user.email:
                return True
            if str(row.get("id", "")) in my_ids:
                return True
        return False

    def _addressed_to_me(self, event: ChangeEvent) -> bool:
        if any(row.get("recipient_email") == self._user.email for row in event.rows()):
            return True
        # DELETE images may only carry the primary key
        if event.type == ChangeType.DELETE:
            link_id = str(event.old_record.get("id", ""))
            return any(todo.shared_id == link_id for todo in self.todos)
        return False

    # -------------------------------------------------------------------------
    # Patching
    # -------------------------------------------------------------------------

    async def _add_shared(self, link: dict[str, Any]) -> None:
        todo_id = str(link.get("todo_id", ""))
        try:
            view = await self._service.get_todo(self._user, todo_id)
        except NotFoundError:
            logger.warning(f"Shared todo {todo_id} not visible to {self._user.id} yet, refetching")
            await self.refresh()
            return
        self.todos = [view] + [todo for todo in self.todos if todo.id != view.id]

    def _remove_shared(self, link_id: Any) -> None:
        if link_id is None:
            return
        self.todos = [todo for todo in self.todos if todo.shared_id != str(link_id)]
