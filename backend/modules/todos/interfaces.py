"""
Todos module interface.

The API layer and the realtime feed depend on ITodoService for all todo
operations.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    CreateTodoRequest,
    SortBy,
    StatusFilter,
    TodoCategory,
    TodoListResponse,
    TodoView,
    UpdateTodoRequest,
)


@runtime_checkable
class ITodoService(Protocol):
    """
    Interface for todo operations.

    Every method is scoped to the calling user: todos the user neither
    owns nor holds a share link for behave as if they did not exist.
    """

    async def create_todo(
        self,
        user: AuthenticatedUser,
        request: CreateTodoRequest,
    ) -> TodoView:
        """
        Create a todo owned by the user.

        The user becomes user_id, owner and original_owner.
        """
        ...

    async def list_todos(
        self,
        user: AuthenticatedUser,
        status: StatusFilter = StatusFilter.ALL,
        category: Optional[TodoCategory] = None,
        sort_by: SortBy = SortBy.DATE,
    ) -> TodoListResponse:
        """
        List owned todos plus todos shared with the user.

        Args:
            user: The current user
            status: Status tab filter
            category: Optional category filter
            sort_by: Newest first, or by priority
        """
        ...

    async def get_todo(self, user: AuthenticatedUser, todo_id: str) -> TodoView:
        """
        Get one todo as the user sees it.

        Raises:
            TodoNotFoundError: If the todo is missing or not visible to the user
        """
        ...

    async def toggle_todo(self, user: AuthenticatedUser, todo_id: str) -> TodoView:
        """
        Flip a todo's completed flag.

        Raises:
            TodoNotFoundError: If the todo is missing or not visible to the user
            TodoReadOnlyError: If the user only has view access
        """
        ...

    async def update_todo(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        request: UpdateTodoRequest,
    ) -> TodoView:
        """
        Apply a partial edit and record the editor.

        Raises:
            TodoNotFoundError: If the todo is missing or not visible to the user
            TodoReadOnlyError: If the user only has view access
        """
        ...

    async def delete_todo(self, user: AuthenticatedUser, todo_id: str) -> None:
        """
        Delete a todo, or leave it if the user is a collaborator.

        The original owner's delete removes the todo for everyone and puts
        a snapshot in each affected user's recently-deleted bin. A
        collaborator's delete only removes their own share link.

        Raises:
            TodoNotFoundError: If the todo is missing or not visible to the user
        """
        ...

    async def assist_todo(self, user: AuthenticatedUser, todo_id: str) -> TodoView:
        """
        Generate AI task assistance and store it on the todo.

        Raises:
            TodoNotFoundError: If the todo is missing or not visible to the user
            TodoReadOnlyError: If the user only has view access
        """
        ...
