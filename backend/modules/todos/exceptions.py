"""
Todos module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class TodoNotFoundError(NotFoundError):
    """Raised when a todo does not exist or the user has no access to it."""

    def __init__(self, todo_id: str):
        super().__init__(
            f"Todo not found: {todo_id}",
            code="TODO_NOT_FOUND",
            details={"todo_id": todo_id},
        )


class TodoReadOnlyError(AuthorizationError):
    """Raised when a view-only collaborator tries to modify a todo."""

    def __init__(self, todo_id: str):
        super().__init__(
            f"You only have view access to todo: {todo_id}",
            code="TODO_READ_ONLY",
            details={"todo_id": todo_id},
        )


class NotTodoOwnerError(AuthorizationError):
    """Raised when an owner-only operation is attempted by a collaborator."""

    def __init__(self, todo_id: str):
        super().__init__(
            f"Only the owner can do this for todo: {todo_id}",
            code="NOT_TODO_OWNER",
            details={"todo_id": todo_id},
        )
