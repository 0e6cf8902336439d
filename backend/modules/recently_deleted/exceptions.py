"""
Recently-deleted module exceptions.
"""

from shared.exceptions import NotFoundError, ConflictError


class DeletedTodoNotFoundError(NotFoundError):
    """Raised when a record is missing, expired, or in another user's bin."""

    def __init__(self, record_id: str):
        super().__init__(
            f"Deleted todo not found: {record_id}",
            code="DELETED_TODO_NOT_FOUND",
            details={"record_id": record_id},
        )


class TodoGoneError(ConflictError):
    """Raised when restoring access to a todo its owner has since deleted."""

    def __init__(self, record_id: str, todo_id: str):
        super().__init__(
            "The shared todo no longer exists and cannot be restored",
            code="TODO_GONE",
            details={"record_id": record_id, "todo_id": todo_id},
        )
