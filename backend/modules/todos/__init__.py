"""
Todos module.

Handles todo CRUD, per-user views of owned and shared todos, and the
delete paths that feed the recently-deleted bin.

Public API:
- ITodoService: Interface for todo operations
- Todo: A todos row
- TodoView: A todo as seen by one user
"""

from .interfaces import ITodoService
from .models import (
    Todo,
    TodoView,
    TodoListResponse,
    TodoCategory,
    TodoPriority,
    StatusFilter,
    SortBy,
    CreateTodoRequest,
    UpdateTodoRequest,
)
from .exceptions import (
    TodoNotFoundError,
    TodoReadOnlyError,
    NotTodoOwnerError,
)

__all__ = [
    # Interface
    "ITodoService",
    # Models
    "Todo",
    "TodoView",
    "TodoListResponse",
    "TodoCategory",
    "TodoPriority",
    "StatusFilter",
    "SortBy",
    "CreateTodoRequest",
    "UpdateTodoRequest",
    # Exceptions
    "TodoNotFoundError",
    "TodoReadOnlyError",
    "NotTodoOwnerError",
]
