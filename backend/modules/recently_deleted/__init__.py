"""
Recently-deleted module.

Keeps 30-day snapshots of deleted todos and revoked shares so they can be
restored.

Public API:
- IRecentlyDeletedService: Interface for the recently-deleted bin
- RecentlyDeletedTodo: A snapshot record
- RETENTION_PERIOD: How long records are kept
"""

from .interfaces import IRecentlyDeletedService
from .models import (
    RETENTION_PERIOD,
    DeletionType,
    RecentlyDeletedTodo,
    RestoreResult,
    PurgeResult,
    build_snapshot,
    expiry_for,
)
from .exceptions import DeletedTodoNotFoundError, TodoGoneError

__all__ = [
    # Interface
    "IRecentlyDeletedService",
    # Models
    "RETENTION_PERIOD",
    "DeletionType",
    "RecentlyDeletedTodo",
    "RestoreResult",
    "PurgeResult",
    "build_snapshot",
    "expiry_for",
    # Exceptions
    "DeletedTodoNotFoundError",
    "TodoGoneError",
]
