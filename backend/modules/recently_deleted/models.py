"""
Recently-deleted module data models.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator

from modules.sharing.models import SharePermission, SharedTodo
from modules.todos.models import Todo, TodoCategory, TodoPriority, coerce_ai_content


# How long a deleted todo or revoked share can be restored
RETENTION_PERIOD = timedelta(days=30)


def expiry_for(deleted_at: datetime) -> datetime:
    """Expiry timestamp for a record deleted at the given time."""
    return deleted_at + RETENTION_PERIOD


class DeletionType(str, Enum):
    """Which restore path applies to a record."""

    TODO_DELETED = "todo_deleted"      # Owner deleted the todo itself
    ACCESS_REVOKED = "access_revoked"  # Collaborator removed their share link


class RecentlyDeletedTodo(BaseModel):
    """A recently_deleted row: a snapshot kept for 30 days."""

    id: str = Field(..., description="Record ID (UUID)")
    todo_id: str = Field(..., description="ID of the deleted todo")
    title: str
    description: Optional[str] = ""
    category: TodoCategory = TodoCategory.PERSONAL
    due_date: Optional[datetime] = None
    priority: TodoPriority = TodoPriority.MEDIUM
    completed: bool = False
    user_id: str = Field(..., description="Whose bin this record is in")
    owner: str
    original_owner: str
    ai_content: Optional[dict[str, Any]] = None
    deletion_type: DeletionType
    is_shared: bool = False
    shared_id: Optional[str] = Field(None, description="Former share link ID")
    shared_todo_id: Optional[str] = Field(None, description="Todo the share link pointed at")
    permission: Optional[SharePermission] = None
    deleted_at: datetime
    deleted_by: str = Field(..., description="Email of the user who deleted")
    expires_at: datetime

    @field_validator("ai_content", mode="before")
    @classmethod
    def parse_ai_content(cls, value: Any) -> Any:
        return coerce_ai_content(value)


def build_snapshot(
    todo: Todo,
    *,
    user_id: str,
    deleted_by: str,
    deleted_at: datetime,
    deletion_type: DeletionType,
    is_shared: bool = False,
    link: Optional[SharedTodo] = None,
) -> dict[str, Any]:
    """
    Build the recently_deleted row for one affected user.

    When a share link is given, the record remembers it so the link can be
    recreated on restore, and the owner column holds the sharer's email.
    """
    row: dict[str, Any] = {
        "todo_id": todo.id,
        "title": todo.title,
        "description": todo.description or "",
        "category": todo.category.value,
        "due_date": todo.due_date.isoformat() if todo.due_date else None,
        "priority": todo.priority.value,
        "completed": todo.completed,
        "user_id": user_id,
        "owner": todo.owner,
        "original_owner": todo.original_owner,
        "ai_content": todo.ai_content,
        "deletion_type": deletion_type.value,
        "is_shared": is_shared,
        "shared_id": None,
        "shared_todo_id": None,
        "permission": None,
        "deleted_at": deleted_at.isoformat(),
        "deleted_by": deleted_by,
        "expires_at": expiry_for(deleted_at).isoformat(),
    }
    if link is not None:
        row.update({
            "owner": link.owner_email,
            "is_shared": True,
            "shared_id": link.id,
            "shared_todo_id": link.todo_id,
            "permission": link.permission.value,
        })
    return row


class RestoreResult(BaseModel):
    """Outcome of restoring a record."""

    record_id: str
    deletion_type: DeletionType
    todo: Optional[Todo] = Field(None, description="Recreated todo (todo_deleted)")
    shared_link: Optional[SharedTodo] = Field(None, description="Recreated link (access_revoked)")


class PurgeResult(BaseModel):
    """Outcome of purging expired records."""

    purged: int
