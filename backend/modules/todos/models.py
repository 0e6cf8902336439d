"""
Todos module data models.

These models define the core data structures for BlueTask todos and the
per-user views the API returns.
"""

import json
from datetime import datetime
from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from modules.sharing.models import SharePermission


class TodoCategory(str, Enum):
    """Todo category."""

    PERSONAL = "personal"
    WORK = "work"
    SHOPPING = "shopping"
    OTHER = "other"


class TodoPriority(str, Enum):
    """Todo priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Sort rank for priority ordering (higher sorts first)
PRIORITY_RANK = {
    TodoPriority.HIGH: 3,
    TodoPriority.MEDIUM: 2,
    TodoPriority.LOW: 1,
}


class StatusFilter(str, Enum):
    """Status tab on the todo list."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


class SortBy(str, Enum):
    """List ordering."""

    DATE = "date"          # Newest first
    PRIORITY = "priority"  # High, medium, low


def coerce_ai_content(value: Any) -> Any:
    # Older rows stored ai_content as a JSON string
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            return None
        return parsed if isinstance(parsed, dict) else None
    return value


class Todo(BaseModel):
    """A todos row."""

    id: str = Field(..., description="Todo ID (UUID)")
    title: str = Field(..., description="Todo title")
    description: Optional[str] = Field(default="", description="Free-form details")
    completed: bool = Field(default=False)
    category: TodoCategory = Field(default=TodoCategory.PERSONAL)
    due_date: Optional[datetime] = None
    priority: TodoPriority = Field(default=TodoPriority.MEDIUM)
    user_id: str = Field(..., description="Owning user ID")
    owner: str = Field(..., description="Owner email")
    original_owner: str = Field(..., description="Creator email, never changes")
    ai_content: Optional[dict[str, Any]] = Field(
        None,
        description="Stored AI task assistance",
    )
    shared_count: int = Field(default=0, ge=0, description="Active share links")
    last_edited_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("ai_content", mode="before")
    @classmethod
    def parse_ai_content(cls, value: Any) -> Any:
        return coerce_ai_content(value)

    def is_owned_by(self, user_id: str, email: str) -> bool:
        """True if the user is this todo's original owner."""
        return self.user_id == user_id or self.original_owner == email


class TodoView(Todo):
    """
    A todo as seen by one user.

    Owned todos carry is_owner=True; todos reached through a share link
    carry is_shared=True plus the link's ID and permission.
    """

    is_owner: bool = False
    is_shared: bool = False
    shared_id: Optional[str] = Field(None, description="Share link ID for shared todos")
    owner_email: Optional[str] = Field(None, description="Email of the user who shared it")
    permission: Optional[SharePermission] = None

    @property
    def can_edit(self) -> bool:
        return self.is_owner or self.permission == SharePermission.EDIT


class CreateTodoRequest(BaseModel):
    """Request to create a todo."""

    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = Field(default="", max_length=10000)
    category: TodoCategory = Field(default=TodoCategory.PERSONAL)
    due_date: Optional[datetime] = None
    priority: TodoPriority = Field(default=TodoPriority.MEDIUM)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title cannot be blank")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value


class UpdateTodoRequest(BaseModel):
    """
    Partial update of a todo.

    Only fields that were explicitly sent are written. Ownership fields are
    not part of this model and can never be changed through an edit.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = Field(None, max_length=10000)
    completed: Optional[bool] = None
    category: Optional[TodoCategory] = None
    due_date: Optional[datetime] = None
    priority: Optional[TodoPriority] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            raise ValueError("Title cannot be null")
        value = value.strip()
        if not value:
            raise ValueError("Title cannot be blank")
        return value

    @field_validator("completed", "category", "priority")
    @classmethod
    def not_null(cls, value: Any, info: ValidationInfo) -> Any:
        # NOT NULL columns; omit the field to leave it unchanged
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value

    def to_update_dict(self) -> dict[str, Any]:
        """Changed fields as JSON-ready column values."""
        return self.model_dump(mode="json", exclude_unset=True)


class TodoListResponse(BaseModel):
    """List of todos visible to a user."""

    todos: list[TodoView]
    total: int
