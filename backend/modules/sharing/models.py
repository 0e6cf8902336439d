"""
Sharing module data models.

Share links (shared_todos rows) grant a recipient view or edit access to
a todo. Invitations (todo_invitations rows) are pending share requests.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


class SharePermission(str, Enum):
    """Access level granted by a share link."""

    VIEW = "view"
    EDIT = "edit"


class InvitationStatus(str, Enum):
    """Invitation lifecycle. ACCEPTED and REJECTED are terminal."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class SharedTodo(BaseModel):
    """An active sharing grant."""

    id: str = Field(..., description="Share link ID (UUID)")
    todo_id: str = Field(..., description="Shared todo ID")
    recipient_email: str = Field(..., description="Collaborator's email")
    owner_email: str = Field(..., description="Email of the user who shared")
    original_owner: str = Field(..., description="Email of the todo's creator")
    permission: SharePermission = Field(default=SharePermission.VIEW)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Invitation(BaseModel):
    """A share request awaiting the recipient's response."""

    id: str = Field(..., description="Invitation ID (UUID)")
    todo_id: str = Field(..., description="Todo being shared")
    todo_data: dict[str, Any] = Field(
        default_factory=dict,
        description="Snapshot of the todo at invite time",
    )
    owner_email: str
    original_owner: str
    recipient_id: Optional[str] = None
    recipient_email: str
    permission: SharePermission = Field(default=SharePermission.VIEW)
    status: InvitationStatus = Field(default=InvitationStatus.PENDING)
    created_at: Optional[datetime] = None
    responded_at: Optional[datetime] = None


class ShareTodoRequest(BaseModel):
    """Request to share a todo with another user."""

    recipient_email: EmailStr = Field(..., description="Email of an existing user")
    permission: SharePermission = Field(default=SharePermission.VIEW)

    @field_validator("recipient_email", mode="before")
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class InvitationResponseRequest(BaseModel):
    """Recipient's answer to an invitation."""

    accept: bool = Field(..., description="True to accept, False to reject")


class InvitationResponseResult(BaseModel):
    """Outcome of responding to an invitation."""

    invitation: Invitation
    shared_link: Optional[SharedTodo] = Field(
        None,
        description="The created share link (accepted invitations only)",
    )


class UpdatePermissionRequest(BaseModel):
    """Change a collaborator's access level."""

    permission: SharePermission


class Collaborator(BaseModel):
    """A share link joined with the recipient's profile."""

    share_id: str
    email: str
    permission: SharePermission
    user_id: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
