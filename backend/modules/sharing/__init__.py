"""
Sharing module.

Handles invitations, share links and collaborator management.

Public API:
- ISharingService: Interface for sharing operations
- SharedTodo: An active share link
- Invitation: A pending share request
"""

from .interfaces import ISharingService
from .models import (
    SharedTodo,
    SharePermission,
    Invitation,
    InvitationStatus,
    ShareTodoRequest,
    InvitationResponseRequest,
    InvitationResponseResult,
    UpdatePermissionRequest,
    Collaborator,
)
from .exceptions import (
    RecipientNotFoundError,
    CannotShareWithSelfError,
    AlreadySharedError,
    InvitationNotFoundError,
    InvitationAlreadyHandledError,
    CollaboratorNotFoundError,
)

__all__ = [
    # Interface
    "ISharingService",
    # Models
    "SharedTodo",
    "SharePermission",
    "Invitation",
    "InvitationStatus",
    "ShareTodoRequest",
    "InvitationResponseRequest",
    "InvitationResponseResult",
    "UpdatePermissionRequest",
    "Collaborator",
    # Exceptions
    "RecipientNotFoundError",
    "CannotShareWithSelfError",
    "AlreadySharedError",
    "InvitationNotFoundError",
    "InvitationAlreadyHandledError",
    "CollaboratorNotFoundError",
]
