"""
Sharing module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    ConflictError,
)


class RecipientNotFoundError(NotFoundError):
    """Raised when the share recipient has no BlueTask account."""

    def __init__(self, email: str):
        super().__init__(
            f"No user found with email: {email}",
            code="RECIPIENT_NOT_FOUND",
            details={"email": email},
        )


class CannotShareWithSelfError(ValidationError):
    """Raised when a user tries to share a todo with themselves."""

    def __init__(self):
        super().__init__(
            "You cannot share a todo with yourself",
            code="CANNOT_SHARE_WITH_SELF",
        )


class AlreadySharedError(ConflictError):
    """Raised when the recipient already has access or a pending invitation."""

    def __init__(self, todo_id: str, email: str):
        super().__init__(
            f"Todo {todo_id} is already shared with {email}",
            code="ALREADY_SHARED",
            details={"todo_id": todo_id, "email": email},
        )


class InvitationNotFoundError(NotFoundError):
    """Raised when an invitation does not exist or is addressed to someone else."""

    def __init__(self, invitation_id: str):
        super().__init__(
            f"Invitation not found: {invitation_id}",
            code="INVITATION_NOT_FOUND",
            details={"invitation_id": invitation_id},
        )


class InvitationAlreadyHandledError(ConflictError):
    """Raised when responding to an invitation that is no longer pending."""

    def __init__(self, invitation_id: str, status: str):
        super().__init__(
            f"Invitation {invitation_id} has already been {status}",
            code="INVITATION_ALREADY_HANDLED",
            details={"invitation_id": invitation_id, "status": status},
        )


class CollaboratorNotFoundError(NotFoundError):
    """Raised when the email holds no share link on the todo."""

    def __init__(self, todo_id: str, email: str):
        super().__init__(
            f"{email} is not a collaborator on todo {todo_id}",
            code="COLLABORATOR_NOT_FOUND",
            details={"todo_id": todo_id, "email": email},
        )
