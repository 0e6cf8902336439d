"""
Sharing module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import (
    Collaborator,
    Invitation,
    InvitationResponseResult,
    SharedTodo,
    SharePermission,
    ShareTodoRequest,
)


@runtime_checkable
class ISharingService(Protocol):
    """
    Interface for sharing operations.

    Only a todo's original owner may share it or manage its collaborators.
    Only an invitation's recipient may respond to it.
    """

    async def share_todo(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        request: ShareTodoRequest,
    ) -> Invitation:
        """
        Invite another user to a todo.

        Raises:
            TodoNotFoundError: If the todo is not visible to the user
            NotTodoOwnerError: If the user is a collaborator, not the owner
            CannotShareWithSelfError: If the recipient is the user
            RecipientNotFoundError: If the recipient has no profile
            AlreadySharedError: If the recipient already has access or an invite
        """
        ...

    async def list_invitations(self, user: AuthenticatedUser) -> list[Invitation]:
        """Pending invitations addressed to the user, newest first."""
        ...

    async def respond_to_invitation(
        self,
        user: AuthenticatedUser,
        invitation_id: str,
        accept: bool,
    ) -> InvitationResponseResult:
        """
        Accept or reject an invitation.

        Accepting creates (or updates) exactly one share link.

        Raises:
            InvitationNotFoundError: If missing or addressed to someone else
            InvitationAlreadyHandledError: If no longer pending
            TodoNotFoundError: If the todo was deleted meanwhile
        """
        ...

    async def list_collaborators(
        self,
        user: AuthenticatedUser,
        todo_id: str,
    ) -> list[Collaborator]:
        """Share links on an owned todo, with recipient profiles."""
        ...

    async def update_permission(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        email: str,
        permission: SharePermission,
    ) -> SharedTodo:
        """
        Change a collaborator's permission.

        Raises:
            CollaboratorNotFoundError: If the email holds no link on the todo
        """
        ...

    async def revoke_access(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        email: str,
    ) -> None:
        """
        Remove a collaborator's share link.

        Raises:
            CollaboratorNotFoundError: If the email holds no link on the todo
        """
        ...
