"""
Sharing service implementation with Supabase.

Turns share requests into invitations and accepted invitations into share
links, and lets the original owner manage collaborators.
"""

import logging
from typing import Any

from shared.models import AuthenticatedUser
from modules.todos.exceptions import TodoNotFoundError, NotTodoOwnerError
from modules.todos.models import Todo
from modules.todos.repository import TodoRepository

from .interfaces import ISharingService
from .models import (
    Collaborator,
    Invitation,
    InvitationResponseResult,
    InvitationStatus,
    SharedTodo,
    SharePermission,
    ShareTodoRequest,
)
from .repository import SharingRepository
from .exceptions import (
    AlreadySharedError,
    CannotShareWithSelfError,
    CollaboratorNotFoundError,
    InvitationAlreadyHandledError,
    InvitationNotFoundError,
    RecipientNotFoundError,
)

logger = logging.getLogger(__name__)


class SharingService(ISharingService):
    """
    Sharing service with Supabase backend.

    Implements ISharingService protocol with real database operations.
    """

    def __init__(
        self,
        sharing: SharingRepository,
        todos: TodoRepository,
        auth: Any = None,  # IAuthService - injected
    ):
        self._sharing = sharing
        self._todos = todos
        self._auth = auth

    async def share_todo(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        request: ShareTodoRequest,
    ) -> Invitation:
        """Create a pending invitation for an existing user."""
        todo = self._require_owner(user, todo_id)

        recipient_email = str(request.recipient_email).strip().lower()
        if recipient_email == user.email:
            raise CannotShareWithSelfError()

        recipient = await self._auth.get_user_by_email(recipient_email)
        if recipient is None:
            raise RecipientNotFoundError(recipient_email)

        if (
            self._sharing.get_link(todo_id, recipient_email) is not None
            or self._sharing.get_pending_invitation(todo_id, recipient_email) is not None
        ):
            raise AlreadySharedError(todo_id, recipient_email)

        invitation = self._sharing.create_invitation({
            "todo_id": todo.id,
            "todo_data": todo.model_dump(mode="json"),
            "owner_email": user.email,
            "original_owner": todo.original_owner,
            "recipient_id": recipient.id,
            "recipient_email": recipient_email,
            "permission": request.permission.value,
        })
        logger.info(
            f"User {user.id} invited {recipient_email} to todo {todo_id} "
            f"with {request.permission.value} permission"
        )
        return invitation

    async def list_invitations(self, user: AuthenticatedUser) -> list[Invitation]:
        """Pending invitations for the current user."""
        return self._sharing.list_pending_invitations(user.email)

    async def respond_to_invitation(
        self,
        user: AuthenticatedUser,
        invitation_id: str,
        accept: bool,
    ) -> InvitationResponseResult:
        """Accept or reject a pending invitation addressed to the user."""
        invitation = self._sharing.get_invitation(invitation_id)
        if invitation is None or invitation.recipient_email.lower() != user.email:
            raise InvitationNotFoundError(invitation_id)
        if invitation.status != InvitationStatus.PENDING:
            raise InvitationAlreadyHandledError(invitation_id, invitation.status.value)

        if not accept:
            rejected = self._sharing.set_invitation_status(invitation_id, InvitationStatus.REJECTED)
            if rejected is None:
                raise InvitationAlreadyHandledError(invitation_id, "answered")
            logger.info(f"User {user.id} rejected invitation {invitation_id}")
            return InvitationResponseResult(invitation=rejected)

        if self._todos.get_by_id(invitation.todo_id) is None:
            raise TodoNotFoundError(invitation.todo_id)

        accepted = self._sharing.set_invitation_status(invitation_id, InvitationStatus.ACCEPTED)
        if accepted is None:
            raise InvitationAlreadyHandledError(invitation_id, "answered")

        try:
            link = self._upsert_link(invitation, user.email)
        except Exception:
            logger.error(f"Failed to create share link for invitation {invitation_id}, reopening it")
            self._sharing.set_invitation_status(
                invitation_id,
                InvitationStatus.PENDING,
                expected=InvitationStatus.ACCEPTED,
            )
            raise

        self._refresh_shared_count(invitation.todo_id)
        logger.info(f"User {user.id} accepted invitation {invitation_id} for todo {invitation.todo_id}")
        return InvitationResponseResult(invitation=accepted, shared_link=link)

    async def list_collaborators(
        self,
        user: AuthenticatedUser,
        todo_id: str,
    ) -> list[Collaborator]:
        """Collaborators on an owned todo, with profile details where known."""
        self._require_owner(user, todo_id)

        collaborators = []
        for link in self._sharing.list_links_for_todo(todo_id):
            profile = await self._auth.get_user_by_email(link.recipient_email)
            collaborators.append(Collaborator(
                share_id=link.id,
                email=link.recipient_email,
                permission=link.permission,
                user_id=profile.id if profile else None,
                display_name=profile.display_name if profile else None,
                photo_url=profile.photo_url if profile else None,
            ))
        return collaborators

    async def update_permission(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        email: str,
        permission: SharePermission,
    ) -> SharedTodo:
        """Change a collaborator's access level."""
        self._require_owner(user, todo_id)

        email = email.strip().lower()
        link = self._sharing.get_link(todo_id, email)
        if link is None:
            raise CollaboratorNotFoundError(todo_id, email)

        updated = self._sharing.update_link_permission(link.id, permission)
        if updated is None:
            raise CollaboratorNotFoundError(todo_id, email)
        logger.info(f"User {user.id} set {email} to {permission.value} on todo {todo_id}")
        return updated

    async def revoke_access(
        self,
        user: AuthenticatedUser,
        todo_id: str,
        email: str,
    ) -> None:
        """Remove a collaborator from an owned todo."""
        self._require_owner(user, todo_id)

        email = email.strip().lower()
        link = self._sharing.get_link(todo_id, email)
        if link is None:
            raise CollaboratorNotFoundError(todo_id, email)

        self._sharing.delete_link(link.id)
        self._refresh_shared_count(todo_id)
        logger.info(f"User {user.id} revoked {email}'s access to todo {todo_id}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_owner(self, user: AuthenticatedUser, todo_id: str) -> Todo:
        """
        Load a todo the user originally created.

        Raises:
            TodoNotFoundError: If missing or not visible to the user
            NotTodoOwnerError: If the user is only a collaborator
        """
        todo = self._todos.get_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        if todo.is_owned_by(user.id, user.email):
            return todo
        if self._sharing.get_link(todo_id, user.email) is not None:
            raise NotTodoOwnerError(todo_id)
        raise TodoNotFoundError(todo_id)

    def _upsert_link(self, invitation: Invitation, recipient_email: str) -> SharedTodo:
        existing = self._sharing.get_link(invitation.todo_id, recipient_email)
        if existing is not None:
            updated = self._sharing.update_link_permission(existing.id, invitation.permission)
            return updated or existing

        return self._sharing.create_link({
            "todo_id": invitation.todo_id,
            "recipient_email": recipient_email,
            "owner_email": invitation.owner_email,
            "original_owner": invitation.original_owner,
            "permission": invitation.permission.value,
        })

    def _refresh_shared_count(self, todo_id: str) -> None:
        self._todos.set_shared_count(todo_id, self._sharing.count_links_for_todo(todo_id))
