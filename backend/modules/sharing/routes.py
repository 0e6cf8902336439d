"""
Sharing API endpoints.

Two routers: `router` adds share/collaborator endpoints under /api/todos,
and `invitations_router` serves /api/invitations.
"""

from fastapi import APIRouter, Depends, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_sharing_service
from shared.models import AuthenticatedUser

from .interfaces import ISharingService
from .models import (
    Collaborator,
    Invitation,
    InvitationResponseRequest,
    InvitationResponseResult,
    SharedTodo,
    ShareTodoRequest,
    UpdatePermissionRequest,
)

router = APIRouter()
invitations_router = APIRouter()


@router.post("/{todo_id}/share", response_model=Invitation, status_code=201)
async def share_todo(
    todo_id: str,
    request: ShareTodoRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> Invitation:
    """
    Invite another user to a todo.

    Only the todo's original owner can share it. The recipient must
    already have an account.
    """
    return await service.share_todo(user, todo_id, request)


@router.get("/{todo_id}/collaborators", response_model=list[Collaborator])
async def list_collaborators(
    todo_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> list[Collaborator]:
    """List who a todo is shared with."""
    return await service.list_collaborators(user, todo_id)


@router.patch("/{todo_id}/collaborators/{email}", response_model=SharedTodo)
async def update_collaborator_permission(
    todo_id: str,
    email: str,
    request: UpdatePermissionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> SharedTodo:
    """Change a collaborator between view and edit."""
    return await service.update_permission(user, todo_id, email, request.permission)


@router.delete("/{todo_id}/collaborators/{email}", status_code=204)
async def revoke_collaborator(
    todo_id: str,
    email: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> Response:
    """Remove a collaborator's access."""
    await service.revoke_access(user, todo_id, email)
    return Response(status_code=204)


@invitations_router.get("", response_model=list[Invitation])
async def list_invitations(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> list[Invitation]:
    """List the current user's pending invitations."""
    return await service.list_invitations(user)


@invitations_router.post("/{invitation_id}/respond", response_model=InvitationResponseResult)
async def respond_to_invitation(
    invitation_id: str,
    request: InvitationResponseRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ISharingService = Depends(get_sharing_service),
) -> InvitationResponseResult:
    """Accept or reject an invitation."""
    return await service.respond_to_invitation(user, invitation_id, request.accept)
