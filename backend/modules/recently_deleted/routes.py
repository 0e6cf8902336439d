"""
Recently-deleted API endpoints.
"""

from fastapi import APIRouter, Depends, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_recently_deleted_service
from shared.models import AuthenticatedUser

from .interfaces import IRecentlyDeletedService
from .models import PurgeResult, RecentlyDeletedTodo, RestoreResult

router = APIRouter()


@router.get("", response_model=list[RecentlyDeletedTodo])
async def list_recently_deleted(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecentlyDeletedService = Depends(get_recently_deleted_service),
) -> list[RecentlyDeletedTodo]:
    """List items deleted in the last 30 days, most recent first."""
    return await service.list_deleted(user)


@router.post("/purge", response_model=PurgeResult)
async def purge_expired(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecentlyDeletedService = Depends(get_recently_deleted_service),
) -> PurgeResult:
    """Remove every record older than 30 days."""
    return PurgeResult(purged=await service.purge_expired())


@router.post("/{record_id}/restore", response_model=RestoreResult)
async def restore_deleted(
    record_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecentlyDeletedService = Depends(get_recently_deleted_service),
) -> RestoreResult:
    """
    Restore a deleted todo or a removed share.

    Returns 409 if the todo behind a removed share has been deleted by its
    owner.
    """
    return await service.restore(user, record_id)


@router.delete("/{record_id}", status_code=204)
async def delete_permanently(
    record_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IRecentlyDeletedService = Depends(get_recently_deleted_service),
) -> Response:
    """Remove an item from recently deleted for good."""
    await service.delete_permanently(user, record_id)
    return Response(status_code=204)
