"""
User-related endpoints.

Provides endpoints for the current user's profile and user lookup.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, EmailStr

from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserProfile, UserExistsResponse
from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """Current user response model."""

    id: str
    email: EmailStr
    email_verified: bool
    role: str
    display_name: Optional[str] = None
    photo_url: Optional[str] = None


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> CurrentUserResponse:
    """
    Get the current user's profile.

    Falls back to identity-provider metadata if the profile row has not
    been synced yet.
    """
    profile = await auth.get_user_by_id(user.id)
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        email_verified=user.email_verified,
        role=user.role,
        display_name=profile.display_name if profile else user.full_name,
        photo_url=profile.photo_url if profile else user.avatar_url,
    )


@router.post("/me/sync", response_model=UserProfile)
async def sync_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Create or refresh the current user's profile row.

    Clients call this after sign-in.
    """
    return await auth.sync_profile(user)


@router.get("/exists", response_model=UserExistsResponse)
async def check_user_exists(
    email: str = Query(..., description="Email address to look up"),
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> UserExistsResponse:
    """Check whether an account exists for an email before sharing with it."""
    normalized = email.strip().lower()
    return UserExistsResponse(email=normalized, exists=await auth.user_exists(normalized))
