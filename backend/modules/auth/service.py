"""
Authentication service implementation.

Validates Supabase JWT tokens and keeps the user_profiles table in sync.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import UserProfile, JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

PROFILES_TABLE = "user_profiles"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens for authentication and the Supabase
    user_profiles table for profile storage.
    """

    def __init__(self):
        self._settings = get_settings()
        self._db = get_supabase_client()

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            # Decode and validate the JWT
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )

            jwt_payload = JWTPayload(**payload)

            if not jwt_payload.email:
                raise InvalidTokenError("Token has no email claim")

            metadata = jwt_payload.user_metadata
            last_sign_in = datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc)

            return AuthenticatedUser(
                id=jwt_payload.sub,
                email=jwt_payload.email.strip().lower(),
                email_verified=jwt_payload.email_confirmed_at is not None,
                full_name=metadata.get("full_name") or metadata.get("name"),
                avatar_url=metadata.get("avatar_url"),
                last_sign_in=last_sign_in,
                role=jwt_payload.role if jwt_payload.role != "authenticated" else "user",
            )

        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))
        except PydanticValidationError:
            raise InvalidTokenError("Token claims are malformed")

    async def sync_profile(self, user: AuthenticatedUser) -> UserProfile:
        """
        Upsert the profile row for a signed-in user.

        The display name falls back to the email when the provider
        does not supply a full name.
        """
        data = {
            "id": user.id,
            "email": user.email,
            "display_name": user.full_name or user.email,
            "photo_url": user.avatar_url,
            "last_updated": datetime.now(timezone.utc).isoformat(),
        }
        result = self._db.table(PROFILES_TABLE).upsert(data).execute()
        logger.info(f"Synced profile for user {user.id}")
        row = result.data[0] if result.data else data
        return self._map_to_profile(row)

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile by their ID."""
        result = self._db.table(PROFILES_TABLE).select("*").eq("id", user_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        """Get a user's profile by their email."""
        if not email:
            return None
        result = self._db.table(PROFILES_TABLE).select("*").eq("email", email).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    async def user_exists(self, email: str) -> bool:
        """Check whether a profile exists for an email address."""
        if not email or not email.strip():
            return False
        try:
            return await self.get_user_by_email(email.strip()) is not None
        except Exception as e:
            logger.error(f"Error checking user existence for {email}: {e}")
            return False

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(
            id=str(data["id"]),
            email=data["email"],
            display_name=data.get("display_name"),
            photo_url=data.get("photo_url"),
            last_updated=data.get("last_updated"),
        )


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
