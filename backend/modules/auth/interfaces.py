"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID, email and provider metadata

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def sync_profile(self, user: AuthenticatedUser) -> UserProfile:
        """
        Create or refresh the user's profile row from provider metadata.

        Args:
            user: The signed-in user

        Returns:
            The upserted UserProfile
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """
        Get a user's profile by their ID.

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        """
        Get a user's profile by their email.

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def user_exists(self, email: str) -> bool:
        """
        Check whether a profile exists for an email address.

        Never raises; lookup failures are reported as False.
        """
        ...
