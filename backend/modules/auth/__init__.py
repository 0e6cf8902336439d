"""
Authentication module.

Handles JWT validation and user profile management.

Public API:
- IAuthService: Interface for auth operations
- UserProfile: A user_profiles row
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import UserProfile, JWTPayload, UserExistsResponse
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "UserProfile",
    "JWTPayload",
    "UserExistsResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
]
