"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from types import SimpleNamespace
from typing import Optional
from unittest.mock import AsyncMock
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from modules.recently_deleted.repository import RecentlyDeletedRepository
from modules.recently_deleted.service import RecentlyDeletedService
from modules.sharing.models import SharePermission, ShareTodoRequest
from modules.sharing.repository import SharingRepository
from modules.sharing.service import SharingService
from modules.todos.repository import TodoRepository
from modules.todos.service import TodoService
from shared.database import reset_client_cache
from shared.models import AuthenticatedUser

from tests.fakes import FakeAuth, FakeSupabase


# Test JWT secret (only for testing - matches test_auth.py)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    full_name: Optional[str] = None,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        full_name: Optional provider display name (user_metadata.full_name)

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
        "user_metadata": {"full_name": full_name} if full_name else {},
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


def make_user(user_id: str, email: str, full_name: Optional[str] = None) -> AuthenticatedUser:
    """Build an AuthenticatedUser as the auth middleware would."""
    return AuthenticatedUser(id=user_id, email=email, email_verified=True, full_name=full_name)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the auth service, service container and client cache around each test."""
    reset_auth_service()
    reset_container()
    yield
    reset_auth_service()
    reset_container()
    reset_client_cache()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


# Collaboration fixtures: three signed-up users sharing one fake database


@pytest.fixture
def alice() -> AuthenticatedUser:
    return make_user("user-alice", "alice@example.com", "Alice")


@pytest.fixture
def bob() -> AuthenticatedUser:
    return make_user("user-bob", "bob@example.com", "Bob")


@pytest.fixture
def carol() -> AuthenticatedUser:
    return make_user("user-carol", "carol@example.com", "Carol")


@pytest.fixture
def fake_db() -> FakeSupabase:
    """Empty in-memory Supabase."""
    return FakeSupabase()


@pytest.fixture
def fake_auth(alice, bob, carol) -> FakeAuth:
    """Profile directory holding alice, bob and carol."""
    return FakeAuth(alice, bob, carol)


@pytest.fixture
def services(fake_db, fake_auth) -> SimpleNamespace:
    """Todo, sharing and recently-deleted services wired to one fake database."""
    todo_repo = TodoRepository(fake_db)
    sharing_repo = SharingRepository(fake_db)
    deleted_repo = RecentlyDeletedRepository(fake_db)
    return SimpleNamespace(
        todos=TodoService(
            todos=todo_repo,
            sharing=sharing_repo,
            recently_deleted=deleted_repo,
            auth=fake_auth,
            assistant=AsyncMock(),
        ),
        sharing=SharingService(sharing=sharing_repo, todos=todo_repo, auth=fake_auth),
        recently_deleted=RecentlyDeletedService(
            recently_deleted=deleted_repo,
            todos=todo_repo,
            sharing=sharing_repo,
        ),
    )


async def share_with(
    services: SimpleNamespace,
    owner: AuthenticatedUser,
    todo_id: str,
    recipient: AuthenticatedUser,
    permission: SharePermission = SharePermission.VIEW,
):
    """Invite a recipient and accept on their behalf. Returns the share link."""
    invitation = await services.sharing.share_todo(
        owner,
        todo_id,
        ShareTodoRequest(recipient_email=recipient.email, permission=permission),
    )
    result = await services.sharing.respond_to_invitation(recipient, invitation.id, accept=True)
    return result.shared_link
