"""
Tests for todo API endpoints.

The todo service is replaced with an AsyncMock; these tests cover
routing, validation and error mapping.
"""

import pytest
from unittest.mock import patch, MagicMock, AsyncMock
from fastapi.testclient import TestClient
from datetime import datetime, timezone

from api.app import create_app
from api.dependencies import get_todo_service
from modules.todos.models import (
    SortBy,
    StatusFilter,
    TodoCategory,
    TodoListResponse,
    TodoPriority,
    TodoView,
)
from modules.todos.exceptions import TodoNotFoundError, TodoReadOnlyError

from tests.conftest import TEST_JWT_SECRET, create_test_token


@pytest.fixture
def app():
    """Create a fresh app for each test."""
    return create_app()


@pytest.fixture
def mock_todo() -> TodoView:
    return TodoView(
        id="todo-123",
        title="Buy milk",
        description="Semi-skimmed",
        category=TodoCategory.SHOPPING,
        priority=TodoPriority.HIGH,
        user_id="test-user-123",
        owner="test@example.com",
        original_owner="test@example.com",
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
        is_owner=True,
    )


class TestCreateTodo:
    """Tests for POST /api/todos"""

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_create_todo_success(self, mock_db, mock_settings, app, mock_todo):
        """Should create a todo for the current user."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.create_todo.return_value = mock_todo
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.post(
            "/api/todos",
            json={"title": "Buy milk", "category": "shopping", "priority": "high"},
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "todo-123"
        assert data["is_owner"] is True
        assert data["category"] == "shopping"

        user, request = mock_service.create_todo.call_args[0]
        assert user.id == "test-user-123"
        assert request.title == "Buy milk"
        assert request.priority == TodoPriority.HIGH

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_create_todo_blank_title(self, mock_db, mock_settings, app):
        """Should reject a blank title before reaching the service."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.post(
            "/api/todos",
            json={"title": "   "},
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 422
        mock_service.create_todo.assert_not_called()

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_create_todo_invalid_category(self, mock_db, mock_settings, app):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()
        app.dependency_overrides[get_todo_service] = lambda: AsyncMock()

        client = TestClient(app)
        response = client.post(
            "/api/todos",
            json={"title": "Buy milk", "category": "errands"},
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 422

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_create_todo_unauthorized(self, mock_db, mock_settings, app):
        """Should reject unauthenticated requests."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()
        client = TestClient(app)
        response = client.post("/api/todos", json={"title": "Buy milk"})
        assert response.status_code == 401


class TestListTodos:
    """Tests for GET /api/todos"""

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_list_todos_defaults(self, mock_db, mock_settings, app, mock_todo):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.list_todos.return_value = TodoListResponse(todos=[mock_todo], total=1)
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.get(
            "/api/todos",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["todos"][0]["title"] == "Buy milk"

        _, status, category, sort_by = mock_service.list_todos.call_args[0]
        assert status == StatusFilter.ALL
        assert category is None
        assert sort_by == SortBy.DATE

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_list_todos_with_filters(self, mock_db, mock_settings, app):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.list_todos.return_value = TodoListResponse(todos=[], total=0)
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.get(
            "/api/todos?status=completed&category=work&sort_by=priority",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 200
        _, status, category, sort_by = mock_service.list_todos.call_args[0]
        assert status == StatusFilter.COMPLETED
        assert category == TodoCategory.WORK
        assert sort_by == SortBy.PRIORITY

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_list_todos_invalid_status(self, mock_db, mock_settings, app):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()
        app.dependency_overrides[get_todo_service] = lambda: AsyncMock()

        client = TestClient(app)
        response = client.get(
            "/api/todos?status=archived",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 422

        app.dependency_overrides.clear()


class TestGetTodo:
    """Tests for GET /api/todos/{todo_id}"""

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_get_todo_success(self, mock_db, mock_settings, app, mock_todo):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.get_todo.return_value = mock_todo
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.get(
            "/api/todos/todo-123",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 200
        assert response.json()["id"] == "todo-123"

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_get_todo_not_found(self, mock_db, mock_settings, app):
        """Should map TodoNotFoundError to 404 with the error body."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.get_todo.side_effect = TodoNotFoundError("missing")
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.get(
            "/api/todos/missing",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "TODO_NOT_FOUND"
        assert data["details"]["todo_id"] == "missing"

        app.dependency_overrides.clear()


class TestUpdateTodo:
    """Tests for PATCH /api/todos/{todo_id} and the toggle endpoint."""

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_update_todo_partial(self, mock_db, mock_settings, app, mock_todo):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.update_todo.return_value = mock_todo.model_copy(update={"title": "Buy oat milk"})
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.patch(
            "/api/todos/todo-123",
            json={"title": "Buy oat milk"},
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Buy oat milk"
        _, todo_id, request = mock_service.update_todo.call_args[0]
        assert todo_id == "todo-123"
        assert request.to_update_dict() == {"title": "Buy oat milk"}

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_update_todo_read_only(self, mock_db, mock_settings, app):
        """A view-only collaborator gets 403."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.update_todo.side_effect = TodoReadOnlyError("todo-123")
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.patch(
            "/api/todos/todo-123",
            json={"completed": True},
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 403
        assert response.json()["error"] == "TODO_READ_ONLY"

        app.dependency_overrides.clear()

    @pytest.mark.parametrize("field", ["completed", "category", "priority"])
    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_update_todo_null_required_field(self, mock_db, mock_settings, app, field):
        """Explicit null on a NOT NULL column is a 422, never a write."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.patch(
            "/api/todos/todo-123",
            json={field: None},
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 422
        mock_service.update_todo.assert_not_called()

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_toggle_todo(self, mock_db, mock_settings, app, mock_todo):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.toggle_todo.return_value = mock_todo.model_copy(update={"completed": True})
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.post(
            "/api/todos/todo-123/toggle",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 200
        assert response.json()["completed"] is True

        app.dependency_overrides.clear()


class TestDeleteTodo:
    """Tests for DELETE /api/todos/{todo_id}"""

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_delete_todo_success(self, mock_db, mock_settings, app):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.delete_todo.return_value = None
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.delete(
            "/api/todos/todo-123",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 204
        assert response.content == b""
        mock_service.delete_todo.assert_awaited_once()

        app.dependency_overrides.clear()

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_delete_todo_not_found(self, mock_db, mock_settings, app):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        mock_service = AsyncMock()
        mock_service.delete_todo.side_effect = TodoNotFoundError("todo-123")
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.delete(
            "/api/todos/todo-123",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 404

        app.dependency_overrides.clear()


class TestAssistTodo:
    """Tests for POST /api/todos/{todo_id}/assist"""

    @patch("modules.auth.service.get_settings")
    @patch("modules.auth.service.get_supabase_client")
    def test_assist_returns_stored_content(self, mock_db, mock_settings, app, mock_todo):
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_db.return_value = MagicMock()

        ai_content = {"summary": "Go to the shop", "steps": [], "estimatedTime": "10 minutes"}
        mock_service = AsyncMock()
        mock_service.assist_todo.return_value = mock_todo.model_copy(update={"ai_content": ai_content})
        app.dependency_overrides[get_todo_service] = lambda: mock_service

        client = TestClient(app)
        response = client.post(
            "/api/todos/todo-123/assist",
            headers={"Authorization": f"Bearer {create_test_token()}"},
        )

        assert response.status_code == 200
        assert response.json()["ai_content"]["summary"] == "Go to the shop"

        app.dependency_overrides.clear()
