"""
Todo API endpoints.

Provides REST endpoints for todo CRUD. Errors raised by the service
(TodoNotFoundError, TodoReadOnlyError) are mapped to HTTP responses by
the global exception handler.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_todo_service
from shared.models import AuthenticatedUser

from .interfaces import ITodoService
from .models import (
    CreateTodoRequest,
    SortBy,
    StatusFilter,
    TodoCategory,
    TodoListResponse,
    TodoView,
    UpdateTodoRequest,
)

router = APIRouter()


@router.post("", response_model=TodoView, status_code=201)
async def create_todo(
    request: CreateTodoRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoView:
    """Create a todo owned by the current user."""
    return await service.create_todo(user, request)


@router.get("", response_model=TodoListResponse)
async def list_todos(
    status: StatusFilter = Query(default=StatusFilter.ALL, description="Status tab"),
    category: Optional[TodoCategory] = Query(default=None, description="Filter by category"),
    sort_by: SortBy = Query(default=SortBy.DATE, description="Sort order"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoListResponse:
    """
    List the current user's todos.

    Includes todos shared with the user. Newest first unless sorted by
    priority.
    """
    return await service.list_todos(user, status, category, sort_by)


@router.get("/{todo_id}", response_model=TodoView)
async def get_todo(
    todo_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoView:
    """Get a todo the current user owns or has been shared."""
    return await service.get_todo(user, todo_id)


@router.patch("/{todo_id}", response_model=TodoView)
async def update_todo(
    todo_id: str,
    request: UpdateTodoRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoView:
    """Edit a todo. Requires ownership or edit permission."""
    return await service.update_todo(user, todo_id, request)


@router.post("/{todo_id}/toggle", response_model=TodoView)
async def toggle_todo(
    todo_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoView:
    """Mark a todo completed or pending."""
    return await service.toggle_todo(user, todo_id)


@router.delete("/{todo_id}", status_code=204)
async def delete_todo(
    todo_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> Response:
    """
    Delete a todo.

    The owner's delete removes it for every collaborator. A collaborator's
    delete only removes the todo from their own list. Either way the
    item can be restored from recently deleted for 30 days.
    """
    await service.delete_todo(user, todo_id)
    return Response(status_code=204)


@router.post("/{todo_id}/assist", response_model=TodoView)
async def assist_todo(
    todo_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
) -> TodoView:
    """Generate AI task assistance and save it on the todo."""
    return await service.assist_todo(user, todo_id)
