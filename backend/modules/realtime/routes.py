"""
Realtime API endpoints.

GET /api/todos/stream sends the user's full todo list as a `snapshot`
event, then a `todos_changed` event with the updated list after every
relevant change.
"""

import json
import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Request
from sse_starlette.sse import EventSourceResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_realtime_hub, get_todo_service
from shared.models import AuthenticatedUser
from modules.todos.interfaces import ITodoService

from .feed import TodoFeed
from .hub import RealtimeHub

logger = logging.getLogger(__name__)

router = APIRouter()


async def todo_event_stream(
    request: Request,
    user: AuthenticatedUser,
    service: ITodoService,
    hub: RealtimeHub,
) -> AsyncIterator[dict]:
    """Yield SSE events for one subscriber until they disconnect."""
    feed = TodoFeed(user, service)
    queue = hub.subscribe()
    try:
        await feed.refresh()
        yield {"event": "snapshot", "data": json.dumps(feed.to_payload())}

        while True:
            event = await queue.get()
            if await request.is_disconnected():
                break
            try:
                changed = await feed.apply(event)
            except Exception as e:
                logger.error(f"Failed to apply {event.table} change for user {user.id}: {e}")
                continue
            if changed:
                yield {"event": "todos_changed", "data": json.dumps(feed.to_payload())}
    finally:
        hub.unsubscribe(queue)


@router.get("/stream")
async def stream_todos(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITodoService = Depends(get_todo_service),
    hub: RealtimeHub = Depends(get_realtime_hub),
) -> EventSourceResponse:
    """Stream the current user's todo list as it changes."""
    return EventSourceResponse(todo_event_stream(request, user, service, hub))
