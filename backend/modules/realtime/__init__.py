"""
Realtime module.

Keeps each connected user's todo list in step with database changes.

Public API:
- ChangeEvent: A row change on todos or shared_todos
- TodoFeed: One user's live list and its patching rules
- RealtimeHub: Fan-out of change events to subscribers
"""

from .models import ChangeEvent, ChangeType
from .feed import TodoFeed
from .hub import RealtimeHub

__all__ = [
    "ChangeEvent",
    "ChangeType",
    "TodoFeed",
    "RealtimeHub",
]
