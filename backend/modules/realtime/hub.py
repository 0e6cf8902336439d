"""
In-process fan-out of change events to SSE subscribers.
"""

import asyncio
import logging

from .models import ChangeEvent

logger = logging.getLogger(__name__)

SUBSCRIBER_QUEUE_SIZE = 256


class RealtimeHub:
    """
    Broadcasts change events to every subscriber.

    Each subscriber gets its own bounded queue. A subscriber whose queue is
    full misses the event.
    """

    def __init__(self, queue_size: int = SUBSCRIBER_QUEUE_SIZE):
        self._queue_size = queue_size
        self._subscribers: set[asyncio.Queue] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> asyncio.Queue:
        """Register a subscriber and return its queue."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._queue_size)
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        """Remove a subscriber. Unknown queues are ignored."""
        self._subscribers.discard(queue)

    def publish(self, event: ChangeEvent) -> int:
        """
        Deliver an event to all subscribers.

        Returns:
            Number of subscribers the event was queued for.
        """
        delivered = 0
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning(f"Realtime subscriber queue full, dropping {event.table} {event.type.value}")
        return delivered
