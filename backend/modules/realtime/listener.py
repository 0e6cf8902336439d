"""
Supabase realtime listener.

Subscribes to postgres changes on the todos and shared_todos tables and
publishes them to the RealtimeHub.
"""

import logging
from typing import Any, Optional

from supabase import AsyncClient

from shared.database import get_supabase_async_client

from .feed import SHARED_TODOS_TABLE, TODOS_TABLE
from .hub import RealtimeHub
from .models import ChangeEvent

logger = logging.getLogger(__name__)

WATCHED_TABLES = (TODOS_TABLE, SHARED_TODOS_TABLE)


class SupabaseRealtimeListener:
    """Bridges Supabase realtime channels to the hub."""

    def __init__(self, hub: RealtimeHub):
        self._hub = hub
        self._client: Optional[AsyncClient] = None
        self._channels: list[Any] = []

    @property
    def is_running(self) -> bool:
        return self._client is not None

    async def start(self) -> None:
        """Connect and subscribe to every watched table."""
        if self._client is not None:
            return

        self._client = await get_supabase_async_client()
        for table in WATCHED_TABLES:
            channel = self._client.channel(f"bluetask-{table}")
            channel.on_postgres_changes(
                "*",
                schema="public",
                table=table,
                callback=self._make_callback(table),
            )
            await channel.subscribe()
            self._channels.append(channel)
            logger.info(f"Subscribed to realtime changes on {table}")

    async def stop(self) -> None:
        """Unsubscribe and drop the client."""
        if self._client is None:
            return
        try:
            await self._client.remove_all_channels()
        except Exception as e:
            logger.warning(f"Error closing realtime channels: {e}")
        self._channels = []
        self._client = None
        logger.info("Realtime listener stopped")

    def _make_callback(self, table: str):
        def on_change(payload: dict[str, Any]) -> None:
            try:
                event = ChangeEvent.from_realtime_payload(payload, table)
            except Exception as e:
                logger.error(f"Could not read realtime payload for {table}: {e}")
                return
            self._hub.publish(event)

        return on_change
