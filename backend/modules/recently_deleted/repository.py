"""
Recently-deleted repository for database access.
"""

from datetime import datetime
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import RecentlyDeletedTodo


class RecentlyDeletedRepository(BaseRepository[RecentlyDeletedTodo]):
    """
    Repository for the recently_deleted table.

    Note: This repository does NOT perform authorization checks.
    """

    TABLE = "recently_deleted"

    def insert(self, data: dict[str, Any]) -> RecentlyDeletedTodo:
        """Insert a snapshot row built by build_snapshot()."""
        result = self._db.table(self.TABLE).insert(data).execute()
        return self._map_to_record(result.data[0])

    def get_by_id(self, record_id: str) -> Optional[RecentlyDeletedTodo]:
        """Get a record by ID."""
        result = self._db.table(self.TABLE).select("*").eq("id", record_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_record(result.data[0])

    def list_for_user(self, user_id: str, now: datetime) -> list[RecentlyDeletedTodo]:
        """Unexpired records in a user's bin, most recent deletion first."""
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .gt("expires_at", now.isoformat())
            .order("deleted_at", desc=True)
            .execute()
        )
        return [self._map_to_record(row) for row in result.data]

    def delete(self, record_id: str) -> None:
        """Delete one record."""
        self._db.table(self.TABLE).delete().eq("id", record_id).execute()

    def delete_expired(self, now: datetime) -> int:
        """
        Delete every record whose expiry has passed.

        Returns:
            Number of records removed.
        """
        result = self._db.table(self.TABLE).delete().lte("expires_at", now.isoformat()).execute()
        return len(result.data or [])

    def _map_to_record(self, data: dict[str, Any]) -> RecentlyDeletedTodo:
        """Map database row to RecentlyDeletedTodo model."""
        return RecentlyDeletedTodo(
            id=str(data["id"]),
            todo_id=str(data["todo_id"]),
            title=data["title"],
            description=data.get("description") or "",
            category=data.get("category") or "personal",
            due_date=data.get("due_date"),
            priority=data.get("priority") or "medium",
            completed=bool(data.get("completed", False)),
            user_id=str(data["user_id"]),
            owner=data["owner"],
            original_owner=data["original_owner"],
            ai_content=data.get("ai_content"),
            deletion_type=data["deletion_type"],
            is_shared=bool(data.get("is_shared", False)),
            shared_id=str(data["shared_id"]) if data.get("shared_id") else None,
            shared_todo_id=str(data["shared_todo_id"]) if data.get("shared_todo_id") else None,
            permission=data.get("permission"),
            deleted_at=data["deleted_at"],
            deleted_by=data["deleted_by"],
            expires_at=data["expires_at"],
        )
