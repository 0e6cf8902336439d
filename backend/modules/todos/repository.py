"""
Todo repository for database access.

Encapsulates all Supabase queries and data mapping for the todos table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Todo


class TodoRepository(BaseRepository[Todo]):
    """
    Repository for todo data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership and share
    permissions.
    """

    TABLE = "todos"

    def create(self, data: dict[str, Any]) -> Todo:
        """
        Insert a todo row.

        Args:
            data: Column values (title, user_id, owner, original_owner, ...)

        Returns:
            Created Todo with generated ID and timestamps.
        """
        now = self._timestamp()
        row = {"created_at": now, "updated_at": now, **data}
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_todo(result.data[0])

    def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """Get a todo by ID, or None if it does not exist."""
        result = self._db.table(self.TABLE).select("*").eq("id", todo_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_todo(result.data[0])

    def get_many(self, todo_ids: list[str]) -> list[Todo]:
        """Get todos by ID. Missing IDs are skipped."""
        if not todo_ids:
            return []
        result = self._db.table(self.TABLE).select("*").in_("id", todo_ids).execute()
        return [self._map_to_todo(row) for row in result.data]

    def list_owned(self, user_id: str) -> list[Todo]:
        """List todos owned by a user, newest first."""
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_todo(row) for row in result.data]

    def update(self, todo_id: str, data: dict[str, Any]) -> Optional[Todo]:
        """
        Update a todo row and bump updated_at.

        Returns:
            The updated Todo, or None if no row matched.
        """
        row = {**data, "updated_at": self._timestamp()}
        result = self._db.table(self.TABLE).update(row).eq("id", todo_id).execute()
        if not result.data:
            return None
        return self._map_to_todo(result.data[0])

    def set_shared_count(self, todo_id: str, count: int) -> None:
        """Store the number of active share links on the todo."""
        self._db.table(self.TABLE).update({"shared_count": count}).eq("id", todo_id).execute()

    def delete(self, todo_id: str) -> None:
        """Delete a todo row. Share links and invitations cascade."""
        self._db.table(self.TABLE).delete().eq("id", todo_id).execute()

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_todo(self, data: dict[str, Any]) -> Todo:
        """Map database row to Todo model."""
        return Todo(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description") or "",
            completed=bool(data.get("completed", False)),
            category=data.get("category") or "personal",
            due_date=data.get("due_date"),
            priority=data.get("priority") or "medium",
            user_id=str(data["user_id"]),
            owner=data["owner"],
            original_owner=data["original_owner"],
            ai_content=data.get("ai_content"),
            shared_count=data.get("shared_count") or 0,
            last_edited_by=data.get("last_edited_by"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
