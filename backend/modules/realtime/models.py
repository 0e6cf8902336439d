"""
Realtime module data models.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class ChangeType(str, Enum):
    """Postgres change kind."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class ChangeEvent(BaseModel):
    """A row change on a watched table."""

    table: str
    type: ChangeType
    record: dict[str, Any] = Field(default_factory=dict, description="New row (empty on DELETE)")
    old_record: dict[str, Any] = Field(default_factory=dict, description="Old row (UPDATE/DELETE)")
    commit_timestamp: Optional[str] = None

    @classmethod
    def from_realtime_payload(
        cls,
        payload: dict[str, Any],
        table: Optional[str] = None,
    ) -> "ChangeEvent":
        """
        Build an event from a Supabase realtime postgres_changes payload.

        Accepts the nested shape ({"data": {"type", "table", "record",
        "old_record"}}) as well as the flat one ({"eventType", "new", "old"}).
        """
        data = payload.get("data", payload)
        change_type = data.get("type") or data.get("eventType")
        return cls(
            table=data.get("table") or table or "",
            type=str(change_type).upper(),
            record=data.get("record") or data.get("new") or {},
            old_record=data.get("old_record") or data.get("old") or {},
            commit_timestamp=data.get("commit_timestamp"),
        )

    def rows(self) -> list[dict[str, Any]]:
        """Non-empty row images carried by the event."""
        return [row for row in (self.record, self.old_record) if row]
