"""
Sharing repository for database access.

Encapsulates all Supabase queries and data mapping for:
- shared_todos (share links)
- todo_invitations
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import (
    Invitation,
    InvitationStatus,
    SharedTodo,
    SharePermission,
)


class SharingRepository(BaseRepository[SharedTodo]):
    """
    Repository for share links and invitations.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying who may share,
    respond or revoke.
    """

    LINKS_TABLE = "shared_todos"
    INVITATIONS_TABLE = "todo_invitations"

    # -------------------------------------------------------------------------
    # Share links
    # -------------------------------------------------------------------------

    def create_link(self, data: dict[str, Any]) -> SharedTodo:
        """Insert a share link row."""
        now = self._timestamp()
        row = {"created_at": now, "updated_at": now, **data}
        result = self._db.table(self.LINKS_TABLE).insert(row).execute()
        return self._map_to_link(result.data[0])

    def get_link(self, todo_id: str, recipient_email: str) -> Optional[SharedTodo]:
        """Get the share link for a todo and recipient, if any."""
        result = (
            self._db.table(self.LINKS_TABLE)
            .select("*")
            .eq("todo_id", todo_id)
            .eq("recipient_email", recipient_email)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_link(result.data[0])

    def list_links_for_todo(self, todo_id: str) -> list[SharedTodo]:
        """All share links pointing at a todo."""
        result = (
            self._db.table(self.LINKS_TABLE)
            .select("*")
            .eq("todo_id", todo_id)
            .order("created_at")
            .execute()
        )
        return [self._map_to_link(row) for row in result.data]

    def list_links_for_recipient(self, recipient_email: str) -> list[SharedTodo]:
        """All share links granted to a recipient."""
        result = (
            self._db.table(self.LINKS_TABLE)
            .select("*")
            .eq("recipient_email", recipient_email)
            .execute()
        )
        return [self._map_to_link(row) for row in result.data]

    def count_links_for_todo(self, todo_id: str) -> int:
        """Number of active share links on a todo."""
        return len(self.list_links_for_todo(todo_id))

    def update_link_permission(
        self,
        link_id: str,
        permission: SharePermission,
    ) -> Optional[SharedTodo]:
        """Change a share link's permission."""
        result = (
            self._db.table(self.LINKS_TABLE)
            .update({"permission": permission.value, "updated_at": self._timestamp()})
            .eq("id", link_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_link(result.data[0])

    def delete_link(self, link_id: str) -> None:
        """Delete one share link."""
        self._db.table(self.LINKS_TABLE).delete().eq("id", link_id).execute()

    def delete_links_for_todo(self, todo_id: str) -> None:
        """Delete every share link on a todo."""
        self._db.table(self.LINKS_TABLE).delete().eq("todo_id", todo_id).execute()

    # -------------------------------------------------------------------------
    # Invitations
    # -------------------------------------------------------------------------

    def create_invitation(self, data: dict[str, Any]) -> Invitation:
        """Insert a pending invitation."""
        row = {
            "status": InvitationStatus.PENDING.value,
            "created_at": self._timestamp(),
            **data,
        }
        result = self._db.table(self.INVITATIONS_TABLE).insert(row).execute()
        return self._map_to_invitation(result.data[0])

    def get_invitation(self, invitation_id: str) -> Optional[Invitation]:
        """Get an invitation by ID."""
        result = (
            self._db.table(self.INVITATIONS_TABLE)
            .select("*")
            .eq("id", invitation_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_invitation(result.data[0])

    def list_pending_invitations(self, recipient_email: str) -> list[Invitation]:
        """Pending invitations addressed to a recipient, newest first."""
        result = (
            self._db.table(self.INVITATIONS_TABLE)
            .select("*")
            .eq("recipient_email", recipient_email)
            .eq("status", InvitationStatus.PENDING.value)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_invitation(row) for row in result.data]

    def get_pending_invitation(self, todo_id: str, recipient_email: str) -> Optional[Invitation]:
        """Pending invitation for a todo and recipient, if any."""
        result = (
            self._db.table(self.INVITATIONS_TABLE)
            .select("*")
            .eq("todo_id", todo_id)
            .eq("recipient_email", recipient_email)
            .eq("status", InvitationStatus.PENDING.value)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_invitation(result.data[0])

    def set_invitation_status(
        self,
        invitation_id: str,
        status: InvitationStatus,
        expected: Optional[InvitationStatus] = InvitationStatus.PENDING,
    ) -> Optional[Invitation]:
        """
        Move an invitation to a new status.

        The update only matches while the invitation is still in the
        expected status, so two concurrent responses cannot both succeed.

        Returns:
            The updated Invitation, or None if nothing matched.
        """
        data: dict[str, Any] = {"status": status.value}
        if status == InvitationStatus.PENDING:
            data["responded_at"] = None
        else:
            data["responded_at"] = self._timestamp()

        query = self._db.table(self.INVITATIONS_TABLE).update(data).eq("id", invitation_id)
        if expected is not None:
            query = query.eq("status", expected.value)
        result = query.execute()

        if not result.data:
            return None
        return self._map_to_invitation(result.data[0])

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_link(self, data: dict[str, Any]) -> SharedTodo:
        """Map database row to SharedTodo model."""
        return SharedTodo(
            id=str(data["id"]),
            todo_id=str(data["todo_id"]),
            recipient_email=data["recipient_email"],
            owner_email=data["owner_email"],
            original_owner=data["original_owner"],
            permission=data.get("permission") or SharePermission.VIEW,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def _map_to_invitation(self, data: dict[str, Any]) -> Invitation:
        """Map database row to Invitation model."""
        return Invitation(
            id=str(data["id"]),
            todo_id=str(data["todo_id"]),
            todo_data=data.get("todo_data") or {},
            owner_email=data["owner_email"],
            original_owner=data["original_owner"],
            recipient_id=str(data["recipient_id"]) if data.get("recipient_id") else None,
            recipient_email=data["recipient_email"],
            permission=data.get("permission") or SharePermission.VIEW,
            status=data.get("status") or InvitationStatus.PENDING,
            created_at=data.get("created_at"),
            responded_at=data.get("responded_at"),
        )
