"""Supabase repository for the activity log."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitquest.domain.activities import Activity
from fitquest.services.activities import ActivityRepository

_COLUMNS = "id, character_id, type, description, xp_gained, metadata, created_at"


@dataclass
class SupabaseActivityRepository(ActivityRepository):
    """Supabase-backed activity repository."""

    client: Client

    def create_activity(  # noqa: PLR0913
        self,
        character_id: UUID,
        activity_type: str,
        description: str,
        xp_gained: int,
        metadata: dict[str, object],
        created_at: datetime,
    ) -> Activity:
        """Insert an activity row."""
        response = (
            self.client.table("activities")
            .insert(
                {
                    "character_id": str(character_id),
                    "type": activity_type,
                    "description": description,
                    "xp_gained": xp_gained,
                    "metadata": metadata,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create activity")
        return _parse_activity(response.data[0])

    def list_activities(
        self, character_id: UUID, start: datetime, end: datetime
    ) -> list[Activity]:
        """Return activities created in the time range."""
        response = (
            self.client.table("activities")
            .select(_COLUMNS)
            .eq("character_id", str(character_id))
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]

    def list_recent_activities(self, character_id: UUID, limit: int) -> list[Activity]:
        """Return the newest activities for a character."""
        response = (
            self.client.table("activities")
            .select(_COLUMNS)
            .eq("character_id", str(character_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]


def _parse_activity(row: dict[str, object]) -> Activity:
    created_raw = row.get("created_at")
    metadata = row.get("metadata")
    return Activity(
        id=UUID(str(row["id"])),
        character_id=UUID(str(row["character_id"])),
        type=str(row.get("type", "")),
        description=str(row.get("description", "")),
        xp_gained=int(row.get("xp_gained", 0)),
        metadata=metadata if isinstance(metadata, dict) else {},
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else datetime.min.replace(tzinfo=UTC)
        ),
    )
