"""Supabase repository for quests."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitquest.domain.quests import (
    Quest,
    QuestDifficulty,
    QuestDraft,
    QuestMetric,
    QuestType,
)
from fitquest.services.quests import QuestRepository

_COLUMNS = (
    "id, character_id, name, description, type, target_value, current_progress, "
    "xp_reward, is_completed, is_daily, difficulty, metric, created_at"
)


@dataclass
class SupabaseQuestRepository(QuestRepository):
    """Supabase implementation for quest persistence."""

    client: Client

    def list_quests(self, character_id: UUID) -> list[Quest]:
        """Return all quests for a character."""
        response = (
            self.client.table("quests")
            .select(_COLUMNS)
            .eq("character_id", str(character_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_quest(row) for row in response.data or []]

    def list_active_quests(self, character_id: UUID) -> list[Quest]:
        """Return quests that are not completed."""
        response = (
            self.client.table("quests")
            .select(_COLUMNS)
            .eq("character_id", str(character_id))
            .eq("is_completed", False)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_quest(row) for row in response.data or []]

    def get_quest(self, quest_id: UUID) -> Quest | None:
        """Return a quest by id."""
        response = (
            self.client.table("quests")
            .select(_COLUMNS)
            .eq("id", str(quest_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_quest(response.data[0])

    def create_quest(self, character_id: UUID, draft: QuestDraft) -> Quest:
        """Insert a quest row with zero progress."""
        response = (
            self.client.table("quests")
            .insert(
                {
                    "character_id": str(character_id),
                    "name": draft.name,
                    "description": draft.description,
                    "type": draft.type.value,
                    "target_value": draft.target_value,
                    "current_progress": 0,
                    "xp_reward": draft.xp_reward,
                    "is_completed": False,
                    "is_daily": draft.is_daily,
                    "difficulty": draft.difficulty.value,
                    "metric": draft.metric.value if draft.metric else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create quest")
        return _parse_quest(response.data[0])

    def update_quest_progress(
        self, quest_id: UUID, current_progress: int, is_completed: bool
    ) -> Quest | None:
        """Update progress columns and return the stored row."""
        response = (
            self.client.table("quests")
            .update(
                {"current_progress": current_progress, "is_completed": is_completed}
            )
            .eq("id", str(quest_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_quest(response.data[0])


def _parse_quest(row: dict[str, object]) -> Quest:
    created_raw = row.get("created_at")
    metric_raw = row.get("metric")
    return Quest(
        id=UUID(str(row["id"])),
        character_id=UUID(str(row["character_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        type=QuestType(row["type"]),
        target_value=int(row.get("target_value", 0)),
        current_progress=int(row.get("current_progress", 0)),
        xp_reward=int(row.get("xp_reward", 0)),
        is_completed=bool(row.get("is_completed", False)),
        is_daily=bool(row.get("is_daily", True)),
        difficulty=QuestDifficulty(row.get("difficulty") or "normal"),
        metric=QuestMetric(metric_raw) if metric_raw else None,
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else datetime.now(tz=UTC)
        ),
    )
