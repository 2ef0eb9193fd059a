"""Quest registry: quest definitions and progress state."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitquest.domain.errors import InvalidInputError, NotFoundError
from fitquest.domain.quests import Quest, QuestDraft, QuestMetric, QuestType


class QuestRepository(Protocol):
    """Persistence interface for quests."""

    def list_quests(self, character_id: UUID) -> list[Quest]:
        """Return every quest owned by a character."""

    def list_active_quests(self, character_id: UUID) -> list[Quest]:
        """Return quests that are not completed."""

    def get_quest(self, quest_id: UUID) -> Quest | None:
        """Return a quest by id, if present."""

    def create_quest(self, character_id: UUID, draft: QuestDraft) -> Quest:
        """Create a quest with zero progress and return it."""

    def update_quest_progress(
        self, quest_id: UUID, current_progress: int, is_completed: bool
    ) -> Quest | None:
        """Store progress fields and return the updated quest."""


@dataclass
class QuestRegistry:
    """Service for reading and mutating quests."""

    repository: QuestRepository

    def get_active_quests(self, character_id: UUID) -> list[Quest]:
        """Return incomplete quests ordered by creation time then id."""
        quests = self.repository.list_active_quests(character_id)
        return sorted(
            (quest for quest in quests if not quest.is_completed),
            key=lambda quest: (quest.created_at, str(quest.id)),
        )

    def list_quests(self, character_id: UUID) -> list[Quest]:
        """Return all quests for a character."""
        return self.repository.list_quests(character_id)

    def get_quest(self, quest_id: UUID) -> Quest:
        """Return a quest or raise NotFoundError."""
        quest = self.repository.get_quest(quest_id)
        if quest is None:
            raise NotFoundError("Quest", quest_id)
        return quest

    def create_quest(self, character_id: UUID, draft: QuestDraft) -> Quest:
        """Validate and issue a new quest."""
        if draft.target_value <= 0:
            raise InvalidInputError("Quest target_value must be positive")
        if draft.xp_reward <= 0:
            raise InvalidInputError("Quest xp_reward must be positive")
        if not draft.name.strip():
            raise InvalidInputError("Quest name is required")
        resolved = QuestDraft(
            name=draft.name.strip(),
            description=draft.description,
            type=draft.type,
            target_value=draft.target_value,
            xp_reward=draft.xp_reward,
            is_daily=draft.is_daily,
            difficulty=draft.difficulty,
            metric=resolve_metric(draft),
        )
        return self.repository.create_quest(character_id, resolved)

    def update_quest_progress(
        self, quest_id: UUID, new_progress: int, completed: bool
    ) -> Quest:
        """Store progress as given; the caller keeps completed in sync."""
        updated = self.repository.update_quest_progress(
            quest_id, new_progress, completed
        )
        if updated is None:
            raise NotFoundError("Quest", quest_id)
        return updated


def resolve_metric(draft: QuestDraft) -> QuestMetric | None:
    """Pick the nutrition scoring metric once, when a quest is issued."""
    if draft.type is not QuestType.NUTRITION:
        return None
    if draft.metric is not None:
        return draft.metric
    if "protein" in draft.description.lower():
        return QuestMetric.PROTEIN_GRAMS
    return QuestMetric.CALORIES_SCALED
