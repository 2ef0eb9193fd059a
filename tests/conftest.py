"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from uuid import UUID

import pytest

from fitquest.adapters.in_memory_repositories import (
    InMemoryActivityRepository,
    InMemoryCharacterRepository,
    InMemoryNutritionLogRepository,
    InMemoryQuestRepository,
    InMemoryWorkoutLogRepository,
)
from fitquest.config import Settings
from fitquest.containers import AppContainer, Repositories, build_services
from fitquest.domain.activities import QUEST_ACTIVITY, Activity
from fitquest.domain.characters import Character
from fitquest.domain.quests import Quest, QuestDraft, QuestMetric, QuestType


@dataclass
class FlakyActivityRepository(InMemoryActivityRepository):
    """Activity repository that fails to record chosen quest completions."""

    failing_quest_names: set[str] = field(default_factory=set)

    def create_activity(  # noqa: PLR0913
        self,
        character_id: UUID,
        activity_type: str,
        description: str,
        xp_gained: int,
        metadata: dict[str, object],
        created_at: datetime,
    ) -> Activity:
        if (
            activity_type == QUEST_ACTIVITY
            and metadata.get("quest_name") in self.failing_quest_names
        ):
            raise RuntimeError("activity store unavailable")
        return super().create_activity(
            character_id=character_id,
            activity_type=activity_type,
            description=description,
            xp_gained=xp_gained,
            metadata=metadata,
            created_at=created_at,
        )


def add_quest(  # noqa: PLR0913
    container: AppContainer,
    character_id: UUID,
    quest_type: QuestType,
    target_value: int,
    xp_reward: int = 50,
    *,
    name: str | None = None,
    description: str = "",
    progress: int = 0,
    metric: QuestMetric | None = None,
) -> Quest:
    """Issue a quest and optionally seed its progress."""
    quest = container.quest_registry.create_quest(
        character_id,
        QuestDraft(
            name=name or f"{quest_type.value} quest",
            description=description,
            type=quest_type,
            target_value=target_value,
            xp_reward=xp_reward,
            metric=metric,
        ),
    )
    if progress:
        quest = container.quest_registry.update_quest_progress(
            quest.id, progress, progress >= target_value
        )
    return quest


def set_xp(
    repository: InMemoryCharacterRepository,
    character: Character,
    **fields: int,
) -> Character:
    """Overwrite level/XP fields of a stored character."""
    updated = replace(character, **fields)
    repository.save_character(updated)
    return updated


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", stats_timezone="UTC")


@pytest.fixture
def character_repository() -> InMemoryCharacterRepository:
    return InMemoryCharacterRepository()


@pytest.fixture
def quest_repository() -> InMemoryQuestRepository:
    return InMemoryQuestRepository()


@pytest.fixture
def activity_repository() -> FlakyActivityRepository:
    return FlakyActivityRepository()


@pytest.fixture
def nutrition_log_repository() -> InMemoryNutritionLogRepository:
    return InMemoryNutritionLogRepository()


@pytest.fixture
def workout_log_repository() -> InMemoryWorkoutLogRepository:
    return InMemoryWorkoutLogRepository()


@pytest.fixture
def container(
    settings: Settings,
    character_repository: InMemoryCharacterRepository,
    quest_repository: InMemoryQuestRepository,
    activity_repository: FlakyActivityRepository,
    nutrition_log_repository: InMemoryNutritionLogRepository,
    workout_log_repository: InMemoryWorkoutLogRepository,
) -> AppContainer:
    return build_services(
        settings,
        Repositories(
            characters=character_repository,
            quests=quest_repository,
            activities=activity_repository,
            nutrition_logs=nutrition_log_repository,
            workout_logs=workout_log_repository,
        ),
    )


@pytest.fixture
def character(container: AppContainer) -> Character:
    return container.ledger.create_character("Sir FitKnight")
