"""Dict-backed repositories used as the default store."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from fitquest.domain.activities import Activity
from fitquest.domain.characters import Character
from fitquest.domain.quests import Quest, QuestDraft
from fitquest.domain.tracking import (
    NutritionEntry,
    NutritionLog,
    WorkoutEntry,
    WorkoutLog,
)
from fitquest.services.activities import ActivityRepository
from fitquest.services.characters import CharacterRepository, xp_for_level
from fitquest.services.quests import QuestRepository
from fitquest.services.tracking import NutritionLogRepository, WorkoutLogRepository


@dataclass
class InMemoryCharacterRepository(CharacterRepository):
    """In-memory character storage."""

    characters: dict[UUID, Character] = field(default_factory=dict)

    def get_character(self, character_id: UUID) -> Character | None:
        return self.characters.get(character_id)

    def create_character(self, name: str, character_class: str) -> Character:
        character = Character(
            id=uuid4(),
            name=name,
            character_class=character_class,
            level=1,
            current_xp=0,
            next_level_xp=xp_for_level(1),
            total_xp=0,
            created_at=datetime.now(tz=UTC),
        )
        self.characters[character.id] = character
        return character

    def save_character(self, character: Character) -> None:
        self.characters[character.id] = character


@dataclass
class InMemoryQuestRepository(QuestRepository):
    """In-memory quest storage."""

    quests: dict[UUID, Quest] = field(default_factory=dict)

    def list_quests(self, character_id: UUID) -> list[Quest]:
        return [
            quest
            for quest in self.quests.values()
            if quest.character_id == character_id
        ]

    def list_active_quests(self, character_id: UUID) -> list[Quest]:
        return [
            quest for quest in self.list_quests(character_id) if not quest.is_completed
        ]

    def get_quest(self, quest_id: UUID) -> Quest | None:
        return self.quests.get(quest_id)

    def create_quest(self, character_id: UUID, draft: QuestDraft) -> Quest:
        quest = Quest(
            id=uuid4(),
            character_id=character_id,
            name=draft.name,
            description=draft.description,
            type=draft.type,
            target_value=draft.target_value,
            current_progress=0,
            xp_reward=draft.xp_reward,
            is_completed=False,
            is_daily=draft.is_daily,
            difficulty=draft.difficulty,
            metric=draft.metric,
            created_at=datetime.now(tz=UTC),
        )
        self.quests[quest.id] = quest
        return quest

    def update_quest_progress(
        self, quest_id: UUID, current_progress: int, is_completed: bool
    ) -> Quest | None:
        quest = self.quests.get(quest_id)
        if quest is None:
            return None
        updated = replace(
            quest, current_progress=current_progress, is_completed=is_completed
        )
        self.quests[quest_id] = updated
        return updated


@dataclass
class InMemoryActivityRepository(ActivityRepository):
    """In-memory append-only activity storage."""

    activities: list[Activity] = field(default_factory=list)

    def create_activity(  # noqa: PLR0913
        self,
        character_id: UUID,
        activity_type: str,
        description: str,
        xp_gained: int,
        metadata: dict[str, object],
        created_at: datetime,
    ) -> Activity:
        activity = Activity(
            id=uuid4(),
            character_id=character_id,
            type=activity_type,
            description=description,
            xp_gained=xp_gained,
            metadata=metadata,
            created_at=created_at,
        )
        self.activities.append(activity)
        return activity

    def list_activities(
        self, character_id: UUID, start: datetime, end: datetime
    ) -> list[Activity]:
        return [
            activity
            for activity in self.activities
            if activity.character_id == character_id
            and start <= activity.created_at < end
        ]

    def list_recent_activities(self, character_id: UUID, limit: int) -> list[Activity]:
        owned = [
            activity
            for activity in self.activities
            if activity.character_id == character_id
        ]
        return sorted(owned, key=lambda activity: activity.created_at, reverse=True)[
            :limit
        ]


@dataclass
class InMemoryNutritionLogRepository(NutritionLogRepository):
    """In-memory nutrition log storage."""

    logs: list[NutritionLog] = field(default_factory=list)

    def create_nutrition_log(
        self, character_id: UUID, entry: NutritionEntry, created_at: datetime
    ) -> NutritionLog:
        log = NutritionLog(
            id=uuid4(),
            character_id=character_id,
            food_name=entry.food_name,
            meal_type=entry.meal_type,
            calories=entry.calories,
            protein=entry.protein or 0,
            carbs=entry.carbs,
            fat=entry.fat,
            xp_gained=entry.xp_gained,
            created_at=created_at,
        )
        self.logs.append(log)
        return log

    def list_nutrition_logs(
        self,
        character_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[NutritionLog]:
        owned = [
            log
            for log in self.logs
            if log.character_id == character_id
            and _within(log.created_at, start, end)
        ]
        return sorted(owned, key=lambda log: log.created_at, reverse=True)


@dataclass
class InMemoryWorkoutLogRepository(WorkoutLogRepository):
    """In-memory workout log storage."""

    logs: list[WorkoutLog] = field(default_factory=list)

    def create_workout_log(
        self, character_id: UUID, entry: WorkoutEntry, created_at: datetime
    ) -> WorkoutLog:
        log = WorkoutLog(
            id=uuid4(),
            character_id=character_id,
            workout_type=entry.workout_type,
            duration=entry.duration,
            intensity=entry.intensity,
            calories_burned=entry.calories_burned,
            xp_gained=entry.xp_gained,
            notes=entry.notes,
            created_at=created_at,
        )
        self.logs.append(log)
        return log

    def list_workout_logs(
        self,
        character_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[WorkoutLog]:
        owned = [
            log
            for log in self.logs
            if log.character_id == character_id
            and _within(log.created_at, start, end)
        ]
        return sorted(owned, key=lambda log: log.created_at, reverse=True)


def _within(
    created_at: datetime, start: datetime | None, end: datetime | None
) -> bool:
    if start is not None and created_at < start:
        return False
    return end is None or created_at < end
