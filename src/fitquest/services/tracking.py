"""External entry points: nutrition, workout and hydration logs, manual XP.

Each entry point grants the XP the log earned, records the originating
activity, and then hands the action to the quest coordinator. Nutrition and
workout entries are also stored as log rows.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from fitquest.domain.actions import ActionKind, ActionMetadata
from fitquest.domain.activities import (
    HYDRATION_ACTIVITY,
    NUTRITION_ACTIVITY,
    WORKOUT_ACTIVITY,
    XP_GAIN_ACTIVITY,
)
from fitquest.domain.characters import GrantResult
from fitquest.domain.errors import InvalidInputError
from fitquest.domain.tracking import (
    NutritionEntry,
    NutritionLog,
    TrackingResult,
    WorkoutEntry,
    WorkoutLog,
)
from fitquest.services.activities import (
    CALORIES_BURNED_KEY,
    ActivityLog,
    day_window,
)
from fitquest.services.characters import CharacterLedger
from fitquest.services.progress import QuestProgressCoordinator

DEFAULT_XP_PER_GLASS = 10


class NutritionLogRepository(Protocol):
    """Persistence interface for nutrition logs."""

    def create_nutrition_log(
        self, character_id: UUID, entry: NutritionEntry, created_at: datetime
    ) -> NutritionLog:
        """Store a nutrition entry and return the row."""

    def list_nutrition_logs(
        self,
        character_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[NutritionLog]:
        """Return logs in [start, end), newest first."""


class WorkoutLogRepository(Protocol):
    """Persistence interface for workout logs."""

    def create_workout_log(
        self, character_id: UUID, entry: WorkoutEntry, created_at: datetime
    ) -> WorkoutLog:
        """Store a workout entry and return the row."""

    def list_workout_logs(
        self,
        character_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[WorkoutLog]:
        """Return logs in [start, end), newest first."""


@dataclass
class TrackingService:
    """Logs user actions and routes them through the quest coordinator."""

    ledger: CharacterLedger
    activity_log: ActivityLog
    coordinator: QuestProgressCoordinator
    nutrition_repository: NutritionLogRepository
    workout_repository: WorkoutLogRepository
    xp_per_glass: int = DEFAULT_XP_PER_GLASS

    def grant_xp(
        self, character_id: UUID, amount: int, description: str
    ) -> GrantResult:
        """Grant XP outside of quests (health sync bonuses, quick actions)."""
        if not description or not description.strip():
            raise InvalidInputError("XP grant description is required")
        with self.ledger.locks.hold(character_id):
            character, leveled_up = self.ledger.grant_xp(character_id, amount)
            self.activity_log.record(
                character_id=character_id,
                activity_type=XP_GAIN_ACTIVITY,
                description=description.strip(),
                xp_gained=amount,
            )
        return GrantResult(character=character, leveled_up=leveled_up, xp_gained=amount)

    def log_nutrition(
        self, character_id: UUID, entry: NutritionEntry
    ) -> TrackingResult:
        """Log a meal, store it and advance nutrition quests."""
        _require_non_negative(
            calories=entry.calories,
            protein=entry.protein or 0,
            carbs=entry.carbs,
            fat=entry.fat,
        )
        metadata: dict[str, object] = {
            "calories": entry.calories,
            "meal_type": entry.meal_type,
        }
        if entry.protein is not None:
            metadata["protein"] = entry.protein
        return self._log(
            character_id,
            xp_gained=entry.xp_gained,
            activity_type=NUTRITION_ACTIVITY,
            description=f"Logged {entry.meal_type} - {entry.food_name}",
            activity_metadata=metadata,
            action_kind=ActionKind.LOG_MEAL,
            value=1,
            action_metadata=ActionMetadata(
                calories=entry.calories, protein=entry.protein
            ),
            store=lambda: self.nutrition_repository.create_nutrition_log(
                character_id, entry, datetime.now(tz=UTC)
            ),
        )

    def log_workout(self, character_id: UUID, entry: WorkoutEntry) -> TrackingResult:
        """Log a workout, store it and advance cardio and strength quests."""
        _require_non_negative(
            duration=entry.duration, calories_burned=entry.calories_burned
        )
        return self._log(
            character_id,
            xp_gained=entry.xp_gained,
            activity_type=WORKOUT_ACTIVITY,
            description=f"Completed {entry.workout_type} - {entry.duration} min",
            activity_metadata={
                "duration": entry.duration,
                CALORIES_BURNED_KEY: entry.calories_burned,
                "workout_type": entry.workout_type,
                "intensity": entry.intensity,
            },
            action_kind=ActionKind.LOG_WORKOUT,
            value=entry.duration,
            action_metadata=ActionMetadata(
                duration=entry.duration, workout_type=entry.workout_type
            ),
            store=lambda: self.workout_repository.create_workout_log(
                character_id, entry, datetime.now(tz=UTC)
            ),
        )

    def log_hydration(self, character_id: UUID, glasses: int = 1) -> TrackingResult:
        """Log glasses of water and advance hydration quests."""
        if glasses <= 0:
            raise InvalidInputError("Glasses must be positive")
        noun = "glass" if glasses == 1 else "glasses"
        return self._log(
            character_id,
            xp_gained=self.xp_per_glass * glasses,
            activity_type=HYDRATION_ACTIVITY,
            description=f"Drank {glasses} {noun} of water",
            activity_metadata={"glasses": glasses},
            action_kind=ActionKind.LOG_WATER,
            value=glasses,
            action_metadata=ActionMetadata(),
        )

    def list_nutrition_logs(self, character_id: UUID) -> list[NutritionLog]:
        """Return every nutrition log, newest first."""
        self.ledger.get_character(character_id)
        return self.nutrition_repository.list_nutrition_logs(character_id)

    def nutrition_logs_for_day(
        self, character_id: UUID, as_of: datetime | None = None
    ) -> list[NutritionLog]:
        """Return nutrition logs from the local day containing ``as_of``."""
        self.ledger.get_character(character_id)
        start, end = self._day_window(as_of)
        return self.nutrition_repository.list_nutrition_logs(character_id, start, end)

    def list_workout_logs(self, character_id: UUID) -> list[WorkoutLog]:
        """Return every workout log, newest first."""
        self.ledger.get_character(character_id)
        return self.workout_repository.list_workout_logs(character_id)

    def workout_logs_for_day(
        self, character_id: UUID, as_of: datetime | None = None
    ) -> list[WorkoutLog]:
        """Return workout logs from the local day containing ``as_of``."""
        self.ledger.get_character(character_id)
        start, end = self._day_window(as_of)
        return self.workout_repository.list_workout_logs(character_id, start, end)

    def _day_window(self, as_of: datetime | None) -> tuple[datetime, datetime]:
        return day_window(as_of, ZoneInfo(self.activity_log.timezone_name))

    def _log(  # noqa: PLR0913
        self,
        character_id: UUID,
        *,
        xp_gained: int,
        activity_type: str,
        description: str,
        activity_metadata: dict[str, object],
        action_kind: ActionKind,
        value: float,
        action_metadata: ActionMetadata,
        store: Callable[[], NutritionLog | WorkoutLog] | None = None,
    ) -> TrackingResult:
        with self.ledger.locks.hold(character_id):
            level_before = self.ledger.get_character(character_id).level
            log = store() if store is not None else None
            self.ledger.grant_xp(character_id, xp_gained)
            activity = self.activity_log.record(
                character_id=character_id,
                activity_type=activity_type,
                description=description,
                xp_gained=xp_gained,
                metadata=activity_metadata,
            )
            updates = self.coordinator.apply_action(
                character_id, action_kind, value, action_metadata
            )
            character = self.ledger.get_character(character_id)
        return TrackingResult(
            grant=GrantResult(
                character=character,
                leveled_up=character.level > level_before,
                xp_gained=xp_gained,
            ),
            activity=activity,
            quest_updates=updates,
            log=log,
        )


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise InvalidInputError(f"{name} must be non-negative")
