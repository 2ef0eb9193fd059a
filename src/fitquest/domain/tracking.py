"""Domain models for nutrition, workout and hydration logs."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from fitquest.domain.activities import Activity
from fitquest.domain.characters import GrantResult
from fitquest.domain.quests import QuestUpdateResult


@dataclass(frozen=True)
class NutritionEntry:
    """A logged meal or snack.

    ``protein`` stays ``None`` when the meal carries no protein figure, so
    protein quests fall back to scoring calories.
    """

    food_name: str
    meal_type: str
    calories: int
    xp_gained: int
    protein: int | None = None
    carbs: int = 0
    fat: int = 0


@dataclass(frozen=True)
class WorkoutEntry:
    """A logged workout session."""

    workout_type: str
    duration: int
    intensity: str
    calories_burned: int
    xp_gained: int
    notes: str | None = None


@dataclass(frozen=True)
class NutritionLog:
    """Stored nutrition log row."""

    id: UUID
    character_id: UUID
    food_name: str
    meal_type: str
    calories: int
    protein: int
    carbs: int
    fat: int
    xp_gained: int
    created_at: datetime


@dataclass(frozen=True)
class WorkoutLog:
    """Stored workout log row."""

    id: UUID
    character_id: UUID
    workout_type: str
    duration: int
    intensity: str
    calories_burned: int
    xp_gained: int
    notes: str | None
    created_at: datetime


@dataclass(frozen=True)
class TrackingResult:
    """Everything a single logged action changed."""

    grant: GrantResult
    activity: Activity
    quest_updates: list[QuestUpdateResult] = field(default_factory=list)
    log: NutritionLog | WorkoutLog | None = None
