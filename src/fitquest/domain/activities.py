"""Domain models for the activity log."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

NUTRITION_ACTIVITY = "nutrition"
WORKOUT_ACTIVITY = "workout"
HYDRATION_ACTIVITY = "hydration"
QUEST_ACTIVITY = "quest"
XP_GAIN_ACTIVITY = "xp_gain"


@dataclass(frozen=True)
class Activity:
    """An XP-bearing event recorded for a character."""

    id: UUID
    character_id: UUID
    type: str
    description: str
    xp_gained: int
    metadata: dict[str, object]
    created_at: datetime


@dataclass(frozen=True)
class DailyTotals:
    """Aggregated activity for one calendar day."""

    day: date
    xp_gained: int
    calories_burned: float
    workouts_completed: int


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregated activity for a range of days."""

    daily: list[DailyTotals]
    total_xp_gained: int
    total_calories_burned: float
    total_workouts: int
    avg_xp_gained: float
