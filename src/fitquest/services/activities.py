"""Activity log and daily/weekly aggregates."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from fitquest.domain.activities import (
    WORKOUT_ACTIVITY,
    Activity,
    DailyTotals,
    PeriodSummary,
)

CALORIES_BURNED_KEY = "caloriesBurned"
LEGACY_CALORIES_BURNED_KEY = "calories_burned"
DAYS_IN_WEEK = 7


class ActivityRepository(Protocol):
    """Persistence interface for activities."""

    def create_activity(  # noqa: PLR0913
        self,
        character_id: UUID,
        activity_type: str,
        description: str,
        xp_gained: int,
        metadata: dict[str, object],
        created_at: datetime,
    ) -> Activity:
        """Append an activity and return it."""

    def list_activities(
        self, character_id: UUID, start: datetime, end: datetime
    ) -> list[Activity]:
        """Return activities created in [start, end)."""

    def list_recent_activities(self, character_id: UUID, limit: int) -> list[Activity]:
        """Return the newest activities first."""


@dataclass
class ActivityLog:
    """Append-only record of XP-bearing events.

    Recording never feeds back into quest progress.
    """

    repository: ActivityRepository
    timezone_name: str = "UTC"

    def record(  # noqa: PLR0913
        self,
        character_id: UUID,
        activity_type: str,
        description: str,
        xp_gained: int,
        metadata: dict[str, object] | None = None,
    ) -> Activity:
        """Append an activity stamped with the current time."""
        return self.repository.create_activity(
            character_id=character_id,
            activity_type=activity_type,
            description=description,
            xp_gained=xp_gained,
            metadata=dict(metadata or {}),
            created_at=datetime.now(tz=UTC),
        )

    def list_recent(self, character_id: UUID, limit: int = 10) -> list[Activity]:
        """Return recent activities, newest first."""
        return self.repository.list_recent_activities(character_id, limit)

    def daily_totals(
        self, character_id: UUID, as_of: datetime | None = None
    ) -> DailyTotals:
        """Return totals for the calendar day containing ``as_of``."""
        tz = ZoneInfo(self.timezone_name)
        start, end = day_window(as_of, tz)
        activities = self.repository.list_activities(character_id, start, end)
        return _aggregate_day(start.astimezone(tz).date(), activities, tz)

    def weekly_totals(
        self, character_id: UUID, as_of: datetime | None = None
    ) -> PeriodSummary:
        """Return per-day totals for the Monday-started week containing ``as_of``."""
        tz = ZoneInfo(self.timezone_name)
        local = _localize(as_of, tz)
        start = (local - timedelta(days=local.weekday())).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        end = start + timedelta(days=DAYS_IN_WEEK)
        activities = self.repository.list_activities(
            character_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        daily = [
            _aggregate_day((start + timedelta(days=offset)).date(), activities, tz)
            for offset in range(DAYS_IN_WEEK)
        ]
        total_xp = sum(day.xp_gained for day in daily)
        return PeriodSummary(
            daily=daily,
            total_xp_gained=total_xp,
            total_calories_burned=sum(day.calories_burned for day in daily),
            total_workouts=sum(day.workouts_completed for day in daily),
            avg_xp_gained=total_xp / DAYS_IN_WEEK,
        )


def day_window(as_of: datetime | None, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return the UTC bounds of the local calendar day containing ``as_of``."""
    start = _localize(as_of, tz).replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1)
    return start.astimezone(UTC), end.astimezone(UTC)


def _localize(as_of: datetime | None, tz: ZoneInfo) -> datetime:
    if as_of is None:
        return datetime.now(tz=tz)
    if as_of.tzinfo is None:
        return as_of.replace(tzinfo=tz)
    return as_of.astimezone(tz)


def _aggregate_day(day: date, activities: list[Activity], tz: ZoneInfo) -> DailyTotals:
    xp_gained = 0
    calories_burned = 0.0
    workouts = 0
    for activity in activities:
        if activity.created_at.astimezone(tz).date() != day:
            continue
        xp_gained += activity.xp_gained
        burned = activity.metadata.get(
            CALORIES_BURNED_KEY, activity.metadata.get(LEGACY_CALORIES_BURNED_KEY)
        )
        if isinstance(burned, int | float) and not isinstance(burned, bool):
            calories_burned += burned
        if activity.type == WORKOUT_ACTIVITY:
            workouts += 1
    return DailyTotals(
        day=day,
        xp_gained=xp_gained,
        calories_burned=calories_burned,
        workouts_completed=workouts,
    )
