"""Tests for the activity log."""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from fitquest.adapters.in_memory_repositories import InMemoryActivityRepository
from fitquest.services.activities import ActivityLog


def _add(  # noqa: PLR0913
    repository: InMemoryActivityRepository,
    character_id,
    created_at: datetime,
    activity_type: str = "nutrition",
    xp_gained: int = 10,
    metadata: dict[str, object] | None = None,
) -> None:
    repository.create_activity(
        character_id=character_id,
        activity_type=activity_type,
        description="entry",
        xp_gained=xp_gained,
        metadata=metadata or {},
        created_at=created_at,
    )


def test_record_assigns_id_and_timestamp() -> None:
    repository = InMemoryActivityRepository()
    log = ActivityLog(repository)
    character_id = uuid4()

    activity = log.record(character_id, "xp_gain", "Health sync", 75)

    assert activity.id is not None
    assert activity.created_at.tzinfo is not None
    assert activity.metadata == {}
    assert repository.activities == [activity]


def test_daily_totals_aggregate_only_that_day() -> None:
    repository = InMemoryActivityRepository()
    character_id = uuid4()
    noon = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)
    _add(repository, character_id, noon, "nutrition", 45, {"calories": 350})
    _add(
        repository,
        character_id,
        noon + timedelta(hours=2),
        "workout",
        180,
        {"duration": 35, "caloriesBurned": 420},
    )
    _add(repository, character_id, noon + timedelta(hours=3), "workout", 60)
    _add(repository, character_id, noon - timedelta(days=1), "workout", 500)
    _add(repository, uuid4(), noon, "workout", 999, {"calories_burned": 1000})

    totals = ActivityLog(repository).daily_totals(character_id, noon)

    assert totals.day == date(2026, 3, 10)
    assert totals.xp_gained == 285
    assert totals.calories_burned == 420
    assert totals.workouts_completed == 2


def test_daily_totals_read_both_calorie_keys() -> None:
    repository = InMemoryActivityRepository()
    character_id = uuid4()
    noon = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)
    _add(repository, character_id, noon, "workout", 20, {"caloriesBurned": 300})
    _add(repository, character_id, noon, "workout", 20, {"calories_burned": 120})
    _add(
        repository,
        character_id,
        noon,
        "workout",
        20,
        {"caloriesBurned": 50, "calories_burned": 999},
    )

    totals = ActivityLog(repository).daily_totals(character_id, noon)

    assert totals.calories_burned == 470
    assert totals.workouts_completed == 3


def test_daily_totals_use_configured_timezone() -> None:
    repository = InMemoryActivityRepository()
    character_id = uuid4()
    # 06:00 UTC on March 10 is still March 9 in Los Angeles.
    _add(repository, character_id, datetime(2026, 3, 10, 6, 0, tzinfo=UTC))
    log = ActivityLog(repository, timezone_name="America/Los_Angeles")

    march_9 = log.daily_totals(character_id, datetime(2026, 3, 9, 12, 0))
    march_10 = log.daily_totals(character_id, datetime(2026, 3, 10, 12, 0))

    assert march_9.xp_gained == 10
    assert march_10.xp_gained == 0


def test_weekly_totals_cover_monday_to_sunday() -> None:
    repository = InMemoryActivityRepository()
    character_id = uuid4()
    monday = datetime(2026, 3, 9, 9, 0, tzinfo=UTC)
    _add(repository, character_id, monday, "workout", 70, {"calories_burned": 300})
    _add(repository, character_id, monday + timedelta(days=6), "nutrition", 14)
    _add(repository, character_id, monday - timedelta(days=1), "nutrition", 1000)

    summary = ActivityLog(repository).weekly_totals(
        character_id, monday + timedelta(days=3)
    )

    assert [day.day for day in summary.daily][0] == date(2026, 3, 9)
    assert len(summary.daily) == 7
    assert summary.total_xp_gained == 84
    assert summary.total_calories_burned == 300
    assert summary.total_workouts == 1
    assert summary.avg_xp_gained == 12


def test_list_recent_returns_newest_first() -> None:
    repository = InMemoryActivityRepository()
    character_id = uuid4()
    start = datetime(2026, 3, 10, tzinfo=UTC)
    for hour in range(5):
        _add(repository, character_id, start + timedelta(hours=hour), xp_gained=hour)

    recent = ActivityLog(repository).list_recent(character_id, limit=3)

    assert [activity.xp_gained for activity in recent] == [4, 3, 2]
