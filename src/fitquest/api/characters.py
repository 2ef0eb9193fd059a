"""Character, quest and tracking endpoints."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request, status

from fitquest.api.models import (
    ActionRequest,
    CharacterCreate,
    HydrationLogRequest,
    NutritionLogRequest,
    QuestCreate,
    WorkoutLogRequest,
    XpGrantRequest,
)
from fitquest.api.serializers import (
    activity_to_dict,
    character_to_dict,
    daily_totals_to_dict,
    grant_to_dict,
    nutrition_log_to_dict,
    period_to_dict,
    quest_to_dict,
    quest_update_to_dict,
    tracking_to_dict,
    workout_log_to_dict,
)
from fitquest.domain.characters import DEFAULT_CHARACTER_CLASS
from fitquest.domain.quests import QuestDraft
from fitquest.domain.tracking import NutritionEntry, WorkoutEntry

if TYPE_CHECKING:
    from fitquest.containers import AppContainer

router = APIRouter(prefix="/characters", tags=["characters"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_character(
    payload: CharacterCreate, request: Request
) -> dict[str, object]:
    """Create a level 1 character."""
    character = _container(request).ledger.create_character(
        payload.name, payload.character_class or DEFAULT_CHARACTER_CLASS
    )
    return character_to_dict(character)


@router.get("/{character_id}")
async def get_character(character_id: UUID, request: Request) -> dict[str, object]:
    """Return a character's level and XP."""
    return character_to_dict(_container(request).ledger.get_character(character_id))


@router.post("/{character_id}/xp")
async def grant_xp(
    character_id: UUID, payload: XpGrantRequest, request: Request
) -> dict[str, object]:
    """Grant XP that is not tied to a quest."""
    grant = _container(request).tracking_service.grant_xp(
        character_id, payload.amount, payload.description
    )
    return grant_to_dict(grant)


@router.get("/{character_id}/quests")
async def list_quests(
    character_id: UUID, request: Request
) -> list[dict[str, object]]:
    """Return every quest for a character."""
    container = _container(request)
    container.ledger.get_character(character_id)
    quests = container.quest_registry.list_quests(character_id)
    return [quest_to_dict(quest) for quest in quests]


@router.get("/{character_id}/quests/active")
async def list_active_quests(
    character_id: UUID, request: Request
) -> list[dict[str, object]]:
    """Return quests that are still in progress."""
    container = _container(request)
    container.ledger.get_character(character_id)
    quests = container.quest_registry.get_active_quests(character_id)
    return [quest_to_dict(quest) for quest in quests]


@router.post("/{character_id}/quests", status_code=status.HTTP_201_CREATED)
async def create_quest(
    character_id: UUID, payload: QuestCreate, request: Request
) -> dict[str, object]:
    """Issue a new quest for a character."""
    container = _container(request)
    container.ledger.get_character(character_id)
    quest = container.quest_registry.create_quest(
        character_id,
        QuestDraft(
            name=payload.name,
            description=payload.description,
            type=payload.type,
            target_value=payload.target_value,
            xp_reward=payload.xp_reward,
            is_daily=payload.is_daily,
            difficulty=payload.difficulty,
            metric=payload.metric,
        ),
    )
    return quest_to_dict(quest)


@router.post("/{character_id}/actions")
async def apply_action(
    character_id: UUID, payload: ActionRequest, request: Request
) -> dict[str, object]:
    """Apply an ad-hoc progress event to the character's quests."""
    updates = _container(request).coordinator.apply_action(
        character_id, payload.action_kind, payload.value, payload.metadata
    )
    return {"quest_updates": [quest_update_to_dict(update) for update in updates]}


@router.post("/{character_id}/nutrition", status_code=status.HTTP_201_CREATED)
async def log_nutrition(
    character_id: UUID, payload: NutritionLogRequest, request: Request
) -> dict[str, object]:
    """Log a meal."""
    result = _container(request).tracking_service.log_nutrition(
        character_id, NutritionEntry(**payload.model_dump())
    )
    return tracking_to_dict(result)


@router.post("/{character_id}/workouts", status_code=status.HTTP_201_CREATED)
async def log_workout(
    character_id: UUID, payload: WorkoutLogRequest, request: Request
) -> dict[str, object]:
    """Log a workout."""
    result = _container(request).tracking_service.log_workout(
        character_id, WorkoutEntry(**payload.model_dump())
    )
    return tracking_to_dict(result)


@router.post("/{character_id}/hydration", status_code=status.HTTP_201_CREATED)
async def log_hydration(
    character_id: UUID, payload: HydrationLogRequest, request: Request
) -> dict[str, object]:
    """Log glasses of water."""
    result = _container(request).tracking_service.log_hydration(
        character_id, payload.glasses
    )
    return tracking_to_dict(result)


@router.get("/{character_id}/nutrition")
async def list_nutrition_logs(
    character_id: UUID, request: Request
) -> list[dict[str, object]]:
    """Return every nutrition log, newest first."""
    logs = _container(request).tracking_service.list_nutrition_logs(character_id)
    return [nutrition_log_to_dict(log) for log in logs]


@router.get("/{character_id}/nutrition/today")
async def nutrition_logs_today(
    character_id: UUID,
    request: Request,
    day: date | None = Query(default=None, alias="date"),
) -> list[dict[str, object]]:
    """Return nutrition logs for one local day, today by default."""
    logs = _container(request).tracking_service.nutrition_logs_for_day(
        character_id, _as_of(day)
    )
    return [nutrition_log_to_dict(log) for log in logs]


@router.get("/{character_id}/workouts")
async def list_workout_logs(
    character_id: UUID, request: Request
) -> list[dict[str, object]]:
    """Return every workout log, newest first."""
    logs = _container(request).tracking_service.list_workout_logs(character_id)
    return [workout_log_to_dict(log) for log in logs]


@router.get("/{character_id}/workouts/today")
async def workout_logs_today(
    character_id: UUID,
    request: Request,
    day: date | None = Query(default=None, alias="date"),
) -> list[dict[str, object]]:
    """Return workout logs for one local day, today by default."""
    logs = _container(request).tracking_service.workout_logs_for_day(
        character_id, _as_of(day)
    )
    return [workout_log_to_dict(log) for log in logs]


@router.get("/{character_id}/activities")
async def list_activities(
    character_id: UUID, request: Request, limit: int = 10
) -> list[dict[str, object]]:
    """Return recent activities, newest first."""
    container = _container(request)
    container.ledger.get_character(character_id)
    activities = container.activity_log.list_recent(character_id, limit)
    return [activity_to_dict(activity) for activity in activities]


@router.get("/{character_id}/stats/daily")
async def daily_stats(
    character_id: UUID,
    request: Request,
    day: date | None = Query(default=None, alias="date"),
) -> dict[str, object]:
    """Return XP, calories burned and workouts for one day."""
    container = _container(request)
    container.ledger.get_character(character_id)
    totals = container.activity_log.daily_totals(character_id, _as_of(day))
    return daily_totals_to_dict(totals)


@router.get("/{character_id}/stats/weekly")
async def weekly_stats(
    character_id: UUID,
    request: Request,
    day: date | None = Query(default=None, alias="date"),
) -> dict[str, object]:
    """Return per-day totals for the week containing ``day``."""
    container = _container(request)
    container.ledger.get_character(character_id)
    summary = container.activity_log.weekly_totals(character_id, _as_of(day))
    return period_to_dict(summary)


def _as_of(day: date | None) -> datetime | None:
    if day is None:
        return None
    return datetime.combine(day, time(hour=12))
