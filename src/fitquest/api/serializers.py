"""Convert domain records into JSON-ready dicts."""

from fitquest.domain.activities import Activity, DailyTotals, PeriodSummary
from fitquest.domain.characters import Character, GrantResult
from fitquest.domain.quests import Quest, QuestUpdateResult
from fitquest.domain.tracking import NutritionLog, TrackingResult, WorkoutLog


def character_to_dict(character: Character) -> dict[str, object]:
    return {
        "id": str(character.id),
        "name": character.name,
        "class": character.character_class,
        "level": character.level,
        "current_xp": character.current_xp,
        "next_level_xp": character.next_level_xp,
        "total_xp": character.total_xp,
        "created_at": character.created_at.isoformat(),
    }


def grant_to_dict(grant: GrantResult) -> dict[str, object]:
    return {
        "character": character_to_dict(grant.character),
        "leveled_up": grant.leveled_up,
        "xp_gained": grant.xp_gained,
    }


def quest_to_dict(quest: Quest) -> dict[str, object]:
    return {
        "id": str(quest.id),
        "character_id": str(quest.character_id),
        "name": quest.name,
        "description": quest.description,
        "type": quest.type.value,
        "target_value": quest.target_value,
        "current_progress": quest.current_progress,
        "xp_reward": quest.xp_reward,
        "is_completed": quest.is_completed,
        "is_daily": quest.is_daily,
        "difficulty": quest.difficulty.value,
        "metric": quest.metric.value if quest.metric else None,
        "created_at": quest.created_at.isoformat(),
    }


def quest_update_to_dict(update: QuestUpdateResult) -> dict[str, object]:
    payload: dict[str, object] = {
        "quest_id": str(update.quest_id),
        "current_progress": update.current_progress,
        "completed": update.completed,
    }
    if update.xp_awarded is not None:
        payload["xp_awarded"] = update.xp_awarded
    return payload


def activity_to_dict(activity: Activity) -> dict[str, object]:
    return {
        "id": str(activity.id),
        "character_id": str(activity.character_id),
        "type": activity.type,
        "description": activity.description,
        "xp_gained": activity.xp_gained,
        "metadata": activity.metadata,
        "created_at": activity.created_at.isoformat(),
    }


def nutrition_log_to_dict(log: NutritionLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "character_id": str(log.character_id),
        "food_name": log.food_name,
        "meal_type": log.meal_type,
        "calories": log.calories,
        "protein": log.protein,
        "carbs": log.carbs,
        "fat": log.fat,
        "xp_gained": log.xp_gained,
        "created_at": log.created_at.isoformat(),
    }


def workout_log_to_dict(log: WorkoutLog) -> dict[str, object]:
    return {
        "id": str(log.id),
        "character_id": str(log.character_id),
        "workout_type": log.workout_type,
        "duration": log.duration,
        "intensity": log.intensity,
        "calories_burned": log.calories_burned,
        "xp_gained": log.xp_gained,
        "notes": log.notes,
        "created_at": log.created_at.isoformat(),
    }


def tracking_to_dict(result: TrackingResult) -> dict[str, object]:
    payload: dict[str, object] = {
        **grant_to_dict(result.grant),
        "activity": activity_to_dict(result.activity),
        "quest_updates": [quest_update_to_dict(u) for u in result.quest_updates],
    }
    if isinstance(result.log, NutritionLog):
        payload["log"] = nutrition_log_to_dict(result.log)
    elif isinstance(result.log, WorkoutLog):
        payload["log"] = workout_log_to_dict(result.log)
    return payload


def daily_totals_to_dict(totals: DailyTotals) -> dict[str, object]:
    return {
        "date": totals.day.isoformat(),
        "xp_gained": totals.xp_gained,
        "calories_burned": totals.calories_burned,
        "workouts_completed": totals.workouts_completed,
    }


def period_to_dict(summary: PeriodSummary) -> dict[str, object]:
    return {
        "daily": [daily_totals_to_dict(day) for day in summary.daily],
        "total_xp_gained": summary.total_xp_gained,
        "total_calories_burned": summary.total_calories_burned,
        "total_workouts": summary.total_workouts,
        "avg_xp_gained": summary.avg_xp_gained,
    }
