"""Supabase repositories for nutrition and workout logs."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitquest.domain.tracking import (
    NutritionEntry,
    NutritionLog,
    WorkoutEntry,
    WorkoutLog,
)
from fitquest.services.tracking import NutritionLogRepository, WorkoutLogRepository

_NUTRITION_COLUMNS = (
    "id, character_id, food_name, meal_type, calories, protein, carbs, fat, "
    "xp_gained, created_at"
)
_WORKOUT_COLUMNS = (
    "id, character_id, workout_type, duration, intensity, calories_burned, "
    "xp_gained, notes, created_at"
)


@dataclass
class SupabaseNutritionLogRepository(NutritionLogRepository):
    """Supabase implementation for nutrition logs."""

    client: Client

    def create_nutrition_log(
        self, character_id: UUID, entry: NutritionEntry, created_at: datetime
    ) -> NutritionLog:
        """Insert a nutrition log row."""
        response = (
            self.client.table("nutrition_logs")
            .insert(
                {
                    "character_id": str(character_id),
                    "food_name": entry.food_name,
                    "meal_type": entry.meal_type,
                    "calories": entry.calories,
                    "protein": entry.protein or 0,
                    "carbs": entry.carbs,
                    "fat": entry.fat,
                    "xp_gained": entry.xp_gained,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create nutrition log")
        return _parse_nutrition_log(response.data[0])

    def list_nutrition_logs(
        self,
        character_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[NutritionLog]:
        """Return nutrition logs, newest first."""
        query = (
            self.client.table("nutrition_logs")
            .select(_NUTRITION_COLUMNS)
            .eq("character_id", str(character_id))
        )
        if start is not None:
            query = query.gte("created_at", start.isoformat())
        if end is not None:
            query = query.lt("created_at", end.isoformat())
        response = query.order("created_at", desc=True).execute()
        return [_parse_nutrition_log(row) for row in response.data or []]


@dataclass
class SupabaseWorkoutLogRepository(WorkoutLogRepository):
    """Supabase implementation for workout logs."""

    client: Client

    def create_workout_log(
        self, character_id: UUID, entry: WorkoutEntry, created_at: datetime
    ) -> WorkoutLog:
        """Insert a workout log row."""
        response = (
            self.client.table("workout_logs")
            .insert(
                {
                    "character_id": str(character_id),
                    "workout_type": entry.workout_type,
                    "duration": entry.duration,
                    "intensity": entry.intensity,
                    "calories_burned": entry.calories_burned,
                    "xp_gained": entry.xp_gained,
                    "notes": entry.notes,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout log")
        return _parse_workout_log(response.data[0])

    def list_workout_logs(
        self,
        character_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[WorkoutLog]:
        """Return workout logs, newest first."""
        query = (
            self.client.table("workout_logs")
            .select(_WORKOUT_COLUMNS)
            .eq("character_id", str(character_id))
        )
        if start is not None:
            query = query.gte("created_at", start.isoformat())
        if end is not None:
            query = query.lt("created_at", end.isoformat())
        response = query.order("created_at", desc=True).execute()
        return [_parse_workout_log(row) for row in response.data or []]


def _parse_created_at(row: dict[str, object]) -> datetime:
    created_raw = row.get("created_at")
    if isinstance(created_raw, str) and created_raw:
        return datetime.fromisoformat(created_raw)
    return datetime.min.replace(tzinfo=UTC)


def _parse_nutrition_log(row: dict[str, object]) -> NutritionLog:
    return NutritionLog(
        id=UUID(str(row["id"])),
        character_id=UUID(str(row["character_id"])),
        food_name=str(row.get("food_name", "")),
        meal_type=str(row.get("meal_type", "")),
        calories=int(row.get("calories") or 0),
        protein=int(row.get("protein") or 0),
        carbs=int(row.get("carbs") or 0),
        fat=int(row.get("fat") or 0),
        xp_gained=int(row.get("xp_gained") or 0),
        created_at=_parse_created_at(row),
    )


def _parse_workout_log(row: dict[str, object]) -> WorkoutLog:
    notes = row.get("notes")
    return WorkoutLog(
        id=UUID(str(row["id"])),
        character_id=UUID(str(row["character_id"])),
        workout_type=str(row.get("workout_type", "")),
        duration=int(row.get("duration") or 0),
        intensity=str(row.get("intensity", "")),
        calories_burned=int(row.get("calories_burned") or 0),
        xp_gained=int(row.get("xp_gained") or 0),
        notes=str(notes) if notes is not None else None,
        created_at=_parse_created_at(row),
    )
