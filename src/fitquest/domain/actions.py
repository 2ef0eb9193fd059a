"""Domain models for logged actions."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class ActionKind(Enum):
    """Kinds of logged actions that may advance quests."""

    LOG_MEAL = "log_meal"
    LOG_WORKOUT = "log_workout"
    LOG_WATER = "log_water"
    WORKOUT_DURATION = "workout_duration"
    COMPLETE_CARDIO = "complete_cardio"
    HIT_PROTEIN_TARGET = "hit_protein_target"
    HIT_CALORIE_TARGET = "hit_calorie_target"
    ADD_RECIPE = "add_recipe"


@dataclass(frozen=True)
class ActionMetadata:
    """Structured details attached to an action."""

    calories: float | None = None
    protein: float | None = None
    duration: float | None = None
    workout_type: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object] | None) -> "ActionMetadata":
        """Build metadata from a loose mapping, dropping unusable values."""
        if not raw:
            return cls()
        workout_type = raw.get("workout_type", raw.get("workoutType"))
        return cls(
            calories=_to_number(raw.get("calories")),
            protein=_to_number(raw.get("protein")),
            duration=_to_number(raw.get("duration")),
            workout_type=str(workout_type) if workout_type else None,
        )


def parse_action_kind(value: "ActionKind | str") -> ActionKind | None:
    """Return the action kind for a value, or None when unknown."""
    if isinstance(value, ActionKind):
        return value
    try:
        return ActionKind(value)
    except ValueError:
        return None


def _to_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
