"""Pydantic models for HTTP request bodies."""

from pydantic import BaseModel, Field

from fitquest.domain.quests import QuestDifficulty, QuestMetric, QuestType


class CharacterCreate(BaseModel):
    """Payload for creating a character."""

    name: str = Field(min_length=1)
    character_class: str | None = None


class XpGrantRequest(BaseModel):
    """Payload for a manual XP grant."""

    amount: int = Field(ge=0)
    description: str = Field(min_length=1)


class QuestCreate(BaseModel):
    """Payload for issuing a quest."""

    name: str = Field(min_length=1)
    description: str = ""
    type: QuestType
    target_value: int = Field(gt=0)
    xp_reward: int = Field(gt=0)
    is_daily: bool = True
    difficulty: QuestDifficulty = QuestDifficulty.NORMAL
    metric: QuestMetric | None = None


class ActionRequest(BaseModel):
    """Payload for an ad-hoc quest progress event."""

    action_kind: str
    value: float = Field(default=0, ge=0)
    metadata: dict[str, object] = Field(default_factory=dict)


class NutritionLogRequest(BaseModel):
    """Payload for logging a meal."""

    food_name: str = Field(min_length=1)
    meal_type: str = Field(min_length=1)
    calories: int = Field(ge=0)
    xp_gained: int = Field(ge=0)
    protein: int | None = Field(default=None, ge=0)
    carbs: int = Field(default=0, ge=0)
    fat: int = Field(default=0, ge=0)


class WorkoutLogRequest(BaseModel):
    """Payload for logging a workout."""

    workout_type: str = Field(min_length=1)
    duration: int = Field(ge=0)
    intensity: str = "moderate"
    calories_burned: int = Field(default=0, ge=0)
    xp_gained: int = Field(ge=0)
    notes: str | None = None


class HydrationLogRequest(BaseModel):
    """Payload for logging water intake."""

    glasses: int = Field(default=1, gt=0)
