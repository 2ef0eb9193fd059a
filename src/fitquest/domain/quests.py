"""Domain models for quests."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class QuestType(Enum):
    """Categories of quests; each is advanced by a fixed set of actions."""

    CARDIO = "cardio"
    NUTRITION = "nutrition"
    HYDRATION = "hydration"
    STRENGTH = "strength"
    COMMUNITY = "community"


class QuestMetric(Enum):
    """How a nutrition quest scores a logged meal."""

    PROTEIN_GRAMS = "protein_grams"
    CALORIES_SCALED = "calories_scaled"
    ENTRY_COUNT = "entry_count"


class QuestDifficulty(Enum):
    """Display difficulty of a quest."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


@dataclass(frozen=True)
class Quest:
    """A goal-tracked challenge owned by a character."""

    id: UUID
    character_id: UUID
    name: str
    description: str
    type: QuestType
    target_value: int
    current_progress: int
    xp_reward: int
    is_completed: bool
    is_daily: bool
    difficulty: QuestDifficulty
    metric: QuestMetric | None
    created_at: datetime


@dataclass(frozen=True)
class QuestDraft:
    """Fields needed to issue a new quest."""

    name: str
    description: str
    type: QuestType
    target_value: int
    xp_reward: int
    is_daily: bool = True
    difficulty: QuestDifficulty = QuestDifficulty.NORMAL
    metric: QuestMetric | None = None


@dataclass(frozen=True)
class QuestUpdateResult:
    """Progress change applied to a single quest."""

    quest_id: UUID
    current_progress: int
    completed: bool
    xp_awarded: int | None = None
