"""Domain models for characters and XP grants."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

DEFAULT_CHARACTER_CLASS = "Warrior of Wellness"


@dataclass(frozen=True)
class Character:
    """A character's level and XP state."""

    id: UUID
    name: str
    character_class: str
    level: int
    current_xp: int
    next_level_xp: int
    total_xp: int
    created_at: datetime


@dataclass(frozen=True)
class GrantResult:
    """Outcome of an XP grant."""

    character: Character
    leveled_up: bool
    xp_gained: int
