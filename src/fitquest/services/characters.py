"""Character ledger: XP grants and level rollover."""

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol
from uuid import UUID

from fitquest.domain.characters import DEFAULT_CHARACTER_CLASS, Character
from fitquest.domain.errors import InvalidInputError, NotFoundError
from fitquest.services.locks import CharacterLocks

_logger = logging.getLogger(__name__)

BASE_LEVEL_XP = 100


class CharacterRepository(Protocol):
    """Persistence interface for characters."""

    def get_character(self, character_id: UUID) -> Character | None:
        """Return a character by id, if present."""

    def create_character(self, name: str, character_class: str) -> Character:
        """Create a level 1 character and return it."""

    def save_character(self, character: Character) -> None:
        """Persist level and XP fields of a character."""


def xp_for_level(level: int) -> int:
    """Return the XP needed to finish ``level``: floor(100 * 1.5^(level-1))."""
    exponent = max(level - 1, 0)
    return BASE_LEVEL_XP * 3**exponent // 2**exponent


def apply_xp(character: Character, amount: int) -> tuple[Character, bool]:
    """Add XP to a character and resolve every level rollover."""
    current_xp = character.current_xp + amount
    level = character.level
    next_level_xp = character.next_level_xp
    leveled_up = False
    while current_xp >= next_level_xp:
        current_xp -= next_level_xp
        level += 1
        next_level_xp = xp_for_level(level)
        leveled_up = True
    updated = replace(
        character,
        level=level,
        current_xp=current_xp,
        next_level_xp=next_level_xp,
        total_xp=character.total_xp + amount,
    )
    return updated, leveled_up


@dataclass
class CharacterLedger:
    """Holds character XP state and applies grants.

    ``locks`` is shared with every service that mutates a character, so a
    grant never interleaves with another read-modify-write on the same id.
    """

    repository: CharacterRepository
    locks: CharacterLocks = field(default_factory=CharacterLocks)

    def get_character(self, character_id: UUID) -> Character:
        """Return a character or raise NotFoundError."""
        character = self.repository.get_character(character_id)
        if character is None:
            raise NotFoundError("Character", character_id)
        return character

    def create_character(
        self, name: str, character_class: str = DEFAULT_CHARACTER_CLASS
    ) -> Character:
        """Create a new level 1 character."""
        if not name.strip():
            raise InvalidInputError("Character name is required")
        return self.repository.create_character(name.strip(), character_class)

    def grant_xp(self, character_id: UUID, amount: int) -> tuple[Character, bool]:
        """Grant XP and return the updated character and level-up flag.

        Quests and activities are not touched; callers record the activity
        that earned the XP.
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidInputError(f"XP amount must be a non-negative int: {amount}")
        with self.locks.hold(character_id):
            character = self.get_character(character_id)
            updated, leveled_up = apply_xp(character, amount)
            self.repository.save_character(updated)
        if leveled_up:
            _logger.info(
                "Character leveled up: character_id=%s level=%s",
                character_id,
                updated.level,
            )
        return updated, leveled_up
