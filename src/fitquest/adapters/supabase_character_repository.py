"""Supabase repository for characters."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitquest.domain.characters import Character
from fitquest.services.characters import CharacterRepository, xp_for_level

_COLUMNS = "id, name, class, level, current_xp, next_level_xp, total_xp, created_at"


@dataclass
class SupabaseCharacterRepository(CharacterRepository):
    """Supabase implementation for character persistence."""

    client: Client

    def get_character(self, character_id: UUID) -> Character | None:
        """Return a character by id."""
        response = (
            self.client.table("characters")
            .select(_COLUMNS)
            .eq("id", str(character_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_character(response.data[0])

    def create_character(self, name: str, character_class: str) -> Character:
        """Insert a level 1 character row and return it."""
        response = (
            self.client.table("characters")
            .insert(
                {
                    "name": name,
                    "class": character_class,
                    "level": 1,
                    "current_xp": 0,
                    "next_level_xp": xp_for_level(1),
                    "total_xp": 0,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create character")
        return _parse_character(response.data[0])

    def save_character(self, character: Character) -> None:
        """Update level and XP columns."""
        self.client.table("characters").update(
            {
                "level": character.level,
                "current_xp": character.current_xp,
                "next_level_xp": character.next_level_xp,
                "total_xp": character.total_xp,
            }
        ).eq("id", str(character.id)).execute()


def _parse_character(row: dict[str, object]) -> Character:
    created_raw = row.get("created_at")
    return Character(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        character_class=str(row.get("class", "")),
        level=int(row.get("level", 1)),
        current_xp=int(row.get("current_xp", 0)),
        next_level_xp=int(row.get("next_level_xp", xp_for_level(1))),
        total_xp=int(row.get("total_xp", 0)),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else datetime.now(tz=UTC)
        ),
    )
