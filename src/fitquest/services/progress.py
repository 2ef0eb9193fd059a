"""Quest progress coordinator.

Every logged action goes through ``apply_action``: classify it against the
character's active quests, saturate progress at the target, and on the
Active -> Completed transition grant the quest reward once and record a
``quest`` activity. Completed quests are never revisited.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from uuid import UUID

from fitquest.domain.actions import ActionKind, ActionMetadata, parse_action_kind
from fitquest.domain.activities import QUEST_ACTIVITY
from fitquest.domain.errors import InvalidInputError, PartialFailureError
from fitquest.domain.quests import Quest, QuestUpdateResult
from fitquest.services.activities import ActivityLog
from fitquest.services.characters import CharacterLedger
from fitquest.services.classifier import matches_quest_type, progress_delta
from fitquest.services.quests import QuestRegistry

_logger = logging.getLogger(__name__)


@dataclass
class QuestProgressCoordinator:
    """Single entry point that turns actions into quest progress and XP."""

    ledger: CharacterLedger
    registry: QuestRegistry
    activity_log: ActivityLog

    def apply_action(
        self,
        character_id: UUID,
        action_kind: ActionKind | str,
        value: float = 0,
        metadata: ActionMetadata | Mapping[str, object] | None = None,
    ) -> list[QuestUpdateResult]:
        """Advance every matching active quest and return what changed."""
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise InvalidInputError(f"Action value must be numeric: {value!r}")
        if value < 0:
            raise InvalidInputError(f"Action value must be non-negative: {value}")
        meta = (
            metadata
            if isinstance(metadata, ActionMetadata)
            else ActionMetadata.from_mapping(metadata)
        )
        kind = parse_action_kind(action_kind)

        with self.ledger.locks.hold(character_id):
            # Unknown characters fail here, before any quest is touched.
            self.ledger.get_character(character_id)
            if kind is None:
                _logger.debug(
                    "Ignoring unknown action: character_id=%s action=%s",
                    character_id,
                    action_kind,
                )
                return []

            results: list[QuestUpdateResult] = []
            failures: dict[UUID, Exception] = {}
            for quest in self.registry.get_active_quests(character_id):
                if not matches_quest_type(quest.type, kind, meta):
                    continue
                try:
                    result = self._advance(character_id, quest, kind, value, meta)
                except Exception as exc:
                    _logger.exception(
                        "Quest update failed: quest_id=%s action=%s",
                        quest.id,
                        kind.value,
                    )
                    failures[quest.id] = exc
                    continue
                if result is not None:
                    results.append(result)

        if failures:
            raise PartialFailureError(results, failures)
        return results

    def _advance(
        self,
        character_id: UUID,
        quest: Quest,
        kind: ActionKind,
        value: float,
        meta: ActionMetadata,
    ) -> QuestUpdateResult | None:
        delta = progress_delta(quest, kind, value, meta)
        if delta <= 0:
            return None
        new_progress = min(quest.current_progress + delta, quest.target_value)
        was_completed = quest.is_completed
        is_now_completed = new_progress >= quest.target_value
        self.registry.update_quest_progress(quest.id, new_progress, is_now_completed)

        if was_completed or not is_now_completed:
            return QuestUpdateResult(
                quest_id=quest.id,
                current_progress=new_progress,
                completed=is_now_completed,
            )

        self.ledger.grant_xp(character_id, quest.xp_reward)
        self.activity_log.record(
            character_id=character_id,
            activity_type=QUEST_ACTIVITY,
            description=f"Quest completed: {quest.name}",
            xp_gained=quest.xp_reward,
            metadata={"quest_id": str(quest.id), "quest_name": quest.name},
        )
        _logger.info(
            "Quest completed: character_id=%s quest_id=%s xp=%s",
            character_id,
            quest.id,
            quest.xp_reward,
        )
        return QuestUpdateResult(
            quest_id=quest.id,
            current_progress=new_progress,
            completed=True,
            xp_awarded=quest.xp_reward,
        )
