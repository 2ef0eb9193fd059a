"""Action classifier: which quests an action advances, and by how much.

Everything here is pure. Unknown combinations score zero instead of raising,
and nothing is clamped to a quest's target.
"""

import math

from fitquest.domain.actions import ActionKind, ActionMetadata, parse_action_kind
from fitquest.domain.quests import Quest, QuestMetric, QuestType

STRENGTH_WORKOUT_TYPES = frozenset({"strength", "resistance", "weightlifting"})

_MATCHING_ACTIONS: dict[QuestType, frozenset[ActionKind]] = {
    QuestType.HYDRATION: frozenset({ActionKind.LOG_WATER}),
    QuestType.CARDIO: frozenset(
        {
            ActionKind.COMPLETE_CARDIO,
            ActionKind.WORKOUT_DURATION,
            ActionKind.LOG_WORKOUT,
        }
    ),
    QuestType.NUTRITION: frozenset(
        {
            ActionKind.LOG_MEAL,
            ActionKind.HIT_PROTEIN_TARGET,
            ActionKind.HIT_CALORIE_TARGET,
        }
    ),
    QuestType.STRENGTH: frozenset({ActionKind.LOG_WORKOUT}),
    QuestType.COMMUNITY: frozenset({ActionKind.ADD_RECIPE}),
}


def is_strength_workout(metadata: ActionMetadata | None) -> bool:
    """Return True when the workout type counts toward strength quests."""
    if metadata is None or not metadata.workout_type:
        return False
    return metadata.workout_type.strip().lower() in STRENGTH_WORKOUT_TYPES


def matches_quest_type(
    quest_type: QuestType | str,
    action_kind: ActionKind | str,
    metadata: ActionMetadata | None = None,
) -> bool:
    """Return True when an action can advance quests of ``quest_type``."""
    resolved_type = _parse_quest_type(quest_type)
    kind = parse_action_kind(action_kind)
    if resolved_type is None or kind is None:
        return False
    if kind not in _MATCHING_ACTIONS[resolved_type]:
        return False
    if resolved_type is QuestType.STRENGTH:
        return is_strength_workout(metadata)
    return True


def progress_delta(
    quest: Quest,
    action_kind: ActionKind | str,
    value: float,
    metadata: ActionMetadata | None = None,
) -> int:
    """Return the non-negative progress an action adds to ``quest``."""
    meta = metadata or ActionMetadata()
    kind = parse_action_kind(action_kind)
    if kind is None or not matches_quest_type(quest.type, kind, meta):
        return 0
    delta = _raw_delta(quest, kind, value, meta)
    return max(delta, 0)


def _raw_delta(  # noqa: PLR0911
    quest: Quest, kind: ActionKind, value: float, meta: ActionMetadata
) -> int:
    if quest.type is QuestType.HYDRATION:
        return _to_int(value)
    if quest.type is QuestType.CARDIO:
        if kind is ActionKind.LOG_WORKOUT:
            return _duration_or_one(meta)
        return _to_int(value)
    if quest.type is QuestType.NUTRITION:
        if kind is ActionKind.LOG_MEAL:
            return _meal_delta(quest.metric, meta)
        return _to_int(value)
    if quest.type is QuestType.STRENGTH:
        return _duration_or_one(meta)
    if quest.type is QuestType.COMMUNITY:
        amount = _to_int(value)
        return amount if amount > 0 else 1
    return 0


def _meal_delta(metric: QuestMetric | None, meta: ActionMetadata) -> int:
    if metric is QuestMetric.ENTRY_COUNT:
        return 1
    if metric is QuestMetric.PROTEIN_GRAMS and meta.protein is not None:
        return _to_int(meta.protein)
    if meta.calories is not None:
        return _to_int(meta.calories // 10)
    return 1


def _duration_or_one(meta: ActionMetadata) -> int:
    if meta.duration is None:
        return 1
    return _to_int(meta.duration)


def _to_int(value: float) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0
    if not math.isfinite(value):
        return 0
    return math.floor(value)


def _parse_quest_type(value: QuestType | str) -> QuestType | None:
    if isinstance(value, QuestType):
        return value
    try:
        return QuestType(value)
    except ValueError:
        return None
