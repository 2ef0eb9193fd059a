"""Tests for the action classifier."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from fitquest.domain.actions import ActionKind, ActionMetadata
from fitquest.domain.quests import Quest, QuestDifficulty, QuestMetric, QuestType
from fitquest.services.classifier import matches_quest_type, progress_delta


def _quest(
    quest_type: QuestType,
    target_value: int = 100,
    metric: QuestMetric | None = None,
) -> Quest:
    return Quest(
        id=uuid4(),
        character_id=uuid4(),
        name="quest",
        description="",
        type=quest_type,
        target_value=target_value,
        current_progress=0,
        xp_reward=50,
        is_completed=False,
        is_daily=True,
        difficulty=QuestDifficulty.NORMAL,
        metric=metric,
        created_at=datetime.now(tz=UTC),
    )


@pytest.mark.parametrize(
    ("quest_type", "action_kind"),
    [
        (QuestType.HYDRATION, ActionKind.LOG_WATER),
        (QuestType.CARDIO, ActionKind.COMPLETE_CARDIO),
        (QuestType.CARDIO, ActionKind.WORKOUT_DURATION),
        (QuestType.CARDIO, ActionKind.LOG_WORKOUT),
        (QuestType.NUTRITION, ActionKind.LOG_MEAL),
        (QuestType.NUTRITION, ActionKind.HIT_PROTEIN_TARGET),
        (QuestType.NUTRITION, ActionKind.HIT_CALORIE_TARGET),
        (QuestType.COMMUNITY, ActionKind.ADD_RECIPE),
    ],
)
def test_matching_table(quest_type: QuestType, action_kind: ActionKind) -> None:
    assert matches_quest_type(quest_type, action_kind) is True


@pytest.mark.parametrize(
    ("quest_type", "action_kind"),
    [
        (QuestType.HYDRATION, ActionKind.LOG_MEAL),
        (QuestType.CARDIO, ActionKind.LOG_WATER),
        (QuestType.NUTRITION, ActionKind.LOG_WORKOUT),
        (QuestType.COMMUNITY, ActionKind.LOG_MEAL),
        (QuestType.STRENGTH, ActionKind.WORKOUT_DURATION),
    ],
)
def test_non_matching_pairs(quest_type: QuestType, action_kind: ActionKind) -> None:
    assert matches_quest_type(quest_type, action_kind) is False


def test_strength_requires_strength_like_workout() -> None:
    lifting = ActionMetadata(workout_type="Weightlifting")
    running = ActionMetadata(workout_type="running")

    assert matches_quest_type(QuestType.STRENGTH, ActionKind.LOG_WORKOUT, lifting)
    assert not matches_quest_type(QuestType.STRENGTH, ActionKind.LOG_WORKOUT, running)
    assert not matches_quest_type(QuestType.STRENGTH, ActionKind.LOG_WORKOUT)


def test_string_inputs_are_accepted() -> None:
    assert matches_quest_type("hydration", "log_water") is True
    assert matches_quest_type("hydration", "teleport") is False
    assert matches_quest_type("juggling", "log_water") is False


def test_hydration_delta_is_glass_count() -> None:
    assert progress_delta(_quest(QuestType.HYDRATION), ActionKind.LOG_WATER, 3) == 3


def test_cardio_delta_uses_minutes_or_duration() -> None:
    quest = _quest(QuestType.CARDIO)

    assert progress_delta(quest, ActionKind.WORKOUT_DURATION, 25) == 25
    assert progress_delta(quest, ActionKind.COMPLETE_CARDIO, 12) == 12
    assert (
        progress_delta(
            quest, ActionKind.LOG_WORKOUT, 0, ActionMetadata(duration=15)
        )
        == 15
    )
    assert progress_delta(quest, ActionKind.LOG_WORKOUT, 40) == 1


def test_nutrition_delta_by_metric() -> None:
    meta = ActionMetadata(calories=455, protein=32)
    calories_only = ActionMetadata(calories=455)

    protein_quest = _quest(QuestType.NUTRITION, metric=QuestMetric.PROTEIN_GRAMS)
    calorie_quest = _quest(QuestType.NUTRITION, metric=QuestMetric.CALORIES_SCALED)
    entry_quest = _quest(QuestType.NUTRITION, metric=QuestMetric.ENTRY_COUNT)

    assert progress_delta(protein_quest, ActionKind.LOG_MEAL, 1, meta) == 32
    assert progress_delta(protein_quest, ActionKind.LOG_MEAL, 1, calories_only) == 45
    assert progress_delta(protein_quest, ActionKind.LOG_MEAL, 1) == 1
    assert progress_delta(calorie_quest, ActionKind.LOG_MEAL, 1, meta) == 45
    assert progress_delta(calorie_quest, ActionKind.LOG_MEAL, 1) == 1
    assert progress_delta(entry_quest, ActionKind.LOG_MEAL, 1, meta) == 1


def test_nutrition_target_actions_use_value() -> None:
    quest = _quest(QuestType.NUTRITION, metric=QuestMetric.CALORIES_SCALED)

    assert progress_delta(quest, ActionKind.HIT_PROTEIN_TARGET, 20) == 20
    assert progress_delta(quest, ActionKind.HIT_CALORIE_TARGET, 0) == 0


def test_strength_delta() -> None:
    quest = _quest(QuestType.STRENGTH)

    assert (
        progress_delta(
            quest,
            ActionKind.LOG_WORKOUT,
            0,
            ActionMetadata(workout_type="strength", duration=45),
        )
        == 45
    )
    assert (
        progress_delta(
            quest, ActionKind.LOG_WORKOUT, 0, ActionMetadata(workout_type="resistance")
        )
        == 1
    )
    assert (
        progress_delta(
            quest, ActionKind.LOG_WORKOUT, 0, ActionMetadata(workout_type="yoga")
        )
        == 0
    )


def test_community_delta_counts_recipes() -> None:
    quest = _quest(QuestType.COMMUNITY)

    assert progress_delta(quest, ActionKind.ADD_RECIPE, 0) == 1
    assert progress_delta(quest, ActionKind.ADD_RECIPE, 2) == 2


def test_non_matching_and_unknown_actions_score_zero() -> None:
    quest = _quest(QuestType.HYDRATION)

    assert progress_delta(quest, ActionKind.LOG_MEAL, 5) == 0
    assert progress_delta(quest, "moonwalk", 5) == 0


def test_delta_is_not_clamped_to_target() -> None:
    quest = _quest(QuestType.HYDRATION, target_value=8)

    assert progress_delta(quest, ActionKind.LOG_WATER, 20) == 20


def test_delta_never_negative_and_never_raises() -> None:
    quest = _quest(QuestType.HYDRATION)

    assert progress_delta(quest, ActionKind.LOG_WATER, -4) == 0
    assert progress_delta(quest, ActionKind.LOG_WATER, float("nan")) == 0
    assert progress_delta(quest, ActionKind.LOG_WATER, 2.7) == 2


def test_classifier_is_deterministic() -> None:
    quest = _quest(QuestType.NUTRITION, metric=QuestMetric.PROTEIN_GRAMS)
    meta = ActionMetadata(calories=600, protein=41)

    first = [progress_delta(quest, ActionKind.LOG_MEAL, 1, meta) for _ in range(5)]
    matches = {matches_quest_type(quest.type, ActionKind.LOG_MEAL) for _ in range(5)}

    assert first == [41] * 5
    assert matches == {True}
    assert meta == ActionMetadata(calories=600, protein=41)


def test_metadata_from_mapping_accepts_camel_case() -> None:
    meta = ActionMetadata.from_mapping(
        {"workoutType": "strength", "duration": "30", "calories": "abc"}
    )

    assert meta.workout_type == "strength"
    assert meta.duration == 30
    assert meta.calories is None
