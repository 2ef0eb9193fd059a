"""Domain errors raised by the quest and XP services."""

from uuid import UUID

from fitquest.domain.quests import QuestUpdateResult


class FitQuestError(Exception):
    """Base error for the quest engine."""

    code = "FITQUEST_ERROR"


class NotFoundError(FitQuestError):
    """A referenced character or quest does not exist."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: UUID) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidInputError(FitQuestError):
    """Input failed validation (negative amounts, unknown types)."""

    code = "INVALID_INPUT"


class PartialFailureError(FitQuestError):
    """Some quests were updated before another quest failed.

    Updates listed in ``results`` are committed and stay committed.
    """

    code = "PARTIAL_FAILURE"

    def __init__(
        self, results: list[QuestUpdateResult], failures: dict[UUID, Exception]
    ) -> None:
        super().__init__(
            f"{len(failures)} quest update(s) failed, {len(results)} committed"
        )
        self.results = results
        self.failures = failures
