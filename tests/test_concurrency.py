"""Tests for per-character serialization."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

from fitquest.adapters.in_memory_repositories import InMemoryCharacterRepository
from fitquest.containers import AppContainer
from fitquest.domain.characters import Character
from fitquest.domain.quests import QuestType
from fitquest.services.characters import CharacterLedger
from fitquest.services.locks import CharacterLocks
from tests.conftest import FlakyActivityRepository, add_quest


def test_same_character_gets_same_reentrant_lock() -> None:
    locks = CharacterLocks()
    character_id = uuid4()

    lock = locks.lock_for(character_id)

    assert locks.lock_for(character_id) is lock
    assert locks.lock_for(uuid4()) is not lock
    with locks.hold(character_id), locks.hold(character_id):
        assert lock.acquire(blocking=False)
        lock.release()


def test_concurrent_logs_do_not_lose_updates(
    container: AppContainer,
    character: Character,
    activity_repository: FlakyActivityRepository,
) -> None:
    quest = add_quest(container, character.id, QuestType.HYDRATION, 40, xp_reward=75)
    start = threading.Barrier(8)

    def drink() -> None:
        start.wait()
        for _ in range(10):
            container.tracking_service.log_hydration(character.id)

    with ThreadPoolExecutor(max_workers=8) as pool:
        futures = [pool.submit(drink) for _ in range(8)]
        for future in futures:
            future.result()

    stored_quest = container.quest_registry.get_quest(quest.id)
    stored_character = container.ledger.get_character(character.id)
    assert stored_quest.current_progress == 40
    assert stored_quest.is_completed is True
    assert stored_character.total_xp == 80 * 10 + 75
    completions = [a for a in activity_repository.activities if a.type == "quest"]
    assert len(completions) == 1


class SlowCharacterRepository(InMemoryCharacterRepository):
    """Widens the read-modify-write window of every grant."""

    def get_character(self, character_id):  # type: ignore[no-untyped-def]
        character = super().get_character(character_id)
        time.sleep(0.001)
        return character


def test_direct_ledger_grants_are_serialized() -> None:
    ledger = CharacterLedger(SlowCharacterRepository())
    character = ledger.create_character("Lady Cardio")
    start = threading.Barrier(8)

    def grant() -> None:
        start.wait()
        for _ in range(25):
            ledger.grant_xp(character.id, 4)

    with ThreadPoolExecutor(max_workers=8) as pool:
        for future in [pool.submit(grant) for _ in range(8)]:
            future.result()

    stored = ledger.get_character(character.id)
    assert stored.total_xp == 800
    assert stored.current_xp < stored.next_level_xp
