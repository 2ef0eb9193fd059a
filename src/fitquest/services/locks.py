"""Per-character locks serializing read-modify-write on XP and quests."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID


class CharacterLocks:
    """Hands out one re-entrant lock per character id."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[UUID, threading.RLock] = {}

    def lock_for(self, character_id: UUID) -> threading.RLock:
        """Return the lock owned by ``character_id``."""
        with self._guard:
            lock = self._locks.get(character_id)
            if lock is None:
                lock = threading.RLock()
                self._locks[character_id] = lock
            return lock

    @contextmanager
    def hold(self, character_id: UUID) -> Iterator[None]:
        """Hold the character's lock for the duration of the block."""
        lock = self.lock_for(character_id)
        with lock:
            yield
