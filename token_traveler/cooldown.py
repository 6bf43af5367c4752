"""Debounce guard.

Relocating a token produces another position change for it, which would
immediately re-trigger the destination portal. After every relocation the
token is armed for a short window during which its events are ignored.

Keys are the entity id and, when non-empty, the display name, so the clone
created by a cross-context move is covered by its name even before its own id
is armed.
"""

import itertools
import logging
import threading
from functools import partial
from typing import List, Optional, Tuple

from token_traveler.config import DEFAULT_COOLDOWN_MS
from token_traveler.scheduler import Scheduler
from token_traveler.store import TravelerStore
from token_traveler.types import EntityID, Millis

logger = logging.getLogger(__name__)


def cooldown_keys(entity_id: EntityID, entity_name: str) -> List[str]:
    keys = [f"id:{entity_id}"]
    if entity_name:
        keys.append(f"name:{entity_name}")
    return keys


class CooldownGuard:
    """Arms and checks per-entity cooldowns stored in a :class:`TravelerStore`.

    Each key gets its own one-shot expiry timer. Timers are not cancelled:
    re-arming a key stamps a new generation, and an older timer firing later
    finds a different generation and leaves the entry in place.

    Expiry timers may run on other threads; every read and write of the
    cooldown entries happens under one lock.
    """

    def __init__(
        self,
        store: TravelerStore,
        scheduler: Scheduler,
        ttl_ms: Millis = DEFAULT_COOLDOWN_MS,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._ttl_ms = ttl_ms
        self._generation = itertools.count(1)
        self._lock = threading.Lock()

    def arm(
        self, entity_id: EntityID, entity_name: str, ttl_ms: Optional[Millis] = None
    ) -> None:
        ttl = self._ttl_ms if ttl_ms is None else ttl_ms
        armed: List[Tuple[str, int]] = []
        with self._lock:
            cooldown = self._store.cooldown
            for key in cooldown_keys(entity_id, entity_name):
                generation = next(self._generation)
                cooldown[key] = generation
                armed.append((key, generation))
        for key, generation in armed:
            self._scheduler.call_later(ttl, partial(self._expire, key, generation))
        logger.debug("Cooldown armed for %s (%r), %s ms", entity_id, entity_name, ttl)

    def is_cooling_down(self, entity_id: EntityID, entity_name: str) -> bool:
        with self._lock:
            cooldown = self._store.cooldown
            return any(key in cooldown for key in cooldown_keys(entity_id, entity_name))

    def clear(self) -> None:
        with self._lock:
            self._store.cooldown.clear()

    def _expire(self, key: str, generation: int) -> None:
        with self._lock:
            cooldown = self._store.cooldown
            if cooldown.get(key) == generation:
                del cooldown[key]
