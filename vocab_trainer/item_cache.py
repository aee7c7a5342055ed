"""
Read-through cache for users' learning-item pools.

The cache is an explicit collaborator: callers construct it with a loader
and pass it to the study service. The scheduling engine never reads it.
"""

from __future__ import annotations

import logging
import threading
import time
from copy import deepcopy
from typing import Callable, Optional

from vocab_trainer.srs.learning_item import LearningItem

logger = logging.getLogger(__name__)

PoolLoader = Callable[[str], list[LearningItem]]

DEFAULT_TTL_SECONDS = 300


class ItemPoolCache:
    """
    Per-user cache of item pools with time-based expiry.

    Returned pools are copies, so callers can modify them freely.
    """

    def __init__(
        self,
        loader: PoolLoader,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self._loader = loader
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, list[LearningItem]]] = {}
        # Bumped by invalidation; a load only lands if nothing bumped them meanwhile
        self._generations: dict[str, int] = {}
        self._epoch = 0
        self._lock = threading.Lock()

    def _generation(self, user_id: str) -> tuple[int, int]:
        return self._epoch, self._generations.get(user_id, 0)

    def get(self, user_id: str) -> list[LearningItem]:
        """
        Return the user's pool, loading it on a miss or after expiry.

        A pool loaded while the user was invalidated is returned but not cached.
        """
        with self._lock:
            entry = self._entries.get(user_id)
            if entry is not None and self._clock() - entry[0] < self._ttl_seconds:
                return deepcopy(entry[1])
            generation = self._generation(user_id)

        pool = self._loader(user_id)
        logger.debug("[CACHE] Loaded %d items for user %s", len(pool), user_id)

        with self._lock:
            if self._generation(user_id) == generation:
                self._entries[user_id] = (self._clock(), deepcopy(pool))
            else:
                logger.debug("[CACHE] Discarded pool for user %s invalidated during load", user_id)
        return pool

    def peek(self, user_id: str) -> Optional[list[LearningItem]]:
        """Cached pool without loading, or None (ignores expiry)."""
        with self._lock:
            entry = self._entries.get(user_id)
            return deepcopy(entry[1]) if entry is not None else None

    def invalidate(self, user_id: str) -> None:
        with self._lock:
            self._entries.pop(user_id, None)
            self._generations[user_id] = self._generations.get(user_id, 0) + 1

    def invalidate_all(self) -> None:
        with self._lock:
            self._entries.clear()
            self._epoch += 1
