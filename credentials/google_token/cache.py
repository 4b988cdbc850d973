"""
In-memory cache of resolved profiles keyed by access token.

The cache only stores entries with their creation time; deciding whether an
entry is still fresh is the authenticator's job. Size is bounded by an LRU
policy so tokens that are never presented again eventually fall out.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

from cachetools import LRUCache

from .profile import UserProfile

DEFAULT_MAX_ENTRIES = 1024


@dataclass(frozen=True)
class CacheEntry:
    profile: UserProfile
    created_at: float


class ProfileCache:
    """
    Thread-safe token -> ``CacheEntry`` mapping.

    ``put`` always stores a new entry (last write wins); entries are never
    updated in place.
    """

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: LRUCache[str, CacheEntry] = LRUCache(maxsize=max(1, max_entries))
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, token: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(token)

    def put(self, token: str, profile: UserProfile, created_at: float | None = None) -> CacheEntry:
        entry = CacheEntry(profile=profile, created_at=self._clock() if created_at is None else created_at)
        with self._lock:
            self._entries[token] = entry
        return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
