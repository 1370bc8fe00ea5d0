"""Read-through cache for Publishing API reference data.

Organisations change rarely and listing them takes several paged requests,
so ``Organisation.all()`` keeps the result here for a configured number of
seconds.  Entries are loaded through ``fetch``; a failed load leaves the
cache untouched so the next caller retries.
"""

import logging
import threading
import time
from typing import Any, Callable, Hashable

logger = logging.getLogger(__name__)


class TTLCache:
    """Thread-safe read-through cache whose entries expire after ``ttl_seconds``.

    When ``maxsize`` keys are held, loading a new key drops the one due to
    expire first.  *clock* returns seconds and defaults to ``time.monotonic``.

    Usage::

        cache = TTLCache(maxsize=4, ttl_seconds=3600)
        organisations = cache.fetch("organisations", load_organisations)
    """

    def __init__(self, maxsize: int = 16, ttl_seconds: float = 3600.0,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self._maxsize = maxsize
        self._ttl = float(ttl_seconds)
        self._clock = clock
        # key -> (expires_at, value)
        self._entries: dict[Hashable, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def __len__(self) -> int:
        with self._lock:
            self._drop_expired()
            return len(self._entries)

    def peek(self, key: Hashable) -> Any | None:
        """The live value for *key*, or ``None``; never loads."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or self._clock() >= entry[0]:
                return None
            return entry[1]

    def fetch(self, key: Hashable, loader: Callable[[], Any]) -> Any:
        """Return the live value for *key*, calling *loader* when there is none.

        Exceptions from *loader* propagate and nothing is stored.
        """
        value = self.peek(key)
        if value is not None:
            return value
        logger.debug("Loading %r into cache (ttl %ss)", key, self._ttl)
        value = loader()
        with self._lock:
            self._drop_expired()
            if key not in self._entries and len(self._entries) >= self._maxsize:
                self._evict_soonest()
            self._entries[key] = (self._clock() + self._ttl, value)
        return value

    def invalidate(self, key: Hashable | None = None) -> None:
        """Forget *key*, or every entry when no key is given."""
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)

    # Callers hold the lock.

    def _drop_expired(self) -> None:
        now = self._clock()
        for key in [k for k, (expires_at, _) in self._entries.items() if now >= expires_at]:
            del self._entries[key]

    def _evict_soonest(self) -> None:
        soonest = min(self._entries, key=lambda k: self._entries[k][0])
        logger.debug("Cache full, evicting %r", soonest)
        del self._entries[soonest]
