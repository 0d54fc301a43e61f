"""
In-memory query cache.

Holds serialized read results (menu listings, reports) keyed by
``(scope, *params)``. Entries are never patched in place: mutating routes call
``invalidate(scope)`` once their commit has succeeded and the next reader
refetches. One process only; a multi-worker deployment needs a shared store.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Hashable, Optional, Tuple

from menucost.config import settings

log = logging.getLogger(__name__)

_MISSING = object()


class QueryCache:
    def __init__(self, ttl_seconds: int = 300) -> None:
        self.ttl_seconds = ttl_seconds
        # key -> (value, expiration)
        self._entries: Dict[Tuple[Hashable, ...], Tuple[Any, datetime]] = {}

    def get(self, key: Tuple[Hashable, ...], default: Any = None) -> Any:
        entry = self._entries.get(key, _MISSING)
        if entry is _MISSING:
            log.debug("cache miss: %s", key)
            return default

        value, expiration = entry
        if datetime.now(timezone.utc) > expiration:
            log.debug("cache expired: %s", key)
            del self._entries[key]
            return default

        log.debug("cache hit: %s", key)
        return value

    def set(self, key: Tuple[Hashable, ...], value: Any, ttl_seconds: Optional[int] = None) -> None:
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._entries[key] = (value, datetime.now(timezone.utc) + timedelta(seconds=ttl))

    def invalidate(self, *scopes: str) -> int:
        """Drop every entry whose key starts with one of ``scopes``."""
        doomed = [key for key in self._entries if key and key[0] in scopes]
        for key in doomed:
            del self._entries[key]
        if doomed:
            log.debug("cache invalidated %d entries for %s", len(doomed), scopes)
        return len(doomed)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


query_cache = QueryCache(ttl_seconds=settings.cache_ttl_seconds)
