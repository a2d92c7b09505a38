"""
Time-bounded cache for content API query results.
"""

import hashlib
import json
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, TYPE_CHECKING

from shared.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_QUERY_TTL = 60


@dataclass
class QueryCacheEntry:
    """Cached query result."""
    data: Any
    stored_at: float
    tags: FrozenSet[str] = field(default_factory=frozenset)


class QueryCache:
    """Caches successful query results per (query, variables) for a fixed TTL."""

    def __init__(
        self,
        ttl: int = DEFAULT_QUERY_TTL,
        *,
        metrics: Optional["MetricsCollector"] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self.metrics = metrics
        self._clock = clock
        self._entries: Dict[str, QueryCacheEntry] = {}
        self.logger = get_logger("site.query_cache")

    def _make_key(self, query: str, variables: Optional[Dict[str, Any]]) -> str:
        """Generate cache key."""
        key_string = json.dumps({"query": query, "variables": variables or {}}, sort_keys=True, default=str)
        return f"query:{hashlib.md5(key_string.encode()).hexdigest()}"

    def get(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """Return the cached result, or None when missing or older than the TTL."""
        key = self._make_key(query, variables)
        entry = self._entries.get(key)

        if entry is not None and self._clock() - entry.stored_at < self.ttl:
            self._record("cache_hits_total")
            return entry.data

        if entry is not None:
            del self._entries[key]
        self._record("cache_misses_total")
        return None

    def set(
        self,
        query: str,
        variables: Optional[Dict[str, Any]],
        data: Any,
        tags: Iterable[str] = (),
    ) -> None:
        """Cache a query result."""
        key = self._make_key(query, variables)
        tag_set = frozenset(tags)
        self._entries[key] = QueryCacheEntry(data=data, stored_at=self._clock(), tags=tag_set)
        self.logger.debug("Cached query result", key=key, ttl=self.ttl, tags=sorted(tag_set))

    def invalidate_tag(self, tag: str) -> int:
        """Drop every entry carrying the tag. Returns the number of entries removed."""
        stale = [key for key, entry in self._entries.items() if tag in entry.tags]
        for key in stale:
            del self._entries[key]
        if stale:
            self.logger.info("Invalidated cached queries", tag=tag, count=len(stale))
        return len(stale)

    def clear(self) -> int:
        """Drop all entries."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {"entries": len(self._entries), "ttl_seconds": self.ttl}

    def _record(self, metric_name: str) -> None:
        if self.metrics:
            self.metrics.increment_counter(metric_name, cache_type="query")
