"""
Incremental page regeneration cache.

Assembled page payloads are kept per site path. An entry is served until it
is older than the TTL or until the path is revalidated, after which the next
request regenerates it from fresh content.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, TYPE_CHECKING

from shared.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_PAGE_TTL = 60

PAGE = "page"
LAYOUT = "layout"


@dataclass
class PageCacheEntry:
    """Cached page payload."""
    payload: Dict[str, Any]
    stored_at: float
    generated_at: str


class PageCache:
    """Path-keyed cache of page payloads with time-based and on-demand regeneration."""

    def __init__(
        self,
        ttl: int = DEFAULT_PAGE_TTL,
        *,
        metrics: Optional["MetricsCollector"] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self.metrics = metrics
        self._clock = clock
        self._entries: Dict[str, PageCacheEntry] = {}
        self._hits = 0
        self._misses = 0
        self.logger = get_logger("site.page_cache")

    async def get_or_render(
        self,
        path: str,
        render: Callable[[], Awaitable[Dict[str, Any]]],
    ) -> Tuple[Dict[str, Any], PageCacheEntry, bool]:
        """
        Return the cached payload for path, regenerating it when missing or stale.

        Returns (payload, entry, cached) where cached tells whether the payload
        came from the cache.
        """
        entry = self._entries.get(path)
        if entry is not None and self._clock() - entry.stored_at < self.ttl:
            self._hits += 1
            self._record("cache_hits_total")
            return entry.payload, entry, True

        self._misses += 1
        self._record("cache_misses_total")

        payload = await render()
        entry = PageCacheEntry(
            payload=payload,
            stored_at=self._clock(),
            generated_at=datetime.now(timezone.utc).isoformat(),
        )
        self._entries[path] = entry
        self.logger.debug("Page regenerated", path=path)
        return payload, entry, False

    def revalidate_path(self, path: str, type: str = PAGE) -> List[str]:
        """
        Force path to be regenerated on its next request.

        With type "layout" every cached path at or below path is dropped, so
        revalidating "/" as a layout covers the whole site. Returns the cached
        paths that were dropped.
        """
        if type not in (PAGE, LAYOUT):
            raise ValueError(f"Unknown revalidation type: {type}")

        if type == PAGE:
            dropped = [path] if path in self._entries else []
        else:
            prefix = path.rstrip("/") + "/"
            dropped = [cached for cached in self._entries if cached == path or cached.startswith(prefix)]

        for cached in dropped:
            del self._entries[cached]

        self.logger.info("Revalidated path", path=path, type=type, dropped=len(dropped))
        return dropped

    def is_cached(self, path: str) -> bool:
        """Whether a fresh entry exists for path."""
        entry = self._entries.get(path)
        return entry is not None and self._clock() - entry.stored_at < self.ttl

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        total = self._hits + self._misses
        return {
            "cached_paths": sorted(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_ratio": round(self._hits / total, 3) if total else 0.0,
            "ttl_seconds": self.ttl,
        }

    def _record(self, metric_name: str) -> None:
        if self.metrics:
            self.metrics.increment_counter(metric_name, cache_type="page")
