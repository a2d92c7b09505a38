"""
On-demand revalidation for the Site Service.

The CMS calls the revalidation webhook whenever content is published,
edited or deleted, passing the content type that changed:

    POST /api/revalidate?secret=<REVALIDATION_SECRET>&tag=stories

Each tag maps to the pages that display that content type. Those pages are
dropped from the page cache together with every cached query tagged with
the same content type, so the next visitor gets a freshly built page. The
"all" tag revalidates the root layout, which covers every page.
"""

import hmac
import time
from typing import Any, Dict, Iterable, List, Optional, TYPE_CHECKING

from shared.errors import AuthenticationError, ValidationError
from shared.logging import get_logger

from ..caching.page_cache import LAYOUT, PAGE, PageCache
from ..caching.query_cache import QueryCache

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


TAG_TO_PATHS: Dict[str, List[str]] = {
    "stories": ["/", "/stories"],
    "events": ["/"],
    "resources": ["/resources"],
    "team": ["/about"],
}

ALL_TAG = "all"
VALID_TAGS = ["stories", "events", "resources", "team", ALL_TAG]
LAYOUT_MARKER = "/ (layout: all pages)"


def unmapped_paths(known_paths: Iterable[str]) -> List[str]:
    """Return CMS-backed page paths that no content-type tag revalidates."""
    covered = {path for paths in TAG_TO_PATHS.values() for path in paths}
    return [path for path in known_paths if path not in covered]


class RevalidationService:
    """Validates webhook calls and invalidates the affected caches."""

    def __init__(
        self,
        secret: str,
        page_cache: PageCache,
        query_cache: Optional[QueryCache] = None,
        *,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self._secret = secret
        self.page_cache = page_cache
        self.query_cache = query_cache
        self.metrics = metrics
        self.logger = get_logger("site.revalidation")

    def check_secret(self, secret: Optional[str]) -> None:
        """Raise AuthenticationError unless secret matches the configured value."""
        if not self._secret:
            self.logger.error("REVALIDATION_SECRET is not configured; rejecting webhook")
            raise AuthenticationError("Invalid secret")
        if secret is None or not hmac.compare_digest(secret.encode("utf-8"), self._secret.encode("utf-8")):
            raise AuthenticationError("Invalid secret")

    def revalidate(self, secret: Optional[str], tag: Optional[str]) -> Dict[str, Any]:
        """
        Revalidate the pages affected by tag.

        The secret is checked before the tag so a bad secret is always a 401.
        Repeating a call has the same effect as making it once.
        """
        self.check_secret(secret)

        if not tag or tag not in VALID_TAGS:
            raise ValidationError(
                f"Invalid tag. Use one of: {', '.join(VALID_TAGS)}",
                details={"tag": tag},
            )

        revalidated_paths: List[str] = []

        if tag == ALL_TAG:
            self.page_cache.revalidate_path("/", LAYOUT)
            if self.query_cache is not None:
                self.query_cache.clear()
            revalidated_paths.append(LAYOUT_MARKER)
        else:
            for path in TAG_TO_PATHS.get(tag, []):
                self.page_cache.revalidate_path(path, PAGE)
                revalidated_paths.append(path)
            if self.query_cache is not None:
                self.query_cache.invalidate_tag(tag)

        if self.metrics:
            self.metrics.increment_counter("revalidations_total", tag=tag)
        self.logger.info("Revalidated", tag=tag, paths=revalidated_paths)

        return {
            "revalidated": True,
            "tag": tag,
            "paths": revalidated_paths,
            "now": int(time.time() * 1000),
        }
