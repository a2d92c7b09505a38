"""
Site caching package.

Provides the two in-process caches behind the site: CMS query results and
assembled page payloads. Both are short-lived (time-bounded) and support
explicit invalidation from the revalidation webhook.
"""

from .query_cache import QueryCache
from .page_cache import PageCache

__all__ = ["QueryCache", "PageCache"]
