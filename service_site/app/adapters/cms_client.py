"""
WPGraphQL content client for the site.
"""

from contextlib import nullcontext
from typing import Any, Dict, Iterable, Optional, TYPE_CHECKING
import httpx

from shared.logging import get_logger
from shared.errors import ContentQueryError

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from ..caching.query_cache import QueryCache
    from shared.metrics import MetricsCollector


class CMSClient:
    """Client for querying the headless CMS GraphQL endpoint."""

    def __init__(
        self,
        graphql_url: str,
        query_cache: Optional["QueryCache"] = None,
        *,
        metrics: Optional["MetricsCollector"] = None,
        timeout: float = 10.0,
    ):
        self.graphql_url = graphql_url
        self.query_cache = query_cache
        self.metrics = metrics
        self.timeout = timeout
        self.logger = get_logger("site.cms_client")

    async def query(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
        *,
        tags: Iterable[str] = (),
    ) -> Any:
        """
        Execute a GraphQL query and return its data member.

        Successful results are served from the query cache until they expire
        or their tags are invalidated. Raises ContentQueryError on transport
        failure, non-success status, or a GraphQL errors payload.
        """
        variables = variables or {}

        if self.query_cache is not None:
            cached = self.query_cache.get(query, variables)
            if cached is not None:
                return cached

        data = await self._execute(query, variables)

        if self.query_cache is not None:
            self.query_cache.set(query, variables, data, tags)
        return data

    async def _execute(self, query: str, variables: Dict[str, Any]) -> Any:
        """POST the query and unwrap the response."""
        if not self.graphql_url:
            self._record("unconfigured")
            raise ContentQueryError("WORDPRESS_GRAPHQL_URL is not configured")

        try:
            with self._time():
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(
                        self.graphql_url,
                        json={"query": query, "variables": variables},
                        headers={"Content-Type": "application/json"},
                    )
        except httpx.HTTPError as exc:
            self.logger.error("Content API unreachable", url=self.graphql_url, error=str(exc))
            self._record("unreachable")
            raise ContentQueryError(
                f"GraphQL request failed: {exc}",
                details={"error": str(exc)}
            ) from exc

        if not response.is_success:
            self.logger.error(
                "Content API request failed",
                url=self.graphql_url,
                status_code=response.status_code,
                response=response.text
            )
            self._record("http_error")
            raise ContentQueryError(
                f"GraphQL request failed: {response.status_code}",
                details={"status_code": response.status_code}
            )

        try:
            payload = response.json()
        except ValueError as exc:
            self._record("invalid_body")
            raise ContentQueryError("GraphQL response was not valid JSON") from exc

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            self.logger.error("GraphQL errors", errors=errors)
            self._record("graphql_error")
            first = errors[0] if isinstance(errors, list) and errors else {}
            message = first.get("message") if isinstance(first, dict) else None
            raise ContentQueryError(message or "Unknown GraphQL error", details={"errors": errors})

        self._record("ok")
        return payload.get("data") if isinstance(payload, dict) else None

    def _time(self):
        if self.metrics:
            return self.metrics.time_operation("content_query_duration_seconds")
        return nullcontext()

    def _record(self, status: str) -> None:
        if self.metrics:
            self.metrics.increment_counter("content_queries_total", status=status)
