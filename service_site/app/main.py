"""
Site service for the club website.
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Query, Request

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.errors import ErrorResponse, ValidationError

from .adapters.cms_client import CMSClient
from .adapters.contact_form_client import ContactFormClient
from .caching.page_cache import PageCache
from .caching.query_cache import QueryCache
from .content.service import (
    CMS_PAGE_PATHS,
    STATIC_PAGE_PATHS,
    ContentService,
    filter_resources,
    filter_stories,
    story_path,
)
from .domain.contact import ContactRelay
from .domain.revalidation import RevalidationService, unmapped_paths


class SiteService(BaseService):
    """Site service implementation."""

    def __init__(self, config: Optional[ServiceConfig] = None):
        super().__init__("site", 8000, config=config)
        ttl = self.config.content_cache_ttl

        self.query_cache = QueryCache(ttl, metrics=self.metrics)
        self.page_cache = PageCache(ttl, metrics=self.metrics)
        self.cms_client = CMSClient(
            self.config.wordpress_graphql_url,
            self.query_cache,
            metrics=self.metrics,
            timeout=self.config.http_timeout,
        )
        self.content_service = ContentService(self.cms_client)
        self.revalidation_service = RevalidationService(
            self.config.revalidation_secret,
            self.page_cache,
            self.query_cache,
            metrics=self.metrics,
        )
        self.contact_form_client = ContactFormClient(
            self.config.wordpress_base_url(),
            timeout=self.config.http_timeout,
        )
        self.contact_relay = ContactRelay(
            self.contact_form_client,
            self.config.cf7_form_id,
            metrics=self.metrics,
        )

        drift = unmapped_paths(CMS_PAGE_PATHS)
        if drift:
            self.logger.warning("Pages not covered by any revalidation tag", paths=drift)

        self._setup_site_routes()
        self._setup_page_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.site_service = self

    async def _render_page(
        self,
        path: str,
        render: Callable[[], Awaitable[Dict[str, Any]]],
    ) -> Dict[str, Any]:
        """Serve a page payload through the page cache."""
        payload, entry, cached = await self.page_cache.get_or_render(path, render)
        return {
            "path": path,
            "cached": cached,
            "generated_at": entry.generated_at,
            "page": payload,
        }

    def _setup_site_routes(self):
        """Set up webhook, contact, and cache routes."""

        error_responses = {
            400: {"model": ErrorResponse},
            401: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        }

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "site",
                "message": "Club website - Site Service",
                "version": "1.0.0",
                "pages": CMS_PAGE_PATHS + STATIC_PAGE_PATHS,
            }

        @self.app.api_route("/api/revalidate", methods=["GET", "POST"], responses=error_responses)
        async def revalidate(
            secret: Optional[str] = Query(None),
            tag: Optional[str] = Query(None),
        ):
            """Invalidate cached pages for a content type (CMS webhook)."""
            return self.revalidation_service.revalidate(secret, tag)

        @self.app.post("/api/contact", responses=error_responses)
        async def contact(request: Request):
            """Relay a contact-form submission to Contact Form 7."""
            try:
                body = await request.json()
            except ValueError:
                raise ValidationError("Invalid request body") from None
            return await self.contact_relay.submit(body)

        @self.app.get("/api/cache/stats")
        async def cache_stats():
            """Page and query cache statistics."""
            return {
                "pages": self.page_cache.stats(),
                "queries": self.query_cache.stats(),
            }

    def _setup_page_routes(self):
        """Set up page content routes."""

        content = self.content_service

        @self.app.get("/pages/home")
        async def home_page():
            """Homepage content."""
            return await self._render_page("/", content.home_page)

        @self.app.get("/pages/stories")
        async def stories_page(category: Optional[str] = Query(None)):
            """Story listing, optionally filtered by category."""
            result = await self._render_page("/stories", content.stories_page)
            if category:
                page = dict(result["page"])
                page["stories"] = filter_stories(page["stories"], category)
                page["active_category"] = category
                result["page"] = page
            return result

        @self.app.get("/pages/stories/{slug}", responses={404: {"model": ErrorResponse}})
        async def story_page(slug: str):
            """Single story by slug."""
            return await self._render_page(story_path(slug), lambda: content.story_page(slug))

        @self.app.get("/pages/resources")
        async def resources_page(category: Optional[str] = Query(None)):
            """Resource directory, optionally filtered by tab."""
            result = await self._render_page("/resources", content.resources_page)
            if category:
                page = dict(result["page"])
                page["resources"] = filter_resources(page["resources"], category)
                page["active_tab"] = category
                result["page"] = page
            return result

        @self.app.get("/pages/about")
        async def about_page():
            """About page content."""
            return await self._render_page("/about", content.about_page)

        @self.app.get("/pages/contact")
        async def contact_page():
            """Contact page content."""
            return await self._render_page("/contact", content.contact_page)

    async def _check_dependencies(self) -> Dict[str, str]:
        """Report which external integrations are configured."""
        return {
            "cms": "configured" if self.config.wordpress_graphql_url else "not_configured",
            "revalidation_secret": "configured" if self.config.revalidation_secret else "not_configured",
            "contact_form": "configured" if self.config.cf7_form_id else "not_configured",
        }


def create_app(config: Optional[ServiceConfig] = None):
    """Create FastAPI application."""
    service = SiteService(config)
    return service.app


if __name__ == "__main__":
    service = SiteService()
    service.run()
