"""
Unit tests for on-demand revalidation.
"""

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_site.app.caching.page_cache import PageCache
from service_site.app.caching.query_cache import QueryCache
from service_site.app.content.service import CMS_PAGE_PATHS
from service_site.app.domain.revalidation import (
    LAYOUT_MARKER,
    TAG_TO_PATHS,
    VALID_TAGS,
    RevalidationService,
    unmapped_paths,
)
from service_site.app.main import create_app
from shared.config import get_config
from shared.errors import AuthenticationError, ValidationError


SECRET = "webhook-secret"


async def _render():
    return {"ok": True}


class TestRevalidationService:
    """Test cases for RevalidationService."""

    @pytest.fixture
    def page_cache(self):
        return PageCache()

    @pytest.fixture
    def query_cache(self):
        return QueryCache()

    @pytest.fixture
    def service(self, page_cache, query_cache):
        return RevalidationService(SECRET, page_cache, query_cache)

    @pytest.mark.parametrize("tag", ["stories", "events", "resources", "team"])
    def test_tag_returns_mapped_paths(self, service, tag):
        """Each content type revalidates exactly its mapped paths."""
        result = service.revalidate(SECRET, tag)

        assert result["revalidated"] is True
        assert result["tag"] == tag
        assert result["paths"] == TAG_TO_PATHS[tag]
        assert isinstance(result["now"], int)

    def test_all_tag_returns_layout_marker(self, service):
        result = service.revalidate(SECRET, "all")
        assert result["paths"] == [LAYOUT_MARKER]

    @pytest.mark.parametrize("tag", VALID_TAGS + ["bogus", "", None])
    def test_wrong_secret_rejected_for_any_tag(self, service, tag):
        with pytest.raises(AuthenticationError) as exc_info:
            service.revalidate("WRONG", tag)
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid secret"

    def test_missing_secret_rejected(self, service):
        with pytest.raises(AuthenticationError):
            service.revalidate(None, "stories")

    def test_unconfigured_secret_rejects_everything(self, page_cache):
        service = RevalidationService("", page_cache)
        with pytest.raises(AuthenticationError):
            service.revalidate("", "stories")
        with pytest.raises(AuthenticationError):
            service.revalidate(None, "stories")

    @pytest.mark.parametrize("tag", ["bogus", "STORIES", "", None])
    def test_invalid_tag_lists_valid_tags(self, service, tag):
        with pytest.raises(ValidationError) as exc_info:
            service.revalidate(SECRET, tag)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid tag. Use one of: stories, events, resources, team, all"

    @pytest.mark.asyncio
    async def test_tag_drops_only_mapped_pages(self, service, page_cache):
        for path in ["/", "/stories", "/resources", "/about", "/stories/breaking-barriers"]:
            await page_cache.get_or_render(path, _render)

        service.revalidate(SECRET, "stories")

        assert not page_cache.is_cached("/")
        assert not page_cache.is_cached("/stories")
        assert page_cache.is_cached("/resources")
        assert page_cache.is_cached("/about")
        assert page_cache.is_cached("/stories/breaking-barriers")

    @pytest.mark.asyncio
    async def test_all_drops_every_page_and_query(self, service, page_cache, query_cache):
        for path in ["/", "/stories", "/resources", "/about", "/contact", "/stories/x"]:
            await page_cache.get_or_render(path, _render)
        query_cache.set("query A", None, {"a": 1}, tags=["events"])

        service.revalidate(SECRET, "all")

        assert page_cache.stats()["cached_paths"] == []
        assert query_cache.get("query A") is None

    def test_tag_drops_tagged_queries(self, service, query_cache):
        query_cache.set("stories query", None, {"s": 1}, tags=["stories"])
        query_cache.set("team query", None, {"t": 1}, tags=["team"])

        service.revalidate(SECRET, "stories")

        assert query_cache.get("stories query") is None
        assert query_cache.get("team query") == {"t": 1}

    @pytest.mark.asyncio
    async def test_repeated_calls_are_idempotent(self, service, page_cache):
        await page_cache.get_or_render("/resources", _render)

        first = service.revalidate(SECRET, "resources")
        second = service.revalidate(SECRET, "resources")

        assert first["paths"] == second["paths"] == ["/resources"]
        assert not page_cache.is_cached("/resources")


class TestTagMapping:
    """Guards against the tag mapping drifting away from the site's pages."""

    def test_every_cms_page_is_covered(self):
        assert unmapped_paths(CMS_PAGE_PATHS) == []

    def test_unmapped_paths_reports_new_pages(self):
        assert unmapped_paths(["/", "/gallery"]) == ["/gallery"]


class TestRevalidateEndpoint:
    """Test cases for /api/revalidate."""

    @pytest.fixture
    def client(self):
        config = get_config("site", 8000, revalidation_secret=SECRET)
        return TestClient(create_app(config))

    def test_wrong_secret(self, client):
        response = client.post("/api/revalidate?secret=WRONG&tag=stories")
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid secret"}

    def test_invalid_tag(self, client):
        response = client.post(f"/api/revalidate?secret={SECRET}&tag=widgets")
        assert response.status_code == 400
        assert "stories, events, resources, team, all" in response.json()["message"]

    def test_missing_tag(self, client):
        response = client.post(f"/api/revalidate?secret={SECRET}")
        assert response.status_code == 400

    def test_post_success(self, client):
        response = client.post(f"/api/revalidate?secret={SECRET}&tag=stories")
        assert response.status_code == 200
        data = response.json()
        assert data["revalidated"] is True
        assert data["tag"] == "stories"
        assert data["paths"] == ["/", "/stories"]
        assert "now" in data

    def test_get_supported(self, client):
        response = client.get(f"/api/revalidate?secret={SECRET}&tag=all")
        assert response.status_code == 200
        assert response.json()["paths"] == [LAYOUT_MARKER]

    def test_revalidation_rebuilds_page(self, client):
        """A cached page is regenerated after its tag is revalidated."""
        service = client.app.state.site_service
        calls = []

        def fake_query(query, variables=None, *, tags=()):
            calls.append(query)
            return {"resources": {"nodes": []}}

        with patch.object(service.cms_client, "query", side_effect=fake_query):
            first = client.get("/pages/resources").json()
            second = client.get("/pages/resources").json()
            client.post(f"/api/revalidate?secret={SECRET}&tag=resources")
            third = client.get("/pages/resources").json()

        assert first["cached"] is False
        assert second["cached"] is True
        assert third["cached"] is False
        assert len(calls) == 2
