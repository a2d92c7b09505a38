"""
Unit tests for the page cache.
"""

import pytest
from unittest.mock import AsyncMock

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_site.app.caching.page_cache import PageCache


class FakeClock:
    """Controllable monotonic clock."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestPageCache:
    """Test cases for PageCache."""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def page_cache(self, clock):
        return PageCache(60, clock=clock)

    @pytest.mark.asyncio
    async def test_renders_once_within_ttl(self, page_cache, clock):
        render = AsyncMock(return_value={"title": "Home"})

        first, _, first_cached = await page_cache.get_or_render("/", render)
        clock.now += 30
        second, _, second_cached = await page_cache.get_or_render("/", render)

        assert first == second == {"title": "Home"}
        assert first_cached is False
        assert second_cached is True
        render.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_regenerates_after_ttl(self, page_cache, clock):
        render = AsyncMock(side_effect=[{"v": 1}, {"v": 2}])

        await page_cache.get_or_render("/about", render)
        clock.now += 61
        payload, _, cached = await page_cache.get_or_render("/about", render)

        assert payload == {"v": 2}
        assert cached is False

    @pytest.mark.asyncio
    async def test_render_failure_not_cached(self, page_cache):
        render = AsyncMock(side_effect=[RuntimeError("boom"), {"v": 1}])

        with pytest.raises(RuntimeError):
            await page_cache.get_or_render("/stories/missing", render)
        payload, _, _ = await page_cache.get_or_render("/stories/missing", render)

        assert payload == {"v": 1}

    @pytest.mark.asyncio
    async def test_page_revalidation_is_exact(self, page_cache):
        render = AsyncMock(return_value={})
        for path in ["/stories", "/stories/a", "/stories/b"]:
            await page_cache.get_or_render(path, render)

        dropped = page_cache.revalidate_path("/stories")

        assert dropped == ["/stories"]
        assert page_cache.is_cached("/stories/a")
        assert page_cache.is_cached("/stories/b")

    @pytest.mark.asyncio
    async def test_layout_revalidation_covers_subtree(self, page_cache):
        render = AsyncMock(return_value={})
        for path in ["/stories", "/stories/a", "/about"]:
            await page_cache.get_or_render(path, render)

        dropped = page_cache.revalidate_path("/stories", "layout")

        assert sorted(dropped) == ["/stories", "/stories/a"]
        assert page_cache.is_cached("/about")

    @pytest.mark.asyncio
    async def test_root_layout_revalidation_covers_site(self, page_cache):
        render = AsyncMock(return_value={})
        for path in ["/", "/stories", "/stories/a", "/about", "/contact"]:
            await page_cache.get_or_render(path, render)

        page_cache.revalidate_path("/", "layout")

        assert page_cache.stats()["cached_paths"] == []

    def test_revalidating_uncached_path(self, page_cache):
        assert page_cache.revalidate_path("/resources") == []

    def test_unknown_type_rejected(self, page_cache):
        with pytest.raises(ValueError):
            page_cache.revalidate_path("/", "tag")

    @pytest.mark.asyncio
    async def test_stats(self, page_cache):
        render = AsyncMock(return_value={})
        await page_cache.get_or_render("/", render)
        await page_cache.get_or_render("/", render)

        stats = page_cache.stats()

        assert stats["cached_paths"] == ["/"]
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_ratio"] == 0.5
