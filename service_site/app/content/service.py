"""
Page content assembly for the Site Service.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel

from shared.errors import ContentQueryError, NotFoundError
from shared.logging import get_logger

from ..adapters.cms_client import CMSClient
from . import placeholders, queries
from .models import Event, Resource, Story, TeamMember

T = TypeVar("T", bound=BaseModel)

CMS = "cms"
PLACEHOLDER = "placeholder"

STORY_CATEGORIES = ["All", "Inspiration", "Resources", "Tips", "Community"]
RESOURCE_TABS = ["All Resources", "On-Campus", "Community", "Vocational"]

# Site paths whose payload depends on CMS content
CMS_PAGE_PATHS = ["/", "/stories", "/resources", "/about"]
STATIC_PAGE_PATHS = ["/contact"]


def story_path(slug: str) -> str:
    return f"/stories/{slug}"


def filter_stories(stories: List[Dict[str, Any]], category: Optional[str]) -> List[Dict[str, Any]]:
    """Filter serialized stories by category; "All" or no category keeps everything."""
    if not category or category == "All":
        return stories
    return [story for story in stories if story.get("category") == category]


def filter_resources(resources: List[Dict[str, Any]], category: Optional[str]) -> List[Dict[str, Any]]:
    """Filter serialized resources by tab label, matching the stored category case-insensitively."""
    if not category or category == "All Resources":
        return resources
    wanted = category.lower()
    return [resource for resource in resources if (resource.get("category") or "").lower() == wanted]


class ContentService:
    """Builds page payloads from CMS content, falling back to bundled placeholders."""

    def __init__(self, cms_client: CMSClient):
        self.cms_client = cms_client
        self.logger = get_logger("site.content")

    async def _fetch_nodes(
        self,
        query: str,
        root: str,
        factory: Callable[[Dict[str, Any]], T],
        tag: str,
    ) -> Optional[List[T]]:
        """Fetch a node list, returning None when the CMS query fails or is malformed."""
        try:
            data = await self.cms_client.query(query, tags=[tag])
            nodes = data[root]["nodes"]
            return [factory(node) for node in nodes]
        except ContentQueryError as exc:
            self.logger.warning("Content unavailable, using placeholders", root=root, error=exc.message)
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            self.logger.warning("Malformed content response, using placeholders", root=root, error=str(exc))
        return None

    def _with_fallback(self, fetched: Optional[List[T]], fallback: Sequence[T]) -> Tuple[List[Dict[str, Any]], str]:
        if fetched:
            return [item.model_dump() for item in fetched], CMS
        return [item.model_dump() for item in fallback], PLACEHOLDER

    async def home_page(self) -> Dict[str, Any]:
        """Hero, featured story, quick resources, recent stories and upcoming events."""
        featured = await self._fetch_nodes(queries.GET_FEATURED_STORY, "allStory", Story.from_node, "stories")
        recent = await self._fetch_nodes(queries.GET_RECENT_STORIES, "allStory", Story.from_node, "stories")
        events = await self._fetch_nodes(queries.GET_ALL_EVENTS, "events", Event.from_node, "events")

        if featured:
            featured_story, featured_source = featured[0].model_dump(), CMS
        else:
            featured_story, featured_source = placeholders.LISTING_STORIES[0].model_dump(), PLACEHOLDER

        recent_stories, recent_source = self._with_fallback(recent, placeholders.HOME_STORIES)
        display_events, events_source = self._with_fallback(events, placeholders.EVENTS)

        return {
            "hero": {"title": placeholders.SITE_NAME, "mission": placeholders.MISSION},
            "featured_story": featured_story,
            "quick_resources": [item.model_dump() for item in placeholders.QUICK_RESOURCES],
            "recent_stories": recent_stories,
            "events": display_events,
            "sources": {
                "featured_story": featured_source,
                "recent_stories": recent_source,
                "events": events_source,
            },
        }

    async def stories_page(self) -> Dict[str, Any]:
        """All stories with the category sidebar."""
        stories = await self._fetch_nodes(queries.GET_ALL_STORIES, "allStory", Story.from_node, "stories")
        display_stories, source = self._with_fallback(stories, placeholders.LISTING_STORIES)

        return {
            "hero": {
                "title": "Student Stories",
                "subtitle": "Real experiences from our community members sharing their journeys and insights.",
            },
            "categories": STORY_CATEGORIES,
            "stories": display_stories,
            "sources": {"stories": source},
        }

    async def story_page(self, slug: str) -> Dict[str, Any]:
        """A single story; raises NotFoundError when the CMS has none for slug."""
        story: Optional[Story] = None
        try:
            data = await self.cms_client.query(queries.GET_STORY_BY_SLUG, {"slug": slug}, tags=["stories"])
            node = (data or {}).get("story")
            if node:
                story = Story.from_node(node)
        except ContentQueryError as exc:
            self.logger.warning("Story unavailable", slug=slug, error=exc.message)

        if story is None:
            raise NotFoundError("Story not found", details={"slug": slug})

        return {"story": story.model_dump(), "sources": {"story": CMS}}

    async def resources_page(self) -> Dict[str, Any]:
        """Resource directory with its filter tabs."""
        resources = await self._fetch_nodes(queries.GET_ALL_RESOURCES, "resources", Resource.from_node, "resources")
        display_resources, source = self._with_fallback(resources, placeholders.RESOURCES)

        return {
            "hero": {
                "title": "Resources",
                "subtitle": "On-campus, community, and vocational support for students with disabilities.",
            },
            "tabs": RESOURCE_TABS,
            "resources": display_resources,
            "sources": {"resources": source},
        }

    async def about_page(self) -> Dict[str, Any]:
        """Values grid and leadership team."""
        members = await self._fetch_nodes(queries.GET_TEAM_MEMBERS, "teamMembers", TeamMember.from_node, "team")
        display_members, source = self._with_fallback(members, placeholders.TEAM_MEMBERS)

        return {
            "hero": {
                "title": "About Us",
                "subtitle": (
                    "Learn more about our mission, values, and the dedicated team making a "
                    "difference at Gulf Coast State College."
                ),
            },
            "values": [item.model_dump() for item in placeholders.VALUES],
            "team_members": display_members,
            "sources": {"team_members": source},
        }

    async def contact_page(self) -> Dict[str, Any]:
        """Static contact details."""
        return {
            "hero": {
                "title": "Contact Us",
                "subtitle": "Have questions? Want to get involved? We'd love to hear from you.",
            },
            "contact": dict(placeholders.CONTACT_DETAILS),
            "form": {"endpoint": "/api/contact", "fields": ["name", "email", "message"]},
        }
