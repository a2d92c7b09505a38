"""
Content models for the Site Service.

WPGraphQL returns custom post types with their ACF fields nested under a
field group (e.g. story.storyFields.storyCategory) and media under
featuredImage.node. The models here flatten those nodes into the shape the
pages consume.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


def _acf_value(value: Union[str, List[str], None]) -> str:
    """Normalize an ACF field that may come back as a select list."""
    if isinstance(value, list):
        value = value[0] if value else ""
    return value or ""


def _fields(node: Dict[str, Any], group: str) -> Dict[str, Any]:
    return node.get(group) or {}


class Image(BaseModel):
    """WordPress media image."""

    source_url: str
    alt_text: str = ""

    @classmethod
    def from_node(cls, featured_image: Optional[Dict[str, Any]]) -> Optional["Image"]:
        media = (featured_image or {}).get("node")
        if not media or not media.get("sourceUrl"):
            return None
        return cls(source_url=media["sourceUrl"], alt_text=media.get("altText") or "")


class Story(BaseModel):
    """Student story (custom post type)."""

    title: str
    slug: str
    date: str = ""
    content: str = ""
    image: Optional[Image] = None
    category: str = ""
    author_name: str = ""
    excerpt: str = ""
    featured: bool = False

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "Story":
        fields = _fields(node, "storyFields")
        return cls(
            title=node.get("title") or "",
            slug=node.get("slug") or "",
            date=node.get("date") or "",
            content=node.get("content") or "",
            image=Image.from_node(node.get("featuredImage")),
            category=_acf_value(fields.get("storyCategory")),
            author_name=fields.get("storyAuthorName") or "",
            excerpt=fields.get("storyExcerpt") or "",
            featured=bool(fields.get("storyFeatured")),
        )


class Event(BaseModel):
    """Club event (custom post type)."""

    title: str
    slug: str
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    location: str = ""
    description: str = ""

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "Event":
        fields = _fields(node, "eventFields")
        return cls(
            title=node.get("title") or "",
            slug=node.get("slug") or "",
            date=fields.get("eventDate") or "",
            start_time=fields.get("eventStartTime") or "",
            end_time=fields.get("eventEndTime") or "",
            location=fields.get("eventLocation") or "",
            description=fields.get("eventDescription") or "",
        )


class Resource(BaseModel):
    """Resource directory entry (custom post type)."""

    title: str
    slug: str
    description: str = ""
    url: str = ""
    category: str = ""
    icon: str = ""

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "Resource":
        fields = _fields(node, "resourceFields")
        return cls(
            title=node.get("title") or "",
            slug=node.get("slug") or "",
            description=fields.get("resourceDescription") or "",
            url=fields.get("resourceUrl") or "",
            category=_acf_value(fields.get("resourceCategory")),
            icon=_acf_value(fields.get("resourceIcon")),
        )


class TeamMember(BaseModel):
    """Leadership team member (custom post type)."""

    title: str
    slug: str
    image: Optional[Image] = None
    role: str = ""
    bio: str = ""

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "TeamMember":
        fields = _fields(node, "teamMemberFields")
        return cls(
            title=node.get("title") or "",
            slug=node.get("slug") or "",
            image=Image.from_node(node.get("featuredImage")),
            role=fields.get("memberRole") or "",
            bio=fields.get("memberBio") or "",
        )


class ValueCard(BaseModel):
    """Static value statement shown on the about page."""

    title: str
    description: str
    icon: str


class QuickResource(BaseModel):
    """Static quick-access resource link shown on the homepage."""

    title: str
    description: str
    icon: str
    href: str = "/resources"
