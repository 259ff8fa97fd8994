"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class WebhookEvent(str, Enum):
    """Events Hashnode delivers to a registered webhook."""

    POST_PUBLISHED = "POST_PUBLISHED"
    POST_UPDATED = "POST_UPDATED"
    POST_DELETED = "POST_DELETED"
    STATIC_PAGE_PUBLISHED = "STATIC_PAGE_PUBLISHED"
    STATIC_PAGE_UPDATED = "STATIC_PAGE_UPDATED"
    STATIC_PAGE_DELETED = "STATIC_PAGE_DELETED"


class SeriesSortOrder(str, Enum):
    """Order in which a series lists its posts."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as returned by the API."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _content(node: dict) -> Optional["PostContent"]:
    raw = node.get("content")
    return PostContent.from_dict(raw) if raw else None


def _author(node: dict) -> Optional["Author"]:
    raw = node.get("author")
    return Author.from_dict(raw) if raw else None


@dataclass
class QueryRequest:
    """A GraphQL document plus its variables."""

    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


@dataclass
class Author:
    name: str
    username: str
    profile_picture: Optional[str] = None

    @classmethod
    def from_dict(cls, node: dict) -> "Author":
        return cls(
            name=node.get("name") or "",
            username=node.get("username") or "",
            profile_picture=node.get("profilePicture"),
        )


@dataclass
class Tag:
    name: str
    slug: Optional[str] = None

    @classmethod
    def from_dict(cls, node: dict) -> "Tag":
        return cls(name=node.get("name") or "", slug=node.get("slug"))


@dataclass
class CoverImage:
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, node: dict) -> "CoverImage":
        return cls(url=node.get("url"))


@dataclass
class PostContent:
    """Body of a post, page or comment in every format the API offers."""

    html: Optional[str] = None
    markdown: Optional[str] = None
    text: Optional[str] = None

    @classmethod
    def from_dict(cls, node: dict) -> "PostContent":
        return cls(
            html=node.get("html"),
            markdown=node.get("markdown"),
            text=node.get("text"),
        )


@dataclass
class PageInfo:
    has_next_page: bool = False
    end_cursor: Optional[str] = None

    @classmethod
    def from_dict(cls, node: dict) -> "PageInfo":
        return cls(
            has_next_page=bool(node.get("hasNextPage")),
            end_cursor=node.get("endCursor"),
        )


@dataclass
class Post:
    """Blog post as listed on the publication."""

    id: str
    title: str
    slug: str
    excerpt: str = ""
    published_at: Optional[datetime] = None
    read_time_in_minutes: int = 0
    author: Optional[Author] = None
    cover_image: Optional[CoverImage] = None
    tags: list[Tag] = field(default_factory=list)

    @classmethod
    def _fields(cls, node: dict) -> dict[str, Any]:
        cover = node.get("coverImage")
        return {
            "id": node.get("id") or "",
            "title": node.get("title") or "",
            "slug": node.get("slug") or "",
            "excerpt": node.get("excerpt") or "",
            "published_at": _parse_datetime(node.get("publishedAt")),
            "read_time_in_minutes": node.get("readTimeInMinutes") or 0,
            "author": _author(node),
            "cover_image": CoverImage.from_dict(cover) if cover else None,
            "tags": [Tag.from_dict(t) for t in node.get("tags") or []],
        }

    @classmethod
    def from_dict(cls, node: dict) -> "Post":
        return cls(**cls._fields(node))


@dataclass
class PostDetail(Post):
    """Single post including its body."""

    content: Optional[PostContent] = None

    @classmethod
    def from_dict(cls, node: dict) -> "PostDetail":
        return cls(**cls._fields(node), content=_content(node))


@dataclass
class Publication:
    """Publication metadata, mostly used for SEO."""

    id: str
    title: str
    url: str = ""
    display_title: Optional[str] = None
    description_seo: Optional[str] = None
    about: Optional[str] = None
    author: Optional[Author] = None
    favicon: Optional[str] = None
    og_image: Optional[str] = None

    @classmethod
    def from_dict(cls, node: dict) -> "Publication":
        return cls(
            id=node.get("id") or "",
            title=node.get("title") or "",
            url=node.get("url") or "",
            display_title=node.get("displayTitle"),
            description_seo=node.get("descriptionSEO"),
            about=(node.get("about") or {}).get("text"),
            author=_author(node),
            favicon=node.get("favicon"),
            og_image=(node.get("ogMetaData") or {}).get("image"),
        )


@dataclass
class Series:
    id: str
    name: str
    slug: str
    cuid: str = ""
    created_at: Optional[datetime] = None
    cover_image: Optional[str] = None
    description: Optional[PostContent] = None
    author: Optional[Author] = None
    sort_order: Optional[SeriesSortOrder] = None

    @classmethod
    def from_dict(cls, node: dict) -> "Series":
        description = node.get("description")
        sort_order = node.get("sortOrder")
        return cls(
            id=node.get("id") or "",
            name=node.get("name") or "",
            slug=node.get("slug") or "",
            cuid=node.get("cuid") or "",
            created_at=_parse_datetime(node.get("createdAt")),
            cover_image=node.get("coverImage"),
            description=PostContent.from_dict(description) if description else None,
            author=_author(node),
            sort_order=SeriesSortOrder(sort_order) if sort_order in SeriesSortOrder.__members__ else None,
        )


@dataclass
class StaticPage:
    id: str
    title: str
    slug: str
    content: Optional[PostContent] = None
    hidden: bool = False
    og_image: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None

    @classmethod
    def from_dict(cls, node: dict) -> "StaticPage":
        seo = node.get("seo") or {}
        return cls(
            id=node.get("id") or "",
            title=node.get("title") or "",
            slug=node.get("slug") or "",
            content=_content(node),
            hidden=bool(node.get("hidden")),
            og_image=(node.get("ogMetaData") or {}).get("image"),
            seo_title=seo.get("title"),
            seo_description=seo.get("description"),
        )


@dataclass
class Comment:
    id: str
    content: Optional[PostContent] = None
    author: Optional[Author] = None
    date_added: Optional[datetime] = None
    total_reactions: int = 0
    my_total_reactions: int = 0

    @classmethod
    def from_dict(cls, node: dict) -> "Comment":
        return cls(
            id=node.get("id") or "",
            content=_content(node),
            author=_author(node),
            date_added=_parse_datetime(node.get("dateAdded")),
            total_reactions=node.get("totalReactions") or 0,
            my_total_reactions=node.get("myTotalReactions") or 0,
        )


@dataclass
class Draft:
    """Unpublished post. Only visible with an access token."""

    id: str
    title: str
    slug: Optional[str] = None
    subtitle: Optional[str] = None
    author: Optional[Author] = None
    tags: list[Tag] = field(default_factory=list)
    cover_image: Optional[CoverImage] = None
    content: Optional[PostContent] = None
    date_updated: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, node: dict) -> "Draft":
        cover = node.get("coverImage")
        return cls(
            id=node.get("id") or "",
            title=node.get("title") or "",
            slug=node.get("slug"),
            subtitle=node.get("subtitle"),
            author=_author(node),
            tags=[Tag.from_dict(t) for t in node.get("tags") or []],
            cover_image=CoverImage.from_dict(cover) if cover else None,
            content=_content(node),
            date_updated=_parse_datetime(node.get("dateUpdated")),
            updated_at=_parse_datetime(node.get("updatedAt")),
        )


@dataclass
class RecommendedPublication:
    publication: Publication
    total_followers_gained: int = 0

    @classmethod
    def from_dict(cls, edge: dict) -> "RecommendedPublication":
        return cls(
            publication=Publication.from_dict(edge.get("node") or {}),
            total_followers_gained=edge.get("totalFollowersGained") or 0,
        )


@dataclass
class Webhook:
    """Webhook registration as returned by the management mutations."""

    id: str
    url: str = ""
    events: list[WebhookEvent] = field(default_factory=list)
    secret: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    publication: Optional[Publication] = None

    @classmethod
    def from_dict(cls, node: dict) -> "Webhook":
        publication = node.get("publication")
        return cls(
            id=node.get("id") or "",
            url=node.get("url") or "",
            events=[WebhookEvent(e) for e in node.get("events") or [] if e in WebhookEvent.__members__],
            secret=node.get("secret"),
            created_at=_parse_datetime(node.get("createdAt")),
            updated_at=_parse_datetime(node.get("updatedAt")),
            publication=Publication.from_dict(publication) if publication else None,
        )


@dataclass
class WebhookPayload:
    """Body of a webhook delivery.

    Only the top-level shape is validated. ``raw`` holds the body exactly as
    parsed, including keys this client does not know about, and is what
    ``to_dict()`` returns.
    """

    event: WebhookEvent
    publication: dict[str, Any]
    timestamp: str
    data: Any = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    def _data(self) -> dict[str, Any]:
        return self.data if isinstance(self.data, dict) else {}

    @property
    def post(self) -> Optional[dict[str, Any]]:
        return self._data().get("post")

    @property
    def static_page(self) -> Optional[dict[str, Any]]:
        return self._data().get("staticPage")

    def to_dict(self) -> dict[str, Any]:
        if self.raw:
            return dict(self.raw)

        payload: dict[str, Any] = {"event": self.event.value}
        if self.data is not None:
            payload["data"] = self.data
        payload["publication"] = self.publication
        payload["timestamp"] = self.timestamp
        return payload
