"""Tests for core entities."""

from datetime import datetime, timezone

from hashnode_client.core import (
    Comment,
    Post,
    PostDetail,
    Publication,
    QueryRequest,
    RecommendedPublication,
    Series,
    SeriesSortOrder,
    StaticPage,
    Webhook,
    WebhookEvent,
    WebhookPayload,
)


def test_post_from_dict(post_node: dict) -> None:
    """Test parsing a listed post."""
    post = Post.from_dict(post_node)
    
    assert post.id == "p1"
    assert post.slug == "hello-graphql"
    assert post.published_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert post.author.username == "ada"
    assert [tag.name for tag in post.tags] == ["python"]


def test_post_from_minimal_dict() -> None:
    """Test missing optional fields get empty defaults."""
    post = Post.from_dict({"id": "p2", "title": "Bare", "slug": "bare", "coverImage": None})
    
    assert post.excerpt == ""
    assert post.published_at is None
    assert post.read_time_in_minutes == 0
    assert post.author is None
    assert post.cover_image is None
    assert post.tags == []


def test_post_invalid_date_is_none() -> None:
    """Test a malformed timestamp does not break parsing."""
    post = Post.from_dict({"id": "p3", "title": "T", "slug": "t", "publishedAt": "yesterday"})
    
    assert post.published_at is None


def test_post_detail_from_dict(post_node: dict) -> None:
    """Test a single post keeps its body."""
    node = dict(post_node, content={"html": "<p>Hi</p>", "markdown": "Hi", "text": "Hi"})
    
    detail = PostDetail.from_dict(node)
    
    assert isinstance(detail, Post)
    assert detail.content.html == "<p>Hi</p>"
    assert detail.content.markdown == "Hi"
    assert detail.title == post_node["title"]


def test_publication_from_dict() -> None:
    """Test nested publication fields are flattened."""
    publication = Publication.from_dict({
        "id": "pub1",
        "title": "Test Blog",
        "url": "https://blog.test.dev",
        "descriptionSEO": "About things",
        "about": {"text": "Hello"},
        "ogMetaData": {"image": "https://cdn.test/og.png"},
        "author": {"name": "Ada", "username": "ada"},
    })
    
    assert publication.description_seo == "About things"
    assert publication.about == "Hello"
    assert publication.og_image == "https://cdn.test/og.png"
    assert publication.author.name == "Ada"
    assert publication.favicon is None


def test_series_sort_order() -> None:
    """Test known sort orders map to the enum and unknown ones are dropped."""
    known = Series.from_dict({"id": "s1", "name": "Deep Dive", "slug": "deep-dive", "sortOrder": "ASCENDING"})
    unknown = Series.from_dict({"id": "s2", "name": "Other", "slug": "other", "sortOrder": "RANDOM"})
    
    assert known.sort_order is SeriesSortOrder.ASCENDING
    assert unknown.sort_order is None


def test_static_page_seo_fields() -> None:
    """Test SEO metadata of a static page."""
    page = StaticPage.from_dict({
        "id": "sp1",
        "title": "About",
        "slug": "about",
        "hidden": False,
        "content": {"markdown": "# About"},
        "seo": {"title": "About us", "description": "Who we are"},
    })
    
    assert page.seo_title == "About us"
    assert page.seo_description == "Who we are"
    assert page.content.markdown == "# About"
    assert page.og_image is None


def test_comment_from_dict() -> None:
    """Test parsing a comment."""
    comment = Comment.from_dict({
        "id": "c1",
        "content": {"text": "Nice post"},
        "author": {"name": "Bob", "username": "bob"},
        "dateAdded": "2024-05-02T08:30:00Z",
        "totalReactions": 3,
    })
    
    assert comment.content.text == "Nice post"
    assert comment.date_added.day == 2
    assert comment.total_reactions == 3
    assert comment.my_total_reactions == 0


def test_recommended_publication_from_edge() -> None:
    """Test a recommendation edge keeps its follower count."""
    recommended = RecommendedPublication.from_dict({
        "node": {"id": "pub2", "title": "Friend Blog", "url": "https://friend.dev"},
        "totalFollowersGained": 12,
    })
    
    assert recommended.publication.title == "Friend Blog"
    assert recommended.total_followers_gained == 12


def test_webhook_ignores_unknown_events() -> None:
    """Test events added to the API later do not break parsing."""
    webhook = Webhook.from_dict({
        "id": "w1",
        "url": "https://example.com/hook",
        "events": ["POST_PUBLISHED", "NEWSLETTER_SENT"],
    })
    
    assert webhook.events == [WebhookEvent.POST_PUBLISHED]
    assert webhook.publication is None


def test_webhook_event_is_str() -> None:
    """Test events compare equal to their wire names."""
    assert WebhookEvent.STATIC_PAGE_UPDATED == "STATIC_PAGE_UPDATED"
    assert len(WebhookEvent) == 6


def test_webhook_payload_accessors() -> None:
    """Test post and static page accessors on the payload."""
    payload = WebhookPayload(
        event=WebhookEvent.STATIC_PAGE_PUBLISHED,
        publication={"id": "pub1"},
        timestamp="2024-05-01T10:00:00Z",
        data={"staticPage": {"id": "sp1", "slug": "about"}},
    )
    
    assert payload.post is None
    assert payload.static_page["slug"] == "about"
    assert payload.to_dict()["event"] == "STATIC_PAGE_PUBLISHED"


def test_query_request_to_json() -> None:
    """Test the request body sent to the endpoint."""
    request = QueryRequest("query { me { id } }")
    
    assert request.to_json() == {"query": "query { me { id } }", "variables": {}}
