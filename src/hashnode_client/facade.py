"""Convenience functions that never raise.

Every function takes an explicitly constructed ``HashnodeService`` and
returns an empty list or ``None`` instead of propagating an error, which
is what page-rendering code usually wants.
"""

import logging
from typing import Any, Awaitable, Optional, TypeVar

from hashnode_client.core import (
    Comment,
    Draft,
    Post,
    PostDetail,
    Publication,
    RecommendedPublication,
    Series,
    StaticPage,
    Webhook,
)
from hashnode_client.service import HashnodeService

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def or_default(call: Awaitable[T], default: T) -> T:
    """Await ``call`` and return ``default`` if it raises anything."""
    try:
        return await call
    except Exception as e:
        logger.warning("Hashnode call failed, using default: %s: %s", type(e).__name__, e)
        return default


async def get_publication(service: HashnodeService) -> Optional[Publication]:
    return await or_default(service.get_publication(), None)


async def get_blog_posts(service: HashnodeService, count: Optional[int] = None) -> list[Post]:
    return await or_default(service.get_blog_posts(count), [])


async def get_blog_post_by_slug(service: HashnodeService, slug: str) -> Optional[PostDetail]:
    return await or_default(service.get_blog_post_by_slug(slug), None)


async def search_posts(
    service: HashnodeService, query: str, limit: int = 10, after: Optional[str] = None
) -> list[Post]:
    return await or_default(service.search_posts(query, limit, after), [])


async def get_series_list(
    service: HashnodeService, limit: int = 10, after: Optional[str] = None
) -> list[Series]:
    return await or_default(service.get_series_list(limit, after), [])


async def get_series(service: HashnodeService, slug: str) -> Optional[Series]:
    return await or_default(service.get_series(slug), None)


async def get_series_posts(
    service: HashnodeService, series_slug: str, limit: int = 10, after: Optional[str] = None
) -> list[Post]:
    return await or_default(service.get_series_posts(series_slug, limit, after), [])


async def get_static_pages(
    service: HashnodeService, limit: int = 10, after: Optional[str] = None
) -> list[StaticPage]:
    return await or_default(service.get_static_pages(limit, after), [])


async def get_static_page(service: HashnodeService, slug: str) -> Optional[StaticPage]:
    return await or_default(service.get_static_page(slug), None)


async def get_post_comments(
    service: HashnodeService, post_id: str, limit: int = 20, after: Optional[str] = None
) -> list[Comment]:
    return await or_default(service.get_post_comments(post_id, limit, after), [])


async def get_recommended_publications(service: HashnodeService) -> list[RecommendedPublication]:
    return await or_default(service.get_recommended_publications(), [])


async def get_drafts(service: HashnodeService, limit: int = 10, after: Optional[str] = None) -> list[Draft]:
    return await or_default(service.get_drafts(limit, after), [])


async def create_webhook(
    service: HashnodeService, url: str, events: list[Any], secret: str
) -> Optional[Webhook]:
    return await or_default(service.create_webhook(url, events, secret), None)


async def update_webhook(
    service: HashnodeService,
    webhook_id: str,
    url: Optional[str] = None,
    events: Optional[list[Any]] = None,
    secret: Optional[str] = None,
) -> Optional[Webhook]:
    return await or_default(service.update_webhook(webhook_id, url, events, secret), None)


async def delete_webhook(service: HashnodeService, webhook_id: str) -> Optional[Webhook]:
    return await or_default(service.delete_webhook(webhook_id), None)


async def trigger_webhook_test(service: HashnodeService, webhook_id: str) -> Optional[Webhook]:
    return await or_default(service.trigger_webhook_test(webhook_id), None)
