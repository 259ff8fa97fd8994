"""Hashnode API operations."""

import logging
from typing import Any, Callable, Optional, TypeVar

from hashnode_client.adapters.graphql import GraphQLClient, queries
from hashnode_client.config import Settings
from hashnode_client.core import (
    Comment,
    Draft,
    GraphQLResponseError,
    GraphQLTransport,
    InvalidInputError,
    InvalidWebhookEventError,
    MissingDataError,
    Post,
    PostDetail,
    Publication,
    QueryRequest,
    RecommendedPublication,
    Series,
    StaticPage,
    Webhook,
    WebhookEvent,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _dig(data: Any, *path: str) -> Any:
    """Walk nested response fields, failing on a null or absent step."""
    current = data
    for key in path:
        if not isinstance(current, dict) or current.get(key) is None:
            raise MissingDataError(f"Missing field in response: {'.'.join(path)}")
        current = current[key]
    return current


def _nodes(connection: Any, parse: Callable[[dict], T]) -> list[T]:
    """Flatten a connection's ``edges[].node`` into parsed records."""
    if not isinstance(connection, dict):
        raise MissingDataError("Connection is missing from response")
    return [
        parse(edge["node"])
        for edge in connection.get("edges") or []
        if isinstance(edge, dict) and edge.get("node")
    ]


class HashnodeService:
    """Typed operations over the Hashnode GraphQL API.

    Most operations swallow API failures and return an empty result;
    ``get_blog_post_by_slug`` and the webhook mutations raise instead.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[GraphQLTransport] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.api_url = self.settings.api_url
        self.publication_host = self.settings.publication_host
        self.timeout = self.settings.timeout
        self.transport = transport or GraphQLClient(user_agent=self.settings.hashnode.user_agent)

    async def _execute_query(self, query: str, variables: dict[str, Any]) -> Any:
        """Send a query and return the raw GraphQL envelope."""
        logger.debug("GraphQL %s variables=%s", query.split("(")[0].strip(), variables)
        return await self.transport.execute(
            self.api_url,
            QueryRequest(query=query, variables=variables),
            timeout=self.timeout,
            headers=self._get_headers(),
        )

    def _validate_response(self, response: Any) -> dict[str, Any]:
        """Unwrap the envelope, raising when it carries errors or no data."""
        if not isinstance(response, dict):
            raise MissingDataError("No data returned from GraphQL query")

        errors = response.get("errors")
        if errors:
            messages = [str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors]
            codes = [
                e["extensions"]["code"]
                for e in errors
                if isinstance(e, dict) and isinstance(e.get("extensions"), dict) and "code" in e["extensions"]
            ]
            raise GraphQLResponseError(messages, codes)

        data = response.get("data")
        if not data:
            raise MissingDataError("No data returned from GraphQL query")

        return data

    async def _fetch(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        response = await self._execute_query(query, variables)
        return self._validate_response(response)

    def _get_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}

        if self.settings.access_token:
            # Hashnode expects the personal access token as-is, no scheme prefix
            headers["Authorization"] = self.settings.access_token

        return headers

    def _limit(self, requested: Optional[int], ceiling: Optional[int] = None) -> int:
        if requested is None:
            requested = self.settings.default_posts_count
        return min(requested, ceiling if ceiling is not None else self.settings.max_posts_per_request)

    def _page_variables(self, first: int, after: Optional[str]) -> dict[str, Any]:
        variables: dict[str, Any] = {"host": self.publication_host, "first": first}
        if after:
            variables["after"] = after
        return variables

    async def get_publication(self) -> Optional[Publication]:
        """Fetch publication details for SEO."""
        try:
            data = await self._fetch(queries.get_publication(), {"host": self.publication_host})
            publication = data.get("publication")
            return Publication.from_dict(publication) if publication else None
        except Exception as e:
            logger.warning("Failed to fetch publication %s: %s", self.publication_host, e)
            return None

    async def get_blog_posts(self, count: Optional[int] = None) -> list[Post]:
        """Fetch the latest posts, falling back to the basic field set."""
        variables = {"host": self.publication_host, "first": self._limit(count)}

        try:
            data = await self._fetch(queries.get_blog_posts(extended=True), variables)
            return _nodes(_dig(data, "publication", "posts"), Post.from_dict)
        except Exception as e:
            logger.warning("Extended posts query failed, retrying with basic fields: %s", e)

        try:
            data = await self._fetch(queries.get_blog_posts(extended=False), variables)
            return _nodes(_dig(data, "publication", "posts"), Post.from_dict)
        except Exception as e:
            logger.warning("Basic posts query failed: %s", e)
            return []

    async def get_blog_post_by_slug(self, slug: str) -> Optional[PostDetail]:
        """Fetch a single post with content.

        Tries the full field set with tags first and retries once without
        them. If both attempts fail the first error is raised.

        Raises:
            InvalidInputError: if ``slug`` is empty or blank.
            HashnodeError: if both attempts fail.
        """
        if _is_blank(slug):
            raise InvalidInputError("Invalid slug parameter")

        variables = {"host": self.publication_host, "slug": slug.strip()}

        async def attempt(extended: bool) -> Optional[PostDetail]:
            data = await self._fetch(queries.get_blog_post_by_slug(extended=extended), variables)
            post = _dig(data, "publication").get("post")
            return PostDetail.from_dict(post) if post else None

        try:
            return await attempt(extended=True)
        except Exception as error:
            logger.warning("Extended post query failed for %r, retrying with basic fields: %s", slug, error)
            try:
                return await attempt(extended=False)
            except Exception:
                raise error

    async def search_posts(self, query: str, limit: int = 10, after: Optional[str] = None) -> list[Post]:
        """Full-text search within the publication."""
        if _is_blank(query):
            return []

        variables: dict[str, Any] = {
            "first": self._limit(limit),
            "filter": {
                "publicationId": self.settings.publication_id or self.publication_host,
                "query": query.strip(),
            },
        }
        if after:
            variables["after"] = after

        try:
            data = await self._fetch(queries.search_posts(), variables)
            return _nodes(_dig(data, "searchPostsOfPublication"), Post.from_dict)
        except Exception as e:
            logger.warning("Search for %r failed: %s", query, e)
            return []

    async def get_series_list(self, limit: int = 10, after: Optional[str] = None) -> list[Series]:
        try:
            data = await self._fetch(queries.get_series_list(), self._page_variables(self._limit(limit), after))
            return _nodes(_dig(data, "publication", "seriesList"), Series.from_dict)
        except Exception as e:
            logger.warning("Failed to fetch series list: %s", e)
            return []

    async def get_series(self, slug: str) -> Optional[Series]:
        if _is_blank(slug):
            return None

        try:
            data = await self._fetch(queries.get_series(), {"host": self.publication_host, "slug": slug.strip()})
            series = _dig(data, "publication").get("series")
            return Series.from_dict(series) if series else None
        except Exception as e:
            logger.warning("Failed to fetch series %r: %s", slug, e)
            return None

    async def get_series_posts(
        self, series_slug: str, limit: int = 10, after: Optional[str] = None
    ) -> list[Post]:
        if _is_blank(series_slug):
            return []

        variables = self._page_variables(self._limit(limit), after)
        variables["seriesSlug"] = series_slug.strip()

        try:
            data = await self._fetch(queries.get_series_posts(), variables)
            return _nodes(_dig(data, "publication", "series", "posts"), Post.from_dict)
        except Exception as e:
            logger.warning("Failed to fetch posts of series %r: %s", series_slug, e)
            return []

    async def get_static_pages(self, limit: int = 10, after: Optional[str] = None) -> list[StaticPage]:
        try:
            data = await self._fetch(queries.get_static_pages(), self._page_variables(self._limit(limit), after))
            return _nodes(_dig(data, "publication", "staticPages"), StaticPage.from_dict)
        except Exception as e:
            logger.warning("Failed to fetch static pages: %s", e)
            return []

    async def get_static_page(self, slug: str) -> Optional[StaticPage]:
        if _is_blank(slug):
            return None

        try:
            data = await self._fetch(queries.get_static_page(), {"host": self.publication_host, "slug": slug.strip()})
            page = _dig(data, "publication").get("staticPage")
            return StaticPage.from_dict(page) if page else None
        except Exception as e:
            logger.warning("Failed to fetch static page %r: %s", slug, e)
            return None

    async def get_post_comments(self, post_id: str, limit: int = 20, after: Optional[str] = None) -> list[Comment]:
        if _is_blank(post_id):
            return []

        variables: dict[str, Any] = {
            "postId": post_id.strip(),
            "first": self._limit(limit, self.settings.max_comments_per_request),
        }
        if after:
            variables["after"] = after

        try:
            data = await self._fetch(queries.get_post_comments(), variables)
            return _nodes(_dig(data, "post", "comments"), Comment.from_dict)
        except Exception as e:
            logger.warning("Failed to fetch comments of post %r: %s", post_id, e)
            return []

    async def get_recommended_publications(self) -> list[RecommendedPublication]:
        try:
            data = await self._fetch(queries.get_recommended_publications(), {"host": self.publication_host})
            edges = _dig(data, "publication").get("recommendedPublications") or []
            return [RecommendedPublication.from_dict(edge) for edge in edges if isinstance(edge, dict)]
        except Exception as e:
            logger.warning("Failed to fetch recommended publications: %s", e)
            return []

    async def get_drafts(self, limit: int = 10, after: Optional[str] = None) -> list[Draft]:
        """Fetch drafts. Needs an access token."""
        try:
            data = await self._fetch(queries.get_drafts(), self._page_variables(self._limit(limit), after))
            return _nodes(_dig(data, "publication", "drafts"), Draft.from_dict)
        except Exception as e:
            logger.warning("Failed to fetch drafts: %s", e)
            return []

    # Webhook management. These need an access token and raise on failure.

    def _require_publication_id(self) -> str:
        if _is_blank(self.settings.publication_id):
            raise InvalidInputError("publication_id must be configured to manage webhooks")
        return self.settings.publication_id.strip()

    @staticmethod
    def _event_values(events: list[Any]) -> list[str]:
        if not events:
            raise InvalidInputError("At least one webhook event is required")
        values = []
        for event in events:
            try:
                values.append(WebhookEvent(event).value)
            except ValueError:
                raise InvalidWebhookEventError(event) from None
        return values

    async def create_webhook(self, url: str, events: list[Any], secret: str) -> Optional[Webhook]:
        """Register a webhook on the publication.

        Raises:
            InvalidInputError: on a blank url or secret, or no events.
            InvalidWebhookEventError: on an unknown event name.
            HashnodeError: if the mutation fails.
        """
        if _is_blank(url):
            raise InvalidInputError("Invalid webhook url")
        if _is_blank(secret):
            raise InvalidInputError("Invalid webhook secret")

        webhook_input = {
            "publicationId": self._require_publication_id(),
            "url": url.strip(),
            "events": self._event_values(events),
            "secret": secret,
        }
        data = await self._fetch(queries.create_webhook(), {"input": webhook_input})
        webhook = _dig(data, "createWebhook").get("webhook")
        return Webhook.from_dict(webhook) if webhook else None

    async def update_webhook(
        self,
        webhook_id: str,
        url: Optional[str] = None,
        events: Optional[list[Any]] = None,
        secret: Optional[str] = None,
    ) -> Optional[Webhook]:
        """Change a webhook's url, events or secret. Omitted fields are kept."""
        if _is_blank(webhook_id):
            raise InvalidInputError("Invalid webhook id")

        webhook_input: dict[str, Any] = {"id": webhook_id.strip()}
        if url is not None:
            if _is_blank(url):
                raise InvalidInputError("Invalid webhook url")
            webhook_input["url"] = url.strip()
        if events is not None:
            webhook_input["events"] = self._event_values(events)
        if secret is not None:
            webhook_input["secret"] = secret

        data = await self._fetch(queries.update_webhook(), {"input": webhook_input})
        webhook = _dig(data, "updateWebhook").get("webhook")
        return Webhook.from_dict(webhook) if webhook else None

    async def delete_webhook(self, webhook_id: str) -> Optional[Webhook]:
        if _is_blank(webhook_id):
            raise InvalidInputError("Invalid webhook id")

        data = await self._fetch(queries.delete_webhook(), {"id": webhook_id.strip()})
        webhook = _dig(data, "deleteWebhook").get("webhook")
        return Webhook.from_dict(webhook) if webhook else None

    async def trigger_webhook_test(self, webhook_id: str) -> Optional[Webhook]:
        """Ask Hashnode to send a test delivery to the webhook."""
        if _is_blank(webhook_id):
            raise InvalidInputError("Invalid webhook id")

        data = await self._fetch(queries.trigger_webhook_test(), {"input": {"webhookId": webhook_id.strip()}})
        webhook = _dig(data, "triggerWebhookTest").get("webhook")
        return Webhook.from_dict(webhook) if webhook else None
