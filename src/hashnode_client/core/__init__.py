"""Core domain layer."""

from hashnode_client.core.entities import (
    Author,
    Comment,
    CoverImage,
    Draft,
    PageInfo,
    Post,
    PostContent,
    PostDetail,
    Publication,
    QueryRequest,
    RecommendedPublication,
    Series,
    SeriesSortOrder,
    StaticPage,
    Tag,
    Webhook,
    WebhookEvent,
    WebhookPayload,
)
from hashnode_client.core.errors import (
    GraphQLRequestError,
    GraphQLResponseError,
    HashnodeError,
    InvalidInputError,
    InvalidWebhookEventError,
    InvalidWebhookJSONError,
    MissingDataError,
    MissingWebhookFieldsError,
    WebhookValidationError,
)
from hashnode_client.core.interfaces import GraphQLTransport

__all__ = [
    "Author",
    "Comment",
    "CoverImage",
    "Draft",
    "PageInfo",
    "Post",
    "PostContent",
    "PostDetail",
    "Publication",
    "QueryRequest",
    "RecommendedPublication",
    "Series",
    "SeriesSortOrder",
    "StaticPage",
    "Tag",
    "Webhook",
    "WebhookEvent",
    "WebhookPayload",
    "GraphQLTransport",
    "HashnodeError",
    "GraphQLRequestError",
    "GraphQLResponseError",
    "MissingDataError",
    "InvalidInputError",
    "WebhookValidationError",
    "InvalidWebhookJSONError",
    "MissingWebhookFieldsError",
    "InvalidWebhookEventError",
]
