"""Typed async client for the Hashnode GraphQL API."""

from hashnode_client import facade
from hashnode_client.adapters.graphql import GraphQLClient
from hashnode_client.config import HashnodeConfig, Settings, get_settings
from hashnode_client.core import (
    HashnodeError,
    InvalidInputError,
    WebhookEvent,
    WebhookPayload,
    WebhookValidationError,
)
from hashnode_client.service import HashnodeService
from hashnode_client.webhooks import (
    SIGNATURE_HEADER,
    dispatch,
    generate_signature,
    is_post_event,
    is_static_page_event,
    parse_payload,
    verify_signature,
)

__version__ = "0.1.0"

__all__ = [
    "facade",
    "GraphQLClient",
    "HashnodeConfig",
    "Settings",
    "get_settings",
    "HashnodeError",
    "InvalidInputError",
    "WebhookEvent",
    "WebhookPayload",
    "WebhookValidationError",
    "HashnodeService",
    "SIGNATURE_HEADER",
    "dispatch",
    "generate_signature",
    "is_post_event",
    "is_static_page_event",
    "parse_payload",
    "verify_signature",
]
