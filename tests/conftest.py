"""Shared fixtures for service and facade tests."""

from typing import Any, Optional
from unittest.mock import AsyncMock

import pytest

from hashnode_client.config import HashnodeConfig, Settings
from hashnode_client.service import HashnodeService


def envelope(data: Optional[dict] = None, errors: Optional[list] = None) -> dict[str, Any]:
    """Build a GraphQL response envelope."""
    response: dict[str, Any] = {}
    if data is not None:
        response["data"] = data
    if errors is not None:
        response["errors"] = errors
    return response


def connection(*nodes: dict) -> dict[str, Any]:
    """Build a connection from nodes."""
    return {
        "edges": [{"node": node, "cursor": f"c{i}"} for i, node in enumerate(nodes)],
        "pageInfo": {"hasNextPage": False, "endCursor": None},
    }


@pytest.fixture
def post_node() -> dict[str, Any]:
    """Create a raw post node as returned by the API."""
    return {
        "id": "p1",
        "title": "Hello GraphQL",
        "excerpt": "A short brief",
        "slug": "hello-graphql",
        "coverImage": {"url": "https://cdn.hashnode.com/cover.png"},
        "publishedAt": "2024-05-01T10:00:00.000Z",
        "readTimeInMinutes": 4,
        "author": {"name": "Ada Lovelace", "username": "ada", "profilePicture": None},
        "tags": [{"name": "python", "slug": "python"}],
    }


@pytest.fixture
def settings() -> Settings:
    """Create settings pointing at a test publication."""
    return Settings(
        hashnode=HashnodeConfig(
            api_url="https://gql.test",
            publication_host="blog.test.dev",
            timeout=2.0,
        )
    )


@pytest.fixture
def transport() -> AsyncMock:
    """Create a mock transport."""
    return AsyncMock()


@pytest.fixture
def service(settings: Settings, transport: AsyncMock) -> HashnodeService:
    """Create a service wired to the mock transport."""
    return HashnodeService(settings, transport=transport)
