"""GraphQL transport and query catalog."""

from hashnode_client.adapters.graphql import queries
from hashnode_client.adapters.graphql.client import GraphQLClient

__all__ = ["GraphQLClient", "queries"]
