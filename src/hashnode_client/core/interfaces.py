"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from hashnode_client.core.entities import QueryRequest


class GraphQLTransport(ABC):
    """Interface for sending a GraphQL request over the wire."""
    
    @abstractmethod
    async def execute(
        self,
        url: str,
        request: QueryRequest,
        timeout: float,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """POST the request and return the decoded JSON body."""
        pass
