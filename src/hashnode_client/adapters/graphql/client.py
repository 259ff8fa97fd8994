"""GraphQL transport over HTTP."""

import logging
from typing import Any, Optional

import httpx

from hashnode_client.core import GraphQLRequestError, GraphQLTransport, QueryRequest

logger = logging.getLogger(__name__)


class GraphQLClient(GraphQLTransport):
    """POST GraphQL documents with httpx and normalize every failure."""
    
    def __init__(self, user_agent: Optional[str] = None) -> None:
        self.user_agent = user_agent
    
    async def execute(
        self,
        url: str,
        request: QueryRequest,
        timeout: float,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Send ``request`` to ``url`` and return the parsed JSON body.
        
        Raises:
            GraphQLRequestError: on timeout, network failure, a non-2xx
                status or a body that is not JSON.
        """
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(
                    url,
                    json=request.to_json(),
                    headers=self._get_headers(headers),
                )
                
                if not 200 <= response.status_code < 300:
                    raise GraphQLRequestError(
                        f"HTTP {response.status_code}: {response.reason_phrase}",
                        status=response.status_code,
                        status_text=response.reason_phrase,
                        data=response.text,
                    )
                
                return response.json()
        except GraphQLRequestError:
            raise
        except httpx.TimeoutException as e:
            logger.debug("GraphQL request to %s timed out after %ss", url, timeout)
            raise GraphQLRequestError(f"Request timed out after {timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise GraphQLRequestError(str(e) or "Network request failed") from e
        except ValueError as e:
            # response.json() on a non-JSON body
            raise GraphQLRequestError(f"Invalid JSON response: {e}") from e
        except Exception as e:
            logger.debug("GraphQL request to %s failed: %r", url, e)
            raise GraphQLRequestError(str(e) or "Network request failed") from e
    
    def _get_headers(self, extra: Optional[dict[str, str]]) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        
        if extra:
            headers.update(extra)
        
        return headers
