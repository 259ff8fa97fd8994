"""Error types raised by the Hashnode client."""

from typing import Any, Optional


class HashnodeError(Exception):
    """Base class for every error raised by this package."""


class GraphQLRequestError(HashnodeError):
    """The HTTP request failed: network error, timeout or non-2xx status."""
    
    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        status_text: Optional[str] = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.status_text = status_text
        self.data = data


class GraphQLResponseError(HashnodeError):
    """The API answered with a populated ``errors`` list."""
    
    def __init__(self, messages: list[str], codes: Optional[list[str]] = None) -> None:
        super().__init__(f"GraphQL error: {', '.join(messages)}")
        self.messages = messages
        self.codes = codes or []


class MissingDataError(HashnodeError):
    """The response carried no data, or an expected field was null."""


class InvalidInputError(HashnodeError, ValueError):
    """A required argument was empty or blank."""


class WebhookValidationError(HashnodeError, ValueError):
    """Inbound webhook payload could not be accepted."""


class InvalidWebhookJSONError(WebhookValidationError):
    def __init__(self) -> None:
        super().__init__("Invalid JSON payload")


class MissingWebhookFieldsError(WebhookValidationError):
    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Missing required webhook fields: {', '.join(missing)}")
        self.missing = missing


class InvalidWebhookEventError(WebhookValidationError):
    def __init__(self, event: Any) -> None:
        super().__init__(f"Invalid webhook event: {event}")
        self.event = event
