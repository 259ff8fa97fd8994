"""Inbound webhook helpers: verify, parse, dispatch.

Typical use in a request handler::

    if not verify_signature(raw_body, request.headers[SIGNATURE_HEADER], secret):
        return 401
    payload = parse_payload(raw_body)
    await dispatch(payload, {WebhookEvent.POST_PUBLISHED: on_publish})

``raw_body`` must be the body exactly as received. Re-serializing a parsed
object changes the bytes and the signature will not match.
"""

import hashlib
import hmac
import inspect
import json
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from hashnode_client.core import (
    InvalidWebhookEventError,
    InvalidWebhookJSONError,
    MissingWebhookFieldsError,
    WebhookEvent,
    WebhookPayload,
)

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-hashnode-signature"

POST_EVENTS = frozenset({
    WebhookEvent.POST_PUBLISHED,
    WebhookEvent.POST_UPDATED,
    WebhookEvent.POST_DELETED,
})

STATIC_PAGE_EVENTS = frozenset({
    WebhookEvent.STATIC_PAGE_PUBLISHED,
    WebhookEvent.STATIC_PAGE_UPDATED,
    WebhookEvent.STATIC_PAGE_DELETED,
})

REQUIRED_FIELDS = ("event", "publication", "timestamp")

WebhookHandler = Callable[[WebhookPayload], Union[Awaitable[None], None]]


def _to_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def generate_signature(payload: Union[str, bytes], secret: Union[str, bytes]) -> str:
    """Return the hex HMAC-SHA256 of ``payload`` keyed by ``secret``."""
    return hmac.new(_to_bytes(secret), _to_bytes(payload), hashlib.sha256).hexdigest()


def verify_signature(
    payload: Union[str, bytes, None],
    signature: Optional[str],
    secret: Union[str, bytes, None],
) -> bool:
    """Check ``signature`` against the HMAC of the raw body.

    Never raises. Empty inputs, wrong lengths and non-hex signatures all
    yield ``False``.
    """
    if not payload or not signature or not secret:
        return False

    try:
        expected = generate_signature(payload, secret)
        return hmac.compare_digest(_to_bytes(signature), expected.encode("ascii"))
    except (TypeError, ValueError, UnicodeError) as e:
        logger.debug("Signature check failed: %s", e)
        return False


def parse_payload(payload: Union[str, bytes, Mapping[str, Any], WebhookPayload]) -> WebhookPayload:
    """Validate the top-level shape of a webhook body.

    Raises:
        InvalidWebhookJSONError: if a string body is not JSON.
        MissingWebhookFieldsError: if event, publication or timestamp is absent.
        InvalidWebhookEventError: if the event is not one of ``WebhookEvent``.
    """
    if isinstance(payload, WebhookPayload):
        return payload

    if isinstance(payload, (str, bytes)):
        try:
            data = json.loads(payload)
        except ValueError:
            raise InvalidWebhookJSONError() from None
    else:
        data = payload

    if not isinstance(data, Mapping):
        raise MissingWebhookFieldsError(list(REQUIRED_FIELDS))

    missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
    if missing:
        raise MissingWebhookFieldsError(missing)

    event = data["event"]
    if not isinstance(event, str) or event not in WebhookEvent.__members__:
        raise InvalidWebhookEventError(event)

    return WebhookPayload(
        event=WebhookEvent(event),
        publication=data["publication"],
        timestamp=data["timestamp"],
        data=data.get("data"),
        raw=dict(data),
    )


def is_post_event(event: Union[WebhookEvent, str]) -> bool:
    return event in POST_EVENTS


def is_static_page_event(event: Union[WebhookEvent, str]) -> bool:
    return event in STATIC_PAGE_EVENTS


async def dispatch(
    payload: WebhookPayload,
    handlers: Mapping[Union[WebhookEvent, str], WebhookHandler],
) -> None:
    """Run the handler registered for the payload's event.

    A missing handler is logged and ignored. Exceptions from the handler
    propagate to the caller.
    """
    handler = handlers.get(payload.event)

    if handler is None:
        logger.warning("No handler registered for event: %s", payload.event.value)
        return

    result = handler(payload)
    if inspect.isawaitable(result):
        await result
