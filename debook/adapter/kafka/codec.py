"""Wire format of interaction events.

Events travel as flat camelCase JSON:

    {"id": "...", "ownerId": "...", "actorId": "...", "postId": "...",
     "type": "comment", "content": "Nice!", "createdAt": "2025-01-04T10:00:00"}

``content`` is left out for likes.
"""

from pydantic import ValidationError

from debook.adapter.error import AdapterError
from debook.domain.model.event import InteractionEvent


class InvalidEventError(AdapterError):
    """Raised when a message payload is not a valid interaction event."""

    pass


def serialize_event(event: InteractionEvent) -> bytes:
    """Encode an event as UTF-8 JSON.

    Args:
        event: Event to encode

    Returns:
        JSON payload
    """
    return event.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


def parse_event(payload: bytes | str) -> InteractionEvent:
    """Decode an event from its JSON payload.

    Args:
        payload: Message value

    Returns:
        Decoded event

    Raises:
        InvalidEventError: If the payload is not valid JSON or misses fields
    """
    try:
        return InteractionEvent.model_validate_json(payload)
    except ValidationError as e:
        raise InvalidEventError(str(e)) from e
