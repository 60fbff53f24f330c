"""Unit tests for the interaction event wire format."""

import json

import pytest

from debook.adapter.kafka import InvalidEventError, parse_event, serialize_event
from debook.domain.value import InteractionType
from tests.conftest import make_event


class TestSerializeEvent:
    """Tests for serialize_event."""

    def test_like_event_is_flat_camel_case_without_content(self):
        """Likes travel without a content key."""
        event = make_event(InteractionType.LIKE)

        data = json.loads(serialize_event(event))

        assert data == {
            "id": str(event.id),
            "ownerId": str(event.owner_id),
            "actorId": str(event.actor_id),
            "postId": str(event.post_id),
            "type": "like",
            "createdAt": "2025-01-04T10:00:00",
        }

    def test_comment_event_carries_content(self):
        """Comments carry their content."""
        event = make_event(InteractionType.COMMENT, content="Nice!")

        data = json.loads(serialize_event(event))

        assert data["type"] == "comment"
        assert data["content"] == "Nice!"


class TestParseEvent:
    """Tests for parse_event."""

    @pytest.mark.parametrize("content", [None, "Great post!"])
    def test_round_trip_reconstructs_equal_event(self, content):
        """Parsing a serialized event yields an equal event."""
        interaction_type = InteractionType.COMMENT if content else InteractionType.LIKE
        event = make_event(interaction_type, content=content)

        assert parse_event(serialize_event(event)) == event

    def test_invalid_json_raises(self):
        """Non-JSON payloads are rejected."""
        with pytest.raises(InvalidEventError):
            parse_event(b"not json")

    def test_missing_fields_raise(self):
        """Payloads missing required fields are rejected."""
        with pytest.raises(InvalidEventError):
            parse_event(b'{"id": "abc", "type": "like"}')

    def test_unknown_type_raises(self):
        """Only like and comment events exist."""
        event = make_event()
        data = json.loads(serialize_event(event))
        data["type"] = "share"

        with pytest.raises(InvalidEventError):
            parse_event(json.dumps(data))
