"""Unit tests for x-user-id authentication."""

from uuid import UUID

import pytest
from fastapi import HTTPException

from debook.interface.api.auth import get_current_user_id

VALID_USER_ID = "123e4567-e89b-42d3-a456-426614174000"


class TestGetCurrentUserId:
    """Tests for get_current_user_id."""

    def test_valid_uuid_v4(self):
        """A UUID v4 header resolves to the user ID."""
        assert get_current_user_id(VALID_USER_ID) == UUID(VALID_USER_ID)

    def test_uppercase_uuid_is_accepted(self):
        """Matching is case insensitive."""
        assert get_current_user_id(VALID_USER_ID.upper()) == UUID(VALID_USER_ID)

    @pytest.mark.parametrize("header", [None, ""])
    def test_missing_header(self, header):
        """A missing header is rejected with 401."""
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id(header)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "x-user-id header is required"

    @pytest.mark.parametrize(
        "header",
        [
            "not-a-uuid",
            "123e4567-e89b-12d3-a456-426614174000",  # version 1
            "123e4567-e89b-42d3-7456-426614174000",  # bad variant
            "123e4567e89b42d3a456426614174000",  # no dashes
        ],
    )
    def test_malformed_header(self, header):
        """Anything but a UUID v4 is rejected with 401."""
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id(header)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid user ID format. Please use a valid UUID."
