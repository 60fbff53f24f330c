"""Request authentication.

Users are identified by the ``x-user-id`` header. There is no session or
token; any well-formed UUID v4 is accepted.
"""

import re
from uuid import UUID

from fastapi import Header, HTTPException, status

from debook.domain.value import UserId

UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def get_current_user_id(
    x_user_id: str | None = Header(default=None),
) -> UserId:
    """Resolve the caller's user ID from the ``x-user-id`` header.

    Raises:
        HTTPException: 401 if the header is missing or not a UUID v4
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="x-user-id header is required",
        )

    if not UUID_V4_PATTERN.match(x_user_id):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user ID format. Please use a valid UUID.",
        )

    return UserId(UUID(x_user_id))
