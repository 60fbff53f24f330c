"""Strongly typed identifiers for Debook domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
InteractionId = NewType("InteractionId", UUID)
NotificationId = NewType("NotificationId", UUID)
