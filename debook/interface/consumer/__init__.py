"""Event consumer entry points."""

from .handler import NotificationEventHandler

__all__ = ["NotificationEventHandler"]
