"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class EventPublishError(AdapterError):
    """Raised when an event could not be delivered to the broker."""

    pass
