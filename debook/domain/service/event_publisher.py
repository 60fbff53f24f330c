"""Interaction event publishing contract."""

from debook.domain.model.event import InteractionEvent


class InteractionEventPublisher:
    """Generic publisher interface for the interaction event channel.

    Implementations own a broker connection acquired in ``start`` and
    released in ``stop``; the host process drives both.
    """

    async def start(self) -> None:
        """Acquire the broker connection."""
        raise NotImplementedError

    async def stop(self) -> None:
        """Release the broker connection."""
        raise NotImplementedError

    async def publish(self, event: InteractionEvent) -> None:
        """Publish one interaction event, keyed by its post ID.

        Args:
            event: Event to publish

        Raises:
            EventPublishError: If the broker did not accept the event
        """
        raise NotImplementedError

    async def health_check(self) -> bool:
        """Report whether the broker currently accepts messages."""
        raise NotImplementedError
