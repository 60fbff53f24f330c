"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary for the current request.

    Requests normally commit when their scope closes. Flows that hand work
    to another system after writing (e.g. publishing an event) commit
    explicitly first so the write stands even if the hand-off fails.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit pending changes."""
        pass
