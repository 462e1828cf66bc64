"""Abstract data service consumed by the board."""

from abc import ABC, abstractmethod
from typing import Optional

from board.models import Fact, FactId
from shared_types import VoteKind


class FactService(ABC):
    """Remote storage for facts.

    Implementations raise board.errors.ServiceError for every failure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier for logging."""
        ...

    @abstractmethod
    async def select(self, category: Optional[str] = None) -> list[Fact]:
        """Facts in ``category`` (all when None), votesInteresting descending."""
        ...

    @abstractmethod
    async def insert(self, text: str, source: str, category: str) -> Fact:
        """Create a fact; storage assigns the id and zeroes the counters."""
        ...

    @abstractmethod
    async def update(self, fact_id: FactId, field: VoteKind, value: int) -> Fact:
        """Set one vote column and return the full updated record."""
        ...

    async def close(self) -> None:
        """Release connections."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
