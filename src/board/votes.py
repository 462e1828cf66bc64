"""Voting on facts."""

from typing import Optional

import structlog

from board.errors import GENERIC_ERROR_MESSAGE, ServiceError
from board.models import Fact, FactId, is_disputed
from board.store import FactStore
from shared_types import VoteKind

logger = structlog.get_logger(source="vote_engine")

__all__ = ["VoteEngine", "is_disputed"]


class VoteEngine:
    """Casts votes with a busy flag per fact.

    Votes on different facts run concurrently; a second click on a fact
    whose vote is still in flight is ignored.
    """

    def __init__(self, store: FactStore):
        self.store = store
        self._busy: set[FactId] = set()

    def is_busy(self, fact: Fact) -> bool:
        return fact.id in self._busy

    async def cast_vote(self, fact: Fact, kind: VoteKind) -> Optional[Fact]:
        """Increment one vote column; returns the server's record or None."""
        if fact.id in self._busy:
            logger.debug("vote_ignored_busy", fact_id=fact.id, kind=kind.value)
            return None

        self._busy.add(fact.id)
        try:
            updated = await self.store.service.update(fact.id, kind, fact.votes(kind) + 1)
        except ServiceError as e:
            logger.error("vote_failed", fact_id=fact.id, kind=kind.value, error=str(e))
            self.store.notify(GENERIC_ERROR_MESSAGE)
            return None
        finally:
            self._busy.discard(fact.id)

        self.store.patch_fact(updated)
        logger.info("vote_cast", fact_id=fact.id, kind=kind.value, count=updated.votes(kind))
        return updated
