"""In-memory fact list state backed by the data service."""

from typing import TYPE_CHECKING, Callable, Optional

import structlog

from board.categories import ALL
from board.errors import LOAD_ERROR_MESSAGE, ServiceError
from board.models import Fact, FactId

if TYPE_CHECKING:
    from dataservice.base import FactService

logger = structlog.get_logger(source="fact_store")

Notifier = Callable[[str], None]


def log_notifier(message: str) -> None:
    """Default notifier when no UI is attached."""
    logger.warning("user_notice", message=message)


class FactStore:
    """Owns the current fact list, category filter and loading flag.

    Only fetch(), merge_fact() and patch_fact() write ``facts``. Each fetch
    takes a new epoch; a fetch that completes after a newer one has started
    is discarded so an old filter's results never overwrite the list.
    """

    def __init__(self, service: "FactService", notify: Optional[Notifier] = None):
        self.service = service
        self.notify = notify or log_notifier
        self.facts: list[Fact] = []
        self.current_category: str = ALL
        self.is_loading = False
        self._epoch = 0

    async def set_filter(self, category: str) -> None:
        """Select a category (or "all") and re-fetch."""
        self.current_category = category
        await self.fetch()

    async def fetch(self) -> None:
        """Replace the list with the service's facts for the current filter."""
        self._epoch += 1
        epoch = self._epoch
        category = self.current_category
        self.is_loading = True

        try:
            facts = await self.service.select(None if category == ALL else category)
        except ServiceError as e:
            if epoch != self._epoch:
                logger.debug("stale_fetch_failed", category=category, error=str(e))
                return
            self.is_loading = False
            logger.error("fetch_failed", category=category, error=str(e))
            self.notify(LOAD_ERROR_MESSAGE)
            return

        if epoch != self._epoch:
            logger.debug("stale_fetch_discarded", category=category, count=len(facts))
            return

        self.facts = list(facts)
        self.is_loading = False
        logger.info("facts_fetched", category=category, count=len(self.facts))

    def merge_fact(self, fact: Fact) -> None:
        """Prepend a newly created fact. No re-sort."""
        self.facts = [fact, *self.facts]

    def patch_fact(self, updated: Fact) -> None:
        """Swap in the updated record for the fact with the same id."""
        for i, fact in enumerate(self.facts):
            if fact.id == updated.id:
                self.facts[i] = updated

    def find(self, fact_id: FactId) -> Optional[Fact]:
        for fact in self.facts:
            if fact.id == fact_id or str(fact.id) == str(fact_id):
                return fact
        return None
