"""Share-a-fact form and submission."""

from dataclasses import dataclass
from typing import Optional

import structlog

from board.errors import GENERIC_ERROR_MESSAGE, ServiceError
from board.models import Fact
from board.store import FactStore
from board.validation import MAX_FACT_LENGTH, is_valid_fact_input

logger = structlog.get_logger(source="submission")


@dataclass
class FactForm:
    """Form fields plus the upload busy flag and visibility."""

    text: str = ""
    source: str = ""
    category: str = ""
    is_uploading: bool = False
    is_open: bool = False

    @property
    def remaining_chars(self) -> int:
        return MAX_FACT_LENGTH - len(self.text)

    def toggle(self) -> bool:
        """Open or close the form; returns the new visibility."""
        self.is_open = not self.is_open
        return self.is_open

    def clear(self) -> None:
        self.text = ""
        self.source = ""
        self.category = ""


class SubmissionWorkflow:
    """Validates form input, inserts it and merges the result into the store."""

    def __init__(self, store: FactStore, form: Optional[FactForm] = None):
        self.store = store
        self.form = form or FactForm()

    async def submit(self, text: str, source: str, category: str) -> Optional[Fact]:
        """Post a new fact.

        Invalid input is a silent no-op. On success the server's record is
        prepended to the store, the fields are cleared and the form closes.
        On failure the form is left as it was so the user can retry.
        """
        form = self.form
        if form.is_uploading:
            return None

        form.text, form.source, form.category = text, source, category
        if not is_valid_fact_input(text, source, category):
            logger.debug("submission_rejected", length=len(text or ""), category=category)
            return None

        form.is_uploading = True
        try:
            fact = await self.store.service.insert(text, source, category)
        except ServiceError as e:
            logger.error("submission_failed", category=category, error=str(e))
            self.store.notify(GENERIC_ERROR_MESSAGE)
            return None
        finally:
            form.is_uploading = False

        self.store.merge_fact(fact)
        form.clear()
        form.is_open = False
        logger.info("fact_submitted", fact_id=fact.id, category=fact.category)
        return fact
