"""Shared test fixtures for til."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from board.errors import ServiceError  # noqa: E402
from board.models import Fact  # noqa: E402
from dataservice.base import FactService  # noqa: E402


class FakeFactService(FactService):
    """In-memory service with optional gates to hold calls in flight.

    Set ``gates[category]`` to an asyncio.Event to block select() for that
    category until the event is set. ``fail`` makes the next calls raise.
    """

    def __init__(self, facts: Optional[list[Fact]] = None):
        self.rows = list(facts or [])
        self.gates: dict[Optional[str], asyncio.Event] = {}
        self.update_gate: Optional[asyncio.Event] = None
        self.fail: set[str] = set()
        self.calls: list[tuple] = []
        self.closed = False
        self._next_id = max((int(f.id) for f in self.rows), default=0) + 1

    @property
    def name(self) -> str:
        return "fake"

    async def select(self, category=None):
        self.calls.append(("select", category))
        gate = self.gates.get(category)
        if gate is not None:
            await gate.wait()
        if "select" in self.fail:
            raise ServiceError("select failed")
        rows = [f for f in self.rows if category is None or f.category == category]
        return sorted(rows, key=lambda f: f.votes_interesting, reverse=True)

    async def insert(self, text, source, category):
        self.calls.append(("insert", text, source, category))
        if "insert" in self.fail:
            raise ServiceError("insert failed")
        fact = Fact(id=self._next_id, text=text, source=source, category=category)
        self._next_id += 1
        self.rows.append(fact)
        return fact

    async def update(self, fact_id, field, value):
        self.calls.append(("update", fact_id, field, value))
        if self.update_gate is not None:
            await self.update_gate.wait()
        if "update" in self.fail:
            raise ServiceError("update failed")
        for i, row in enumerate(self.rows):
            if row.id == fact_id:
                record = row.to_record()
                record[field.value] = value
                self.rows[i] = Fact.from_record(record)
                return self.rows[i]
        raise ServiceError(f"No fact with id {fact_id}")

    async def close(self):
        self.closed = True


@pytest.fixture
def sample_facts():
    """Facts across two categories, sorted by interesting votes."""
    return [
        Fact(
            id=3,
            text="Lisbon is the capital of Portugal",
            source="https://en.wikipedia.org/wiki/Lisbon",
            category="society",
            votes_interesting=24,
            votes_mindblowing=9,
            votes_false=0,
        ),
        Fact(
            id=7,
            text="Millennial dads spend 3 times as much time with their kids than their fathers spent with them.",
            source="https://www.mother.ly/parenting/millennial-dads-spend-more-time-with-their-kids",
            category="society",
            votes_interesting=11,
            votes_mindblowing=2,
            votes_false=0,
        ),
        Fact(
            id=1,
            text="React is being developed by Meta (formerly facebook)",
            source="https://opensource.fb.com/",
            category="technology",
            votes_interesting=8,
            votes_mindblowing=3,
            votes_false=1,
        ),
    ]


@pytest.fixture
def fake_service(sample_facts):
    return FakeFactService(sample_facts)


@pytest.fixture
def notices():
    """Collected user-facing messages."""
    return []


@pytest.fixture
def store(fake_service, notices):
    from board.store import FactStore

    return FactStore(fake_service, notify=notices.append)
