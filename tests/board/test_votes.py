"""Tests for VoteEngine."""

import asyncio

import pytest

from board.errors import GENERIC_ERROR_MESSAGE
from board.votes import VoteEngine
from shared_types import VoteKind


@pytest.mark.asyncio
class TestCastVote:
    async def test_vote_false_updates_only_that_field(self, store, fake_service):
        await store.fetch()
        engine = VoteEngine(store)
        before = {f.id: f for f in store.facts}

        updated = await engine.cast_vote(before[7], VoteKind.FALSE)

        assert updated.votes_false == 1
        assert fake_service.calls[-1] == ("update", 7, VoteKind.FALSE, 1)
        after = {f.id: f for f in store.facts}
        assert after[7].votes_false == 1
        assert after[7].votes_interesting == before[7].votes_interesting
        assert after[7].votes_mindblowing == before[7].votes_mindblowing
        assert after[3] is before[3]
        assert after[1] is before[1]

    async def test_vote_does_not_reorder(self, store):
        await store.fetch()
        engine = VoteEngine(store)
        last = store.facts[-1]

        for _ in range(30):
            last = await engine.cast_vote(last, VoteKind.INTERESTING)

        assert last.votes_interesting == 38
        assert [f.id for f in store.facts] == [3, 7, 1]

        await store.fetch()
        assert [f.id for f in store.facts] == [1, 3, 7]

    async def test_uses_server_record(self, store, fake_service):
        await store.fetch()
        engine = VoteEngine(store)
        stale = store.facts[0]

        # Another client voted meanwhile
        for i, row in enumerate(fake_service.rows):
            if row.id == stale.id:
                record = row.to_record()
                record["votesMindblowing"] = 50
                fake_service.rows[i] = type(row).from_record(record)

        updated = await engine.cast_vote(stale, VoteKind.INTERESTING)

        assert updated.votes_interesting == stale.votes_interesting + 1
        assert store.facts[0].votes_mindblowing == 50

    async def test_failure_leaves_fact_unchanged(self, store, fake_service, notices):
        await store.fetch()
        engine = VoteEngine(store)
        fact = store.facts[1]
        fake_service.fail.add("update")

        result = await engine.cast_vote(fact, VoteKind.MINDBLOWING)

        assert result is None
        assert store.facts[1] is fact
        assert notices == [GENERIC_ERROR_MESSAGE]
        assert not engine.is_busy(fact)

    async def test_duplicate_click_ignored_while_busy(self, store, fake_service):
        await store.fetch()
        engine = VoteEngine(store)
        fact = store.facts[0]
        gate = asyncio.Event()
        fake_service.update_gate = gate

        first = asyncio.create_task(engine.cast_vote(fact, VoteKind.INTERESTING))
        await asyncio.sleep(0)
        assert engine.is_busy(fact)

        second = await engine.cast_vote(fact, VoteKind.INTERESTING)
        assert second is None

        gate.set()
        updated = await first
        assert updated.votes_interesting == fact.votes_interesting + 1
        assert not engine.is_busy(fact)
        assert len([c for c in fake_service.calls if c[0] == "update"]) == 1

    async def test_other_facts_votable_concurrently(self, store, fake_service):
        await store.fetch()
        engine = VoteEngine(store)
        a, b = store.facts[0], store.facts[1]
        gate = asyncio.Event()
        fake_service.update_gate = gate

        tasks = [
            asyncio.create_task(engine.cast_vote(a, VoteKind.INTERESTING)),
            asyncio.create_task(engine.cast_vote(b, VoteKind.FALSE)),
        ]
        await asyncio.sleep(0)
        assert engine.is_busy(a) and engine.is_busy(b)

        gate.set()
        results = await asyncio.gather(*tasks)

        assert all(r is not None for r in results)
        assert store.facts[0].votes_interesting == a.votes_interesting + 1
        assert store.facts[1].votes_false == b.votes_false + 1
