"""Fact record and derived status."""

from dataclasses import dataclass
from typing import Any, Optional, Union

from shared_types import VoteKind

FactId = Union[int, str]


@dataclass(frozen=True)
class Fact:
    """A single fact as stored by the data service."""

    id: FactId
    text: str
    source: str
    category: str
    votes_interesting: int = 0
    votes_mindblowing: int = 0
    votes_false: int = 0
    created_at: Optional[str] = None

    def votes(self, kind: VoteKind) -> int:
        return getattr(self, kind.attr)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Fact":
        """Build from a storage row (camelCase vote columns)."""
        created = record.get("created_at")
        return cls(
            id=record["id"],
            text=record["text"],
            source=record["source"],
            category=record["category"],
            votes_interesting=int(record.get(VoteKind.INTERESTING) or 0),
            votes_mindblowing=int(record.get(VoteKind.MINDBLOWING) or 0),
            votes_false=int(record.get(VoteKind.FALSE) or 0),
            created_at=str(created) if created is not None else None,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "source": self.source,
            "category": self.category,
            VoteKind.INTERESTING.value: self.votes_interesting,
            VoteKind.MINDBLOWING.value: self.votes_mindblowing,
            VoteKind.FALSE.value: self.votes_false,
            "created_at": self.created_at,
        }


def is_disputed(fact: Fact) -> bool:
    """False votes outweigh interesting + mind-blowing votes."""
    return fact.votes_interesting + fact.votes_mindblowing < fact.votes_false
