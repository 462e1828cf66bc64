"""Shared enums and types for til."""

from enum import StrEnum


class VoteKind(StrEnum):
    """Vote buttons; values are the storage column names."""

    INTERESTING = "votesInteresting"
    MINDBLOWING = "votesMindblowing"
    FALSE = "votesFalse"

    @classmethod
    def from_label(cls, label: str) -> "VoteKind":
        """Resolve a short label ("interesting") or a column name."""
        try:
            return cls[label.upper()]
        except KeyError:
            return cls(label)

    @property
    def attr(self) -> str:
        """Attribute name on Fact."""
        return f"votes_{self.name.lower()}"


class ServiceBackend(StrEnum):
    SUPABASE = "supabase"
    SQLITE = "sqlite"
