"""CLI command modules."""

from .catalog import categories, init_db
from .facts import list_facts, share, vote

__all__ = [
    "categories",
    "init_db",
    "list_facts",
    "share",
    "vote",
]
