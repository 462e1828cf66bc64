"""Fixed category catalog."""

from dataclasses import dataclass

from board.errors import CategoryNotFoundError

ALL = "all"


@dataclass(frozen=True)
class Category:
    name: str
    color: str


CATEGORIES: tuple[Category, ...] = (
    Category("technology", "#3b82f6"),
    Category("science", "#16a34a"),
    Category("finance", "#ef4444"),
    Category("society", "#eab308"),
    Category("entertainment", "#db2777"),
    Category("health", "#14b8a6"),
    Category("history", "#f97316"),
    Category("news", "#8b5cf6"),
)

_BY_NAME = {c.name: c for c in CATEGORIES}


def names() -> tuple[str, ...]:
    return tuple(c.name for c in CATEGORIES)


def is_category(name: str) -> bool:
    return name in _BY_NAME


def color_of(name: str) -> str:
    """Display color for a category.

    Raises:
        CategoryNotFoundError: the name is not in the catalog, which means a
            fact references a category that no longer exists.
    """
    try:
        return _BY_NAME[name].color
    except KeyError:
        raise CategoryNotFoundError(name) from None
