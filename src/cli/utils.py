"""Shared CLI utilities."""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import click
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from board import (
    CategoryNotFoundError,
    Fact,
    FactStore,
    SubmissionWorkflow,
    VoteEngine,
    color_of,
    is_disputed,
)
from cli.config import service_from_config
from cli.config_models import BoardConfig

console = Console()
logger = structlog.get_logger()

EMPTY_LIST_MESSAGE = (
    "There are no facts for this category yet. How about creating the first one? 🤔"
)


@dataclass
class Board:
    """Wired-up board components for one command invocation."""

    store: FactStore
    votes: VoteEngine
    submission: SubmissionWorkflow
    errors: list[str] = field(default_factory=list)


@asynccontextmanager
async def open_board(config: BoardConfig):
    """Create the data service and the board around it; close on exit."""
    try:
        service = service_from_config(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    errors: list[str] = []

    def notify(message: str) -> None:
        errors.append(message)
        console.print(f"[red]{escape(message)}[/]")

    store = FactStore(service, notify=notify)
    try:
        yield Board(
            store=store,
            votes=VoteEngine(store),
            submission=SubmissionWorkflow(store),
            errors=errors,
        )
    finally:
        await service.close()


def run(coro):
    """Run a coroutine to completion from a sync click command."""
    return asyncio.run(coro)


def category_tag(name: str) -> str:
    """Rich markup for a category tag, coloured like the catalog."""
    try:
        color = color_of(name)
    except CategoryNotFoundError:
        logger.error("unknown_category", category=name)
        return f"[red]{escape(name)}?[/]"
    return f"[bold white on {color}] {escape(name)} [/]"


def render_facts(facts: list[Fact]) -> None:
    if not facts:
        console.print(f"[yellow]{EMPTY_LIST_MESSAGE}[/]")
        return

    table = Table(show_header=True, title="Today I Learned")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Fact", max_width=60)
    table.add_column("Category")
    table.add_column("👍", justify="right")
    table.add_column("🤯", justify="right")
    table.add_column("⛔", justify="right")

    for fact in facts:
        table.add_row(*fact_row(fact))

    console.print(table)


def fact_row(fact: Fact) -> tuple[str, ...]:
    text = escape(fact.text)
    if is_disputed(fact):
        text = f"[bold red]\\[⛔DISPUTED][/] {text}"
    text += f"\n[dim]{escape(fact.source)}[/]"
    return (
        str(fact.id),
        text,
        category_tag(fact.category),
        str(fact.votes_interesting),
        str(fact.votes_mindblowing),
        str(fact.votes_false),
    )
