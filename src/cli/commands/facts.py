"""Fact list, voting and sharing commands."""

import click
from rich.markup import escape

from board import ALL, MAX_FACT_LENGTH, is_disputed, is_valid_fact_input, is_valid_url
from board.categories import is_category, names
from cli.utils import console, open_board, render_facts, run
from shared_types import VoteKind

_FILTER_CHOICES = [ALL, *names()]
_VOTE_CHOICES = [k.name.lower() for k in VoteKind]


@click.command("list")
@click.option(
    "-c", "--category", type=click.Choice(_FILTER_CHOICES), default=ALL, help="Category filter"
)
@click.pass_context
def list_facts(ctx: click.Context, category: str):
    """Show facts, most interesting first."""

    async def _run():
        async with open_board(ctx.obj["config"]) as board:
            with console.status("Loading..."):
                await board.store.set_filter(category)
            if board.errors:
                return False
            render_facts(board.store.facts)
            return True

    if not run(_run()):
        ctx.exit(1)


@click.command()
@click.argument("fact_id")
@click.argument("kind", type=click.Choice(_VOTE_CHOICES))
@click.option(
    "-c",
    "--category",
    type=click.Choice(_FILTER_CHOICES),
    default=ALL,
    help="Category to load the fact from",
)
@click.pass_context
def vote(ctx: click.Context, fact_id: str, kind: str, category: str):
    """Vote a fact interesting, mindblowing or false."""
    vote_kind = VoteKind.from_label(kind)

    async def _run():
        async with open_board(ctx.obj["config"]) as board:
            await board.store.set_filter(category)
            if board.errors:
                return False

            fact = board.store.find(fact_id)
            if fact is None:
                console.print(f"[yellow]No fact with id {escape(fact_id)}.[/]")
                return False

            updated = await board.votes.cast_vote(fact, vote_kind)
            if updated is None:
                return False

            console.print(
                f"[green]Voted[/] {kind} on #{updated.id}: "
                f"👍 {updated.votes_interesting}  🤯 {updated.votes_mindblowing}  "
                f"⛔ {updated.votes_false}"
            )
            if is_disputed(updated):
                console.print("[bold red]\\[⛔DISPUTED][/]")
            return True

    if not run(_run()):
        ctx.exit(1)


@click.command()
@click.argument("text")
@click.option("-s", "--source", required=True, help="Trustworthy source URL")
@click.option(
    "-c", "--category", required=True, type=click.Choice(names()), help="Fact category"
)
@click.pass_context
def share(ctx: click.Context, text: str, source: str, category: str):
    """Share a fact with the world."""

    async def _run():
        async with open_board(ctx.obj["config"]) as board:
            # Load the list first so the new fact is prepended to it
            await board.store.fetch()
            failures = len(board.errors)
            form = board.submission.form
            form.toggle()
            with console.status("Posting..."):
                fact = await board.submission.submit(text, source, category)
            if fact is not None:
                console.print(f"[green]Posted[/] fact #{fact.id}")
                render_facts(board.store.facts)
                return True
            if len(board.errors) > failures:
                return False

            console.print(f"[yellow]Not posted.[/] {form.remaining_chars} characters left.")
            if not text:
                console.print("  Text is empty.")
            elif len(text) > MAX_FACT_LENGTH:
                console.print(f"  Text is longer than {MAX_FACT_LENGTH} characters.")
            if not is_valid_url(source):
                console.print("  Source must be an http(s) URL.")
            if not is_category(category):
                console.print("  Choose a category.")
            return is_valid_fact_input(text, source, category)

    if not run(_run()):
        ctx.exit(1)
