"""Category catalog and local database commands."""

import click
from rich.table import Table

from board import CATEGORIES
from cli.utils import category_tag, console
from dataservice import SQLiteFactService
from shared_types import ServiceBackend


@click.command()
def categories():
    """List the fact categories."""
    table = Table(show_header=True, title="Categories")
    table.add_column("Name")
    table.add_column("Color", style="dim")

    for category in CATEGORIES:
        table.add_row(category_tag(category.name), category.color)

    console.print(table)


@click.command("init-db")
@click.pass_context
def init_db(ctx: click.Context):
    """Create the local SQLite facts table."""
    config = ctx.obj["config"]
    if config.service.backend != ServiceBackend.SQLITE:
        raise click.ClickException("init-db only applies to the sqlite backend")

    SQLiteFactService(config.paths.db, table=config.service.table)
    console.print(f"[green]Ready:[/] {config.paths.db}")
