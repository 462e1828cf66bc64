"""til - Today I Learned fact board."""

from pathlib import Path
from typing import Optional

import click

from cli.commands import categories, init_db, list_facts, share, vote
from cli.config import ConfigError, load_config_model
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: ./config.yaml or ~/.til/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[Path]):
    """Today I Learned - share facts, vote on them."""
    try:
        config = load_config_model(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    level = "DEBUG" if verbose else config.logging.level
    setup_logging(json_mode=config.logging.json_mode, level=level, log_file=config.paths.log_file)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(categories)
cli.add_command(init_db)
cli.add_command(list_facts)
cli.add_command(share)
cli.add_command(vote)


if __name__ == "__main__":
    cli()
