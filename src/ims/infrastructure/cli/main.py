from __future__ import annotations

from pathlib import Path

import click

from ims.domain.exceptions import ConfigurationError
from ims.infrastructure.cli.preference_commands import sort_set, theme_set
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from ims.infrastructure.cli.shell import shell
from ims.infrastructure.config import Settings, configure_logging


@click.group()
@click.option("--api-url", default=None, help="Base URL of the product API.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for saved preferences.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log requests.")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None, data_dir: Path | None, verbose: bool) -> None:
    """IMS: Inventory Management System"""
    try:
        settings = Settings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))

    settings = settings.override(
        api_url=api_url.rstrip("/") if api_url else None,
        data_dir=data_dir,
        log_level="DEBUG" if verbose else None,
    )
    configure_logging(settings.log_level)
    ctx.obj = settings


# Register subcommands
cli.add_command(product_list)
cli.add_command(product_add)
cli.add_command(product_update)
cli.add_command(product_delete)
cli.add_command(theme_set)
cli.add_command(sort_set)
cli.add_command(shell)
