"""typea CLI entry point."""

import logging

import click

from typea.config import ValidatorConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to TYPEA_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """typea: validate data against literal expressions."""
    try:
        config = ValidatorConfig.from_env()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(2)

    level = (log_level or config.log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Register subcommands
from typea.cli.validate_cmd import types_cmd, validate  # noqa: E402

cli.add_command(validate)
cli.add_command(types_cmd)
