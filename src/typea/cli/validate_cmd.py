"""Validation CLI commands: validate and types."""

import json
from typing import IO

import click
import yaml

from typea.config import ValidatorConfig
from typea.types import Mode
from typea.validator import default_registry, run


def _load(stream: IO[str], label: str):
    """Load a YAML or JSON document (JSON is valid YAML)."""
    try:
        return yaml.safe_load(stream)
    except yaml.YAMLError as e:
        click.echo(f"Error: could not parse {label}: {e}", err=True)
        raise SystemExit(2)


@click.command()
@click.argument("expression_file", type=click.File("r"))
@click.argument("data_file", type=click.File("r"))
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode]),
    default=None,
    help="Validation mode (defaults to TYPEA_MODE or 'default').",
)
@click.option(
    "--reject-extra-items",
    is_flag=True,
    default=False,
    help="Fail positional arrays that have more elements than the expression.",
)
@click.pass_obj
def validate(
    config: ValidatorConfig | None,
    expression_file: IO[str],
    data_file: IO[str],
    mode: str | None,
    reject_extra_items: bool,
):
    """Validate DATA_FILE against the expression in EXPRESSION_FILE.

    Both files may be YAML or JSON; pass '-' to read one from stdin.
    Types are referenced by name inside typed fields:

    \b
        name: {type: String, maxLength: 40}
        age: {type: Integer, min: 0}
        tags: {type: [{type: String}]}

    Prints the sanitized data as JSON, or the error on stderr (exit code 1).
    """
    config = config or ValidatorConfig()
    expression = _load(expression_file, "expression")
    data = _load(data_file, "data")

    result = run(
        expression,
        data,
        mode=Mode(mode) if mode else config.mode,
        registry=default_registry,
        reject_extra_items=reject_extra_items or config.reject_extra_items,
    )

    if result.error:
        click.echo(click.style(f"Invalid: {result.error}", fg="red"), err=True)
        raise SystemExit(1)

    click.echo(json.dumps(result.data, indent=2, ensure_ascii=False, default=str))


@click.command("types")
def types_cmd():
    """List registered types and their checks."""
    for name in default_registry.list_registered():
        registered = default_registry.get(name)
        checks = ", ".join(sorted(registered.checks))
        click.echo(f"  {name}: {checks}")
