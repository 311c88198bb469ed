"""CLI command for validating pipeline definitions."""

import sys

import click

from dltmode.cli.commands._vars import parse_cli_vars, vars_option
from dltmode.core.exceptions import DltModeError
from dltmode.models.loader import load_pipeline


@click.command()
@click.argument("pipeline_path", type=click.Path(exists=True))
@vars_option
def validate(pipeline_path: str, vars: tuple):
    """Validate a pipeline definition YAML file.

    Checks:
    - YAML syntax
    - Definition schema validation
    - Template variable resolution
    - Capability names

    Examples:

        dltmode validate pipeline.yaml
        dltmode validate pipeline.yaml --vars MODEL_STAGE=Production
    """
    cli_vars = parse_cli_vars(vars)
    try:
        definition = load_pipeline(pipeline_path, cli_vars=cli_vars)
    except DltModeError as e:
        click.echo(f"✗ Pipeline validation failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Pipeline '{definition.name}' is valid")
    click.echo(f"  Steps: {len(definition.steps)}")
    click.echo(f"  Allow imperative: {definition.settings.allow_imperative}")
    click.echo(f"  Default language: {definition.settings.default_language}")
