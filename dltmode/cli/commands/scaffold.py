"""CLI command for scaffolding step sources."""

import sys
from pathlib import Path

import click

from dltmode.api import plan as plan_definition
from dltmode.cli.commands._vars import parse_cli_vars, vars_option
from dltmode.core.exceptions import DltModeError
from dltmode.models.loader import load_pipeline
from dltmode.scaffold import list_languages, render_plan


@click.command()
@click.argument("pipeline_path", type=click.Path(exists=True))
@vars_option
@click.option(
    "--language",
    default=None,
    help="Language for declarative steps (default: the pipeline's default_language)",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write one file per step into this directory instead of printing",
)
def scaffold(pipeline_path: str, vars: tuple, language: str | None, output_dir: str | None):
    """Render SQL or Python stubs for every step of a pipeline.

    Steps that need an imperative extension are always rendered in Python.

    Examples:

        dltmode scaffold pipeline.yaml
        dltmode scaffold pipeline.yaml --language python --output-dir build/
    """
    cli_vars = parse_cli_vars(vars)
    if language is not None and language not in list_languages():
        click.echo(
            f"Error: Unknown language '{language}'. Choose from: {', '.join(list_languages())}",
            err=True,
        )
        sys.exit(1)

    try:
        result = plan_definition(load_pipeline(pipeline_path, cli_vars=cli_vars))
        rendered = render_plan(result, language)
    except DltModeError as e:
        click.echo(f"Scaffold error: {e}", err=True)
        sys.exit(1)

    if output_dir is None:
        for item in rendered:
            click.echo(f"# --- {item.filename} ---")
            click.echo(item.source)
        return

    target = Path(output_dir)
    target.mkdir(parents=True, exist_ok=True)
    for item in rendered:
        (target / item.filename).write_text(item.source, encoding="utf-8")
        click.echo(f"✓ Wrote {target / item.filename}")
