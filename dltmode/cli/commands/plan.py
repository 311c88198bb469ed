"""CLI command for planning pipeline definitions."""

import json
import sys

import click

from dltmode.api import plan as plan_definition
from dltmode.cli.commands._vars import parse_cli_vars, vars_option
from dltmode.core.exceptions import DltModeError
from dltmode.core.logging import configure_logging
from dltmode.models.loader import load_pipeline


@click.command()
@click.argument("pipeline_path", type=click.Path(exists=True))
@vars_option
@click.option(
    "--format",
    "output_format",
    default="text",
    type=click.Choice(["text", "json"]),
    help="Output format (default: text)",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
@click.option("--json-logs", is_flag=True, help="Use JSON format for logs")
def plan(pipeline_path: str, vars: tuple, output_format: str, log_level: str, json_logs: bool):
    """Classify every step of a pipeline definition.

    Examples:

        dltmode plan pipeline.yaml
        dltmode plan pipeline.yaml --format json
        dltmode plan pipeline.yaml --log-level DEBUG --json-logs
    """
    configure_logging(level=log_level, json_format=json_logs)
    cli_vars = parse_cli_vars(vars)

    try:
        definition = load_pipeline(pipeline_path, cli_vars=cli_vars)
        result = plan_definition(definition)
    except DltModeError as e:
        click.echo(f"Planning error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo(f"Pipeline: {result.pipeline_name} ({result.language})")
    for step_plan in result.steps:
        verdict = step_plan.verdict
        line = f"  {step_plan.name}: {verdict.mode.value}"
        if verdict.forcing_capability:
            line += f" [{verdict.forcing_capability.value}]"
        click.echo(line)
