"""CLI command for classifying an ad-hoc step."""

import json
import sys

import click

from dltmode.core.evaluator import classify as classify_step
from dltmode.core.exceptions import CapabilityError, InvalidStepError
from dltmode.models.step import TransformationStep


@click.command()
@click.option(
    "-c",
    "--capability",
    "capabilities",
    multiple=True,
    help="Capability the step requires (can be used multiple times)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the verdict as JSON")
def classify(capabilities: tuple, as_json: bool):
    """Classify a step described by its capabilities.

    Examples:

        dltmode classify -c type_cast -c string_function
        dltmode classify -c "external model inference" --json
    """
    try:
        verdict = classify_step(TransformationStep.of(*capabilities))
    except (InvalidStepError, CapabilityError) as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(verdict.to_dict(), indent=2))
        return

    click.echo(f"{verdict.mode.value} ({verdict.language})")
    if verdict.forcing_capability:
        click.echo(f"  forced by: {verdict.forcing_capability.label}")
