"""CLI command for listing the capability vocabulary."""

import click

from dltmode.core.capabilities import DECLARATIVE_SAFE, IMPERATIVE_PRIORITY, Capability


@click.command("list-capabilities")
def list_capabilities():
    """List known capabilities.

    Declarative-safe capabilities fit a SQL query. Imperative-only ones are
    listed in the priority order used to report the forcing capability.
    """
    click.echo("Declarative-safe:")
    for capability in Capability:
        if capability in DECLARATIVE_SAFE:
            click.echo(f"  - {capability.value} ({capability.label})")

    click.echo("Imperative-only (highest priority first):")
    for capability in IMPERATIVE_PRIORITY:
        click.echo(f"  - {capability.value} ({capability.label})")
