"""Main CLI entry point for dltmode."""

import click

from dltmode import __version__
from dltmode.cli.commands.classify import classify
from dltmode.cli.commands.list import list_capabilities
from dltmode.cli.commands.plan import plan
from dltmode.cli.commands.scaffold import scaffold
from dltmode.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """dltmode - SQL or Python for Delta Live Tables steps."""
    pass


main.add_command(classify)
main.add_command(validate)
main.add_command(plan)
main.add_command(scaffold)
main.add_command(list_capabilities)


if __name__ == "__main__":
    main()
