"""Responsive UI CLI entry point: Click group with subcommands."""

import logging

import click

from responsive_ui import __version__


@click.group()
@click.version_option(version=__version__, prog_name="responsive-ui")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Responsive UI - inspect components, resolve classes, convert markup."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from responsive_ui.cli.classes import classes  # noqa: E402
from responsive_ui.cli.convert import convert  # noqa: E402
from responsive_ui.cli.inspect import inspect  # noqa: E402

cli.add_command(inspect)
cli.add_command(classes)
cli.add_command(convert)
