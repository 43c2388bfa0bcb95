"""CLI command: responsive-ui convert -- rewrite a raw label tag."""

from __future__ import annotations

import sys

import click

from responsive_ui.components import LABEL
from responsive_ui.errors import ConversionError
from responsive_ui.linter import convert_label


@click.command()
@click.argument("source")
@click.option("--classes", "show_classes", is_flag=True, help="Also print the resolved classes.")
def convert(source: str, show_classes: bool) -> None:
    """Convert a raw ``<span class="Label ...">`` tag into a Label invocation."""
    try:
        invocation = convert_label(source)
    except ConversionError as exc:
        click.echo(f"Conversion error: {exc}", err=True)
        sys.exit(1)

    click.echo(str(invocation))
    if show_classes:
        instance = LABEL.instantiate(invocation.property_values, invocation.html_attributes)
        click.echo(f"Classes: {' '.join(instance.root_class_names())}")
