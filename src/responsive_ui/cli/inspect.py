"""CLI command: responsive-ui inspect -- display a component declaration."""

from __future__ import annotations

import json
import sys

import click

from responsive_ui.library import default_library


@click.command()
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Print the style map as JSON.")
def inspect(name: str, as_json: bool) -> None:
    """Display the properties and style map of component NAME."""
    try:
        definition = default_library().get(name)
    except KeyError as exc:
        click.echo(f"Error: {exc.args[0]}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(definition.styles.to_dict(), indent=2, sort_keys=False))
        return

    click.echo(f"Component:   {definition.name}")
    click.echo(f"Default tag: {definition.default_tag}")
    if definition.base_classes:
        click.echo(f"Classes:     {' '.join(definition.base_classes)}")
    click.echo(f"Breakpoints: {', '.join(definition.breakpoints)}")
    if definition.allowed_html_attributes:
        allowed = ", ".join(sorted(definition.allowed_html_attributes))
        click.echo(f"Attributes:  {allowed}")
    click.echo()

    click.echo("Properties:")
    for prop in definition.properties.definitions.values():
        parts = [f"  {prop.name}"]
        if prop.allowed_values is not None:
            values = ", ".join(sorted(str(v) for v in prop.allowed_values))
            parts.append(f"values=[{values}]")
        if prop.has_default:
            parts.append(f"default={prop.default}")
        click.echo("  ".join(parts))
    click.echo()

    click.echo("Style map:")
    for breakpoint, prop, value, class_names in definition.styles.entries():
        key = f"{breakpoint}.{prop}" if breakpoint else prop
        click.echo(f"  {key}={value} -> {' '.join(class_names) or '(none)'}")
