"""CLI command: responsive-ui classes -- resolve the classes of an instance."""

from __future__ import annotations

import sys
from typing import Any

import click

from responsive_ui.config import DEFAULT_CONFIG
from responsive_ui.errors import ValidationError
from responsive_ui.library import default_library


def _coerce(raw: str) -> Any:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return raw


def _parse_assignments(pairs: tuple[str, ...], breakpoints: tuple[str, ...]) -> dict[str, Any]:
    """Parse ``key=value`` and ``breakpoint.key=value`` pairs."""
    values: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}")
        section, dot, name = key.partition(".")
        if dot and section in breakpoints:
            values.setdefault(section, {})[name] = _coerce(raw)
        else:
            values[key] = _coerce(raw)
    return values


@click.command()
@click.argument("name")
@click.option("--prop", "-p", "props", multiple=True, help="Property value, key=value or sm.key=value.")
@click.option("--attr", "-a", "attrs", multiple=True, help="HTML attribute, name=value.")
@click.option("--defaults/--no-defaults", default=True, help="Fill missing properties with defaults.")
@click.option(
    "--production/--no-production",
    default=False,
    envvar="RESPONSIVE_UI_PRODUCTION",
    help="Run in production mode.",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    envvar="RESPONSIVE_UI_STRICT",
    help="Raise on invalid attributes and values.",
)
def classes(
    name: str,
    props: tuple[str, ...],
    attrs: tuple[str, ...],
    defaults: bool,
    production: bool,
    strict: bool,
) -> None:
    """Build an instance of component NAME and print its resolved classes.

    Exits with code 1 if validation finds errors.
    """
    try:
        definition = default_library().get(name)
    except KeyError as exc:
        click.echo(f"Error: {exc.args[0]}", err=True)
        sys.exit(1)

    property_values = _parse_assignments(props, definition.breakpoints)
    html_attributes = _parse_assignments(attrs, ())
    config = DEFAULT_CONFIG.with_mode(production=production, strict=strict)

    try:
        instance = definition.instantiate(property_values, html_attributes, config=config)
        if defaults:
            instance.fill_default_values_in_place(fallback_to_default=True)
        diagnostics = instance.validate_values()
    except ValidationError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        sys.exit(1)

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo(f"Tag:        {instance.tag}")
    click.echo(f"Classes:    {' '.join(instance.root_class_names())}")
    click.echo(f"Attributes: {instance.render_html_attributes()}")

    if any(d.is_error for d in diagnostics):
        sys.exit(1)
