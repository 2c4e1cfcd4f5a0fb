"""CLI commands for the theme preference."""

from __future__ import annotations

import click

from shopbook.application.theme import ThemeHandler
from shopbook.domain.repository.preference_repository import THEMES
from shopbook.infrastructure.bootstrap import Container
from shopbook.infrastructure.cli.formatting import EXPECTED_ERRORS


@click.command("show")
@click.pass_obj
def theme_show(container: Container) -> None:
    """Show the current theme."""
    handler = ThemeHandler(preference_repo=container.preference_repository())
    try:
        click.echo(handler.current())
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))


@click.command("set")
@click.argument("name", type=click.Choice(THEMES, case_sensitive=False))
@click.pass_obj
def theme_set(container: Container, name: str) -> None:
    """Set the theme."""
    handler = ThemeHandler(preference_repo=container.preference_repository())
    try:
        value = handler.set(name)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Theme set to {value}.")


@click.command("toggle")
@click.pass_obj
def theme_toggle(container: Container) -> None:
    """Switch between light and dark."""
    handler = ThemeHandler(preference_repo=container.preference_repository())
    try:
        value = handler.toggle()
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Theme set to {value}.")
