"""CLI commands for persisted view preferences."""

from __future__ import annotations

import click

from ims.application.state import Theme
from ims.application.view import DEFAULT_SORT_KEY, SORT_FIELDS, toggle_sort_key
from ims.domain.repository.preference_store import SORT_KEY, THEME_KEY
from ims.infrastructure.bootstrap import preference_store
from ims.infrastructure.config import Settings


@click.command("theme")
@click.argument("theme", required=False, type=click.Choice([t.value for t in Theme]))
@click.pass_obj
def theme_set(settings: Settings, theme: str | None) -> None:
    """Switch between the light and dark theme (or set one explicitly)."""
    store = preference_store(settings)
    current = Theme.parse(store.get(THEME_KEY))
    new = Theme(theme) if theme else current.toggled()
    store.set(THEME_KEY, new.value)
    click.echo(f"Theme set to {new.value}.")


@click.command("sort")
@click.argument("field", type=click.Choice(list(SORT_FIELDS)))
@click.pass_obj
def sort_set(settings: Settings, field: str) -> None:
    """Sort by FIELD; selecting the current field again reverses it."""
    store = preference_store(settings)
    new = toggle_sort_key(store.get(SORT_KEY) or DEFAULT_SORT_KEY, field)
    store.set(SORT_KEY, new)
    click.echo(f"Sorting by {new}.")
