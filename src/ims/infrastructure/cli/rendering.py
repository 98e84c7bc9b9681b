"""Terminal rendering of the inventory view.

The theme only changes the colour palette.
"""

from __future__ import annotations

import click

from ims.application.dto import InventoryViewDTO
from ims.application.notifications import Notification
from ims.application.state import Theme
from ims.application.view import DESCENDING, parse_sort_key

PALETTES: dict[Theme, dict[str, str]] = {
    Theme.LIGHT: {
        "title": "blue",
        "header": "black",
        "low": "red",
        "normal": "green",
        "notice": "green",
        "muted": "bright_black",
    },
    Theme.DARK: {
        "title": "bright_cyan",
        "header": "bright_white",
        "low": "bright_red",
        "normal": "bright_green",
        "notice": "bright_green",
        "muted": "white",
    },
}

COLUMNS = [
    # (field, label, width, right-aligned)
    (None, "ID", 6, False),
    ("name", "Name", 24, False),
    ("quantity", "Qty", 7, True),
    ("price", "Price", 14, True),
    ("totalValue", "Total", 16, True),
]

ABOUT_TEXT = (
    "This system was built to manage the stock of a small craft studio.\n"
    "It lets you add, edit and remove products and spot items that are\n"
    "running low at a glance, keeping handmade goods organised."
)


def _header_label(field: str | None, label: str, sort_key: str) -> str:
    parsed = parse_sort_key(sort_key)
    if field is None or parsed is None or parsed[0] != field:
        return label
    return f"{label} {'▼' if parsed[1] == DESCENDING else '▲'}"


def _cell(text: str, width: int, right: bool) -> str:
    if len(text) > width:
        text = text[: width - 1] + "…"
    return f"{text:>{width}}" if right else f"{text:<{width}}"


def render_table(view: InventoryViewDTO, theme: Theme = Theme.LIGHT) -> None:
    palette = PALETTES[theme]

    if view.search_term:
        click.echo(
            click.style(
                f"Search: '{view.search_term}'  ({view.shown} of {view.stored} products)",
                fg=palette["muted"],
            )
        )

    if not view.rows:
        click.echo("No products found.")
    else:
        header = " ".join(
            _cell(_header_label(field, label, view.sort_key), width, right)
            for field, label, width, right in COLUMNS
        )
        click.echo(click.style(header, fg=palette["header"], bold=True))
        click.echo("-" * len(header))
        for row in view.rows:
            qty = click.style(
                _cell(row.quantity, 7, True),
                fg=palette["low"] if row.low_stock else palette["normal"],
                bold=row.low_stock,
            )
            click.echo(
                f"{_cell(row.id, 6, False)} {_cell(row.name, 24, False)} {qty} "
                f"{_cell(row.price, 14, True)} {_cell(row.total_value, 16, True)}"
            )

    click.echo()
    click.echo(f"Total inventory value: {view.total_inventory_value}")
    if view.low_stock_count:
        click.echo(
            click.style(
                f"Low stock ({view.low_stock_count}): {', '.join(view.low_stock_names)}",
                fg=palette["low"],
            )
        )
    else:
        click.echo("Low stock: none")


def render_notification(notification: Notification | None, theme: Theme) -> None:
    if notification is not None:
        click.echo(click.style(f"✔ {notification.message}", fg=PALETTES[theme]["notice"]))


def render_about(theme: Theme) -> None:
    palette = PALETTES[theme]
    click.echo(click.style("About the system", fg=palette["title"], bold=True))
    click.echo(ABOUT_TEXT)


def alert(message: str) -> None:
    """Blocking notice: print to stderr and wait for a key press."""
    click.echo(click.style(f"! {message}", fg="red", bold=True), err=True)
    click.pause()


def confirm(message: str) -> bool:
    return click.confirm(message, default=False)
