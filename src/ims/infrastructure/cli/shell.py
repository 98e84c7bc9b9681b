"""Interactive inventory session.

The terminal counterpart of the single-page UI: the table is re-rendered
after every command and all state lives in one InventoryController.
"""

from __future__ import annotations

import click

from ims.application.controller import InventoryController
from ims.application.view import SORT_FIELDS
from ims.infrastructure.bootstrap import inventory_controller
from ims.infrastructure.cli.rendering import (
    PALETTES,
    alert,
    confirm,
    render_about,
    render_notification,
    render_table,
)
from ims.infrastructure.config import Settings

HELP = """\
Commands:
  a            add a product (Enter on an empty prompt keeps the form value)
  e ID         edit a product
  d ID         delete a product
  c ID         copy a product into the add form
  /TEXT        search by name ("/" alone clears the search)
  s FIELD      sort by name, quantity, price or totalValue (again to reverse)
  t            toggle light/dark theme
  r            reload products
  ?            about this system
  <Enter>      submit the add form      esc   clear the add form
  q            quit"""


def _prompt_fields(name: str, quantity: str, price: str) -> dict[str, str]:
    return {
        "name": click.prompt("Name", default=name, show_default=bool(name)),
        "quantity": click.prompt("Quantity", default=quantity, show_default=bool(quantity)),
        "price": click.prompt("Price (R$)", default=price, show_default=bool(price)),
    }


def _render(controller: InventoryController) -> None:
    state = controller.state
    palette = PALETTES[state.theme]
    click.echo()
    click.echo(click.style("Inventory", fg=palette["title"], bold=True))
    render_table(controller.view(), state.theme)
    if not state.form_draft.is_blank():
        draft = state.form_draft
        click.echo(
            click.style(
                f"Add form: name='{draft.name}' quantity='{draft.quantity}' price='{draft.price}'",
                fg=palette["muted"],
            )
        )
    render_notification(controller.notification, state.theme)


def _add(controller: InventoryController) -> None:
    draft = controller.state.form_draft
    controller.update_form(**_prompt_fields(draft.name, draft.quantity, draft.price))
    controller.submit_create()


def _edit(controller: InventoryController, product_id: str) -> None:
    if not controller.open_edit(product_id):
        return
    click.echo(click.style(f"Edit product #{product_id}", bold=True))
    while True:
        draft = controller.state.edit_draft
        controller.update_edit(**_prompt_fields(draft.name, draft.quantity, draft.price))
        if not click.confirm("Save changes?", default=True):
            break
        if controller.save_edit():
            return
        if not click.confirm("Try again?", default=True):
            break
    controller.close_edit()


def _about(controller: InventoryController) -> None:
    controller.toggle_about()
    render_about(controller.state.theme)
    click.pause("Press any key to close...")
    controller.toggle_about()


def _sort(controller: InventoryController, field: str) -> None:
    if field not in SORT_FIELDS:
        click.echo(f"Unknown sort field '{field}'. Use one of: {', '.join(SORT_FIELDS)}")
        return
    controller.select_sort(field)


def run_shell(controller: InventoryController) -> None:
    controller.load()
    click.echo("Type 'h' for help.")

    while True:
        _render(controller)
        try:
            line = click.prompt("ims", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            click.echo()
            break

        line = line.strip()
        command, _, arg = line.partition(" ")
        arg = arg.strip()

        if line.startswith("/"):
            controller.set_search(line[1:].strip())
        elif command == "":
            if not controller.state.form_draft.is_blank():
                controller.handle_key("Enter")
        elif command == "esc":
            controller.handle_key("Escape")
        elif command == "q":
            break
        elif command in ("h", "help"):
            click.echo(HELP)
        elif command == "a":
            _add(controller)
        elif command in ("e", "d", "c") and not arg:
            click.echo(f"Usage: {command} ID")
        elif command == "e":
            _edit(controller, arg)
        elif command == "d":
            controller.delete(arg)
        elif command == "c":
            controller.duplicate(arg)
        elif command == "s":
            _sort(controller, arg)
        elif command == "t":
            controller.toggle_theme()
        elif command == "r":
            controller.refresh()
        elif command == "?":
            _about(controller)
        else:
            click.echo(f"Unknown command '{command}'. Type 'h' for help.")

    controller.notifier.dismiss()


@click.command("shell")
@click.pass_obj
def shell(settings: Settings) -> None:
    """Start an interactive inventory session."""
    run_shell(inventory_controller(settings, alert=alert, confirm=confirm))
