"""One-shot CLI commands for products."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.list_products import ListProductsHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.state import Theme
from ims.application.update_product import UpdateProductHandler
from ims.application.view import DEFAULT_SORT_KEY, SORT_FIELDS, build_view
from ims.domain.exceptions import DomainException, EntityNotFoundError
from ims.domain.model.draft import ProductDraft
from ims.domain.repository.preference_store import SORT_KEY, THEME_KEY
from ims.infrastructure.bootstrap import preference_store, product_repository
from ims.infrastructure.cli.rendering import render_table
from ims.infrastructure.config import Settings

SORT_KEYS = [f"{field}-{direction}" for field in SORT_FIELDS for direction in ("asc", "desc")]


@click.command("list")
@click.option("--search", default="", help="Only show products whose name contains this text.")
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice(SORT_KEYS),
    default=None,
    help="Sort key; defaults to the saved preference.",
)
@click.pass_obj
def product_list(settings: Settings, search: str, sort_key: str | None) -> None:
    """List products with totals and low-stock alerts."""
    preferences = preference_store(settings)
    handler = ListProductsHandler(product_repo=product_repository(settings))

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    view = build_view(
        products,
        search_term=search,
        sort_key=sort_key or preferences.get(SORT_KEY) or DEFAULT_SORT_KEY,
    )
    render_table(view, Theme.parse(preferences.get(THEME_KEY)))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, help="Units in stock.")
@click.option("--price", required=True, help="Unit price (e.g. 15.50).")
@click.pass_obj
def product_add(settings: Settings, name: str, quantity: str, price: str) -> None:
    """Add a new product."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(ProductDraft(name=name, quantity=quantity, price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added: {product.quantity} at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--quantity", default=None, help="New quantity.")
@click.option("--price", default=None, help="New unit price.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    quantity: str | None,
    price: str | None,
) -> None:
    """Update a product. Fields left out keep their current value."""
    repo = product_repository(settings)

    try:
        current = {p.id: p for p in ListProductsHandler(repo).handle()}.get(product_id)
        if current is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        draft = ProductDraft.from_product(current)
        changes = {"name": name, "quantity": quantity, "price": price}
        draft = draft.with_fields(**{k: v for k, v in changes.items() if v is not None})
        product = UpdateProductHandler(product_repo=repo).handle(product_id, draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated: '{product.name}', {product.quantity} at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str, yes: bool) -> None:
    """Delete a product. There is no undo."""
    if not yes and not click.confirm(f"Delete product #{product_id}?", default=False):
        click.echo("Aborted.")
        return

    handler = RemoveProductHandler(product_repo=product_repository(settings))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
