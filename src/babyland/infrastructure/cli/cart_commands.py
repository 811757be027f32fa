"""CLI commands for the session cart.

Each invocation restores the cart from local storage, applies one
change and writes it back, so the cart survives between commands the
same way it survives page reloads.
"""

from __future__ import annotations

import click

from babyland.application.cart_store import CartStore
from babyland.application.lookup_product import LookupProductHandler
from babyland.domain.exceptions import DomainException
from babyland.infrastructure.bootstrap import cart_store, product_repository


def _line_product_id(store: CartStore, code: str) -> str:
    line = store.find_by_code(code.strip())
    if line is None:
        raise click.ClickException(f"Product '{code}' is not in the cart")
    return line.product_id


def display_cart(store: CartStore) -> None:
    """Shared formatting for the cart review screen."""
    if store.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Code':<12} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*60}")
    for line in store.items:
        click.echo(
            f"  {line.product.code:<12} {line.product.name:<20} "
            f"{line.quantity.value:>5} {str(line.product.price):>10} {str(line.subtotal):>10}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Items':<33} {store.total_items:>5}")
    click.echo(f"  {'Total':<33} {str(store.total_amount):>27}")


@click.command("add")
@click.option("--code", required=True, help="Product code (as scanned).")
@click.option("--quantity", default=1, show_default=True, type=int, help="How many to add.")
def cart_add(code: str, quantity: int) -> None:
    """Look up a product by code and add it to the cart."""
    handler = LookupProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    store = cart_store()
    store.add_to_cart(product, quantity)
    click.echo(f"Added {max(1, quantity)} x {product.name} to your cart")
    click.echo(f"Cart: {store.total_items} items, {store.total_amount}")


@click.command("update")
@click.option("--code", required=True, help="Code of a product already in the cart.")
@click.option("--quantity", required=True, type=int, help="New quantity (minimum 1).")
def cart_update(code: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    store = cart_store()
    store.update_quantity(_line_product_id(store, code), quantity)
    display_cart(store)


@click.command("remove")
@click.option("--code", required=True, help="Code of a product already in the cart.")
def cart_remove(code: str) -> None:
    """Remove a product from the cart."""
    store = cart_store()
    store.remove_item(_line_product_id(store, code))
    display_cart(store)


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    store = cart_store()
    store.clear_cart()
    click.echo("Cart cleared.")


@click.command("show")
def cart_show() -> None:
    """Show the cart contents and totals."""
    display_cart(cart_store())
