"""CLI commands for the storefront flow: scan a product, check out."""

from __future__ import annotations

import click

from babyland.application.dto import CustomerDetails
from babyland.application.lookup_product import LookupProductHandler
from babyland.application.submit_order import SubmitOrderHandler
from babyland.domain.exceptions import DomainException
from babyland.domain.service.scanner import QrScanner
from babyland.infrastructure.bootstrap import (
    cart_store,
    customer_repository,
    order_item_repository,
    order_repository,
    product_repository,
)
from babyland.infrastructure.cli.order_commands import display_order
from babyland.infrastructure.scanning.keyboard_wedge import (
    LineFrameSource,
    TextFrameDecoder,
)


@click.command("scan")
@click.option("--quantity", default=1, show_default=True, type=int, help="How many to add per scan.")
def scan(quantity: int) -> None:
    """Read QR payloads from a keyboard-wedge scanner and add them to the cart.

    Scan one code per line; end input (Ctrl-D) to stop.
    """
    stdin = click.get_text_stream("stdin")
    scanner = QrScanner(LineFrameSource(stdin), TextFrameDecoder())
    lookup = LookupProductHandler(product_repo=product_repository())
    store = cart_store()

    if stdin.isatty():
        click.echo("Scan a product QR code (Ctrl-D to finish)...")

    while True:
        try:
            code = scanner.scan()
        except DomainException as exc:
            raise click.ClickException(str(exc))
        if code is None:
            break

        try:
            product = lookup.handle(code)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
            continue

        store.add_to_cart(product, quantity)
        click.echo(f"Added {max(1, quantity)} x {product.name} ({product.price})")

    click.echo(f"Cart: {store.total_items} items, {store.total_amount}")


@click.command("checkout")
@click.option("--name", required=True, help="Full name.")
@click.option("--phone", required=True, help="Phone number.")
@click.option("--location", required=True, help="Delivery address.")
@click.option("--email", default=None, help="Email address.")
@click.option("--store", "store_name", default=None, help="Store name.")
@click.option("--deposit", default=None, help="Deposit paid up front (e.g. 20.00).")
def checkout(
    name: str,
    phone: str,
    location: str,
    email: str | None,
    store_name: str | None,
    deposit: str | None,
) -> None:
    """Submit the current cart as an order."""
    handler = SubmitOrderHandler(
        cart_store=cart_store(),
        customer_repo=customer_repository(),
        order_repo=order_repository(),
        order_item_repo=order_item_repository(),
    )
    details = CustomerDetails(
        name=name,
        phone=phone,
        location=location,
        email=email,
        store_name=store_name,
    )

    try:
        dto = handler.handle(details, deposit=deposit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order submitted successfully!")
    click.echo()
    display_order(dto)
