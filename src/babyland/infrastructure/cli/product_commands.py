"""CLI commands for the Product aggregate (admin)."""

from __future__ import annotations

import click
import segno

from babyland.application.add_product import AddProductHandler
from babyland.application.delete_product import DeleteProductHandler
from babyland.application.update_product import UpdateProductHandler
from babyland.domain.exceptions import DomainException
from babyland.domain.model.product import qr_payload
from babyland.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--code", required=True, help="Unique product code (printed in the QR code).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default="", help="Optional description.")
def product_add(code: str, name: str, price: str, description: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(code=code, name=name, price=price, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' ({product.code}) added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Code':<12} {'Name':<24} {'Price':>10}")
    click.echo("-" * 55)
    for p in products:
        click.echo(f"{p.id:<6} {p.code:<12} {p.name:<24} {str(p.price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
def product_update(
    product_id: str,
    price: str | None,
    name: str | None,
    description: str | None,
) -> None:
    """Update a product's price, name or description."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id, price=price, name=name, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product? Existing orders are not affected.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' deleted.")


@click.command("qr")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="PNG file to write (default: babyland-product-<code>.png).",
)
def product_qr(product_id: str, output: str | None) -> None:
    """Write a product's QR code to a PNG file."""
    product = product_repository().get_by_id(product_id)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    payload = qr_payload(product.code)
    output = output or f"babyland-product-{payload}.png"

    try:
        qr = segno.make(payload, error="h", micro=False)
        qr.save(output, kind="png", scale=10, border=4)
    except (OSError, ValueError) as exc:
        raise click.ClickException(f"Could not write QR code: {exc}")

    click.echo(f"QR code for '{payload}' written to {output}")
