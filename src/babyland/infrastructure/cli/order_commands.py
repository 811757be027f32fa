"""CLI commands for the Order aggregate (admin)."""

from __future__ import annotations

import click

from babyland.application.dto import OrderDTO
from babyland.application.list_orders import ListOrdersHandler
from babyland.application.show_order import ShowOrderHandler
from babyland.application.update_order_status import UpdateOrderStatusHandler
from babyland.domain.exceptions import DomainException
from babyland.domain.model.order import OrderStatus
from babyland.infrastructure.bootstrap import (
    customer_repository,
    order_item_repository,
    order_repository,
)

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order (the printable invoice)."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    if dto.updated_at:
        click.echo(f"Updated:  {dto.updated_at}")
    if dto.customer is not None:
        click.echo(f"Customer: {dto.customer.name}  {dto.customer.phone}")
        if dto.customer.store_name:
            click.echo(f"Store:    {dto.customer.store_name}")
        if dto.customer.email:
            click.echo(f"Email:    {dto.customer.email}")
        click.echo(f"Deliver:  {dto.customer.location}")
    click.echo()

    click.echo(f"  {'Code':<12} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.product_code:<12} {item.product_name:<20} "
            f"{item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Order Total':<39} {dto.total:>21}")
    if dto.deposit is not None:
        click.echo(f"  {'Deposit':<39} {dto.deposit:>21}")
        click.echo(f"  {'Balance Due':<39} {dto.balance_due:>21}")


@click.command("list")
@click.option("--status", default=None, type=_STATUS_CHOICE, help="Only orders in this status.")
def order_list(status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(
        order_repo=order_repository(),
        customer_repo=customer_repository(),
    )
    summaries = handler.handle(OrderStatus.parse(status) if status else None)

    if not summaries:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Status':<12} {'Total':>12}  Created")
    click.echo("-" * 75)
    for s in summaries:
        click.echo(
            f"{s.id:<6} {s.customer_name:<20} {s.status:<12} {s.total:>12}  {s.created_at}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(
        order_repo=order_repository(),
        order_item_repo=order_item_repository(),
        customer_repo=customer_repository(),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.argument("status", type=_STATUS_CHOICE)
def order_status(order_id: int, status: str) -> None:
    """Set an order's status (pending, processing, completed, cancelled)."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        new_status = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status updated to {new_status.value}")
