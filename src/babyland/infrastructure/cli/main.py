import logging

import click

from babyland.infrastructure.bootstrap import settings
from babyland.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from babyland.infrastructure.cli.order_commands import (
    order_list,
    order_show,
    order_status,
)
from babyland.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_qr,
    product_update,
)
from babyland.infrastructure.cli.shop_commands import checkout, scan

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """Baby Land: scan, shop and manage orders"""
    level = logging.INFO if verbose else settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """View and change the current cart."""


@cli.group()
def order() -> None:
    """View and update submitted orders."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_qr)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
cli.add_command(scan)
cli.add_command(checkout)
