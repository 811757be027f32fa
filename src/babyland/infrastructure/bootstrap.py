"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from babyland.application.cart_store import CartStore
from babyland.infrastructure.config import Settings, load_settings
from babyland.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from babyland.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from babyland.infrastructure.persistence.json_order_repository import (
    JsonOrderItemRepository,
    JsonOrderRepository,
)
from babyland.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(settings().data_dir / "customers.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def order_item_repository() -> JsonOrderItemRepository:
    return JsonOrderItemRepository(settings().data_dir / "order_items.json")


def cart_store() -> CartStore:
    """Create the session's CartStore, restoring any saved cart."""
    current = settings()
    return CartStore(
        JsonCartRepository(current.data_dir / "local_storage.json", key=current.cart_key)
    )
