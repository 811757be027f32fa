"""Abstract repositories for the Order aggregate and its items.

Orders and order items are stored separately, mirroring the two
tables a checkout writes to.  Writing the order row and writing its
item rows are two independent steps.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from babyland.domain.model.order import Order, OrderItem, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order (without items) by its ID, or None."""

    @abstractmethod
    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        """Return orders newest first, optionally filtered by status."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order row, assigning ``order.id``."""


class OrderItemRepository(ABC):

    @abstractmethod
    def list_for_order(self, order_id: int) -> list[OrderItem]:
        """Return the items of one order in submission order."""

    @abstractmethod
    def add_all(self, order_id: int, items: list[OrderItem]) -> None:
        """Persist *items* as belonging to *order_id*."""
