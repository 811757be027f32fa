"""Order aggregate: a submitted cart.

An order owns a list of OrderItems, each a frozen copy of a cart line
taken at submission time.  Later catalog edits never change them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from babyland.domain.exceptions import ValidationError
from babyland.domain.model.cart import CartLine
from babyland.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status '{raw}' (expected one of: {allowed})"
            ) from exc


@dataclass
class OrderItem:
    """Snapshot of one cart line at submission time."""

    product_id: str
    product_code: str
    product_name: str
    unit_price: Money  # locked at submission time
    quantity: Quantity
    order_id: int | None = None

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderItem:
        return OrderItem(
            product_id=line.product.id,
            product_code=line.product.code,
            product_name=line.product.name,
            unit_price=line.product.price,
            quantity=line.quantity,
        )


@dataclass
class Order:
    """Aggregate root for submitted orders.

    Use ``Order.create()`` for new orders.  The ``__init__`` stays simple
    so the repository can reconstitute persisted orders as they are.
    """

    id: int | None
    customer_id: int
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    deposit_amount: Money | None = None
    items: list[OrderItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    @staticmethod
    def create(
        customer_id: int,
        items: list[OrderItem],
        deposit_amount: Money | None = None,
    ) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for item in items:
            total = total + item.subtotal

        if deposit_amount is not None and deposit_amount > total:
            raise ValidationError(
                f"Deposit {deposit_amount} exceeds order total {total}"
            )

        return Order(
            id=None,
            customer_id=customer_id,
            total_amount=total,
            deposit_amount=deposit_amount,
            items=list(items),
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, status: OrderStatus) -> None:
        """Move the order to *status*.

        Admins may set any status from any other, including back to
        pending; only the timestamp records that something changed.
        """
        self.status = status
        self.updated_at = datetime.now(timezone.utc)

    # --- Computed properties --------------------------------------------------

    @property
    def balance_due(self) -> Money:
        if self.deposit_amount is None:
            return self.total_amount
        return self.total_amount - self.deposit_amount
