"""Application service: Submit Order use case (checkout).

Turns the session cart into persistent records, in three writes:

1. one customer row,
2. one order row (status ``pending``, total taken from the cart),
3. one order-item row per cart line.

Only after all three succeed is the cart cleared.  The writes are not
transactional: if a later step fails the earlier rows stay behind, the
cart is left untouched and the caller gets a generic
OrderSubmissionError it can retry.
"""

from __future__ import annotations

import logging

from babyland.application.cart_store import CartStore
from babyland.application.dto import CustomerDetails, OrderDTO
from babyland.application.show_order import to_order_dto
from babyland.domain.exceptions import OrderSubmissionError, ValidationError
from babyland.domain.model.customer import Customer
from babyland.domain.model.order import Order, OrderItem
from babyland.domain.model.value_objects import Money
from babyland.domain.repository.customer_repository import CustomerRepository
from babyland.domain.repository.order_repository import (
    OrderItemRepository,
    OrderRepository,
)

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(
        self,
        cart_store: CartStore,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
        order_item_repo: OrderItemRepository,
    ) -> None:
        self._cart_store = cart_store
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._order_item_repo = order_item_repo

    def handle(
        self,
        details: CustomerDetails,
        deposit: str | None = None,
    ) -> OrderDTO:
        if self._cart_store.is_empty:
            raise ValidationError(
                "No items in cart. Please add items before checkout"
            )

        # Validate everything up front so a bad form never writes a row.
        customer = Customer.create(
            name=details.name,
            phone=details.phone,
            location=details.location,
            email=details.email,
            store_name=details.store_name,
        )
        items = [OrderItem.from_cart_line(line) for line in self._cart_store.items]
        deposit_amount = Money.of(deposit) if deposit not in (None, "") else None
        # customer_id is filled in once the customer row exists
        order = Order.create(customer_id=0, items=items, deposit_amount=deposit_amount)

        try:
            self._customer_repo.save(customer)
            order.customer_id = customer.id  # type: ignore[assignment]
            self._order_repo.save(order)
            self._order_item_repo.add_all(order.id, order.items)  # type: ignore[arg-type]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.error("Failed to submit order: %s", exc)
            raise OrderSubmissionError(
                "There was an error processing your order. Please try again."
            ) from exc

        self._cart_store.clear_cart()
        logger.info(
            "Order #%s submitted: %d items, total %s",
            order.id,
            len(order.items),
            order.total_amount,
        )
        return to_order_dto(order, customer)
