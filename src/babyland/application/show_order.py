"""Application service: Show Order use case (query).

Assembles the full invoice view: the order row, its customer and the
item rows stored alongside it.
"""

from __future__ import annotations

from babyland.application.dto import CustomerDTO, OrderDTO, OrderItemDTO
from babyland.domain.exceptions import EntityNotFoundError
from babyland.domain.model.customer import Customer
from babyland.domain.model.order import Order
from babyland.domain.repository.customer_repository import CustomerRepository
from babyland.domain.repository.order_repository import (
    OrderItemRepository,
    OrderRepository,
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        order_item_repo: OrderItemRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._order_item_repo = order_item_repo
        self._customer_repo = customer_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.items = self._order_item_repo.list_for_order(order_id)
        customer = self._customer_repo.get_by_id(order.customer_id)
        return to_order_dto(order, customer)


# --- Mapping ------------------------------------------------------------------


def to_order_dto(order: Order, customer: Customer | None) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.value,
        customer=(
            CustomerDTO(
                name=customer.name,
                phone=customer.phone,
                location=customer.location,
                email=customer.email,
                store_name=customer.store_name,
            )
            if customer is not None
            else None
        ),
        items=[
            OrderItemDTO(
                product_code=item.product_code,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        deposit=str(order.deposit_amount) if order.deposit_amount is not None else None,
        balance_due=str(order.balance_due),
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
        updated_at=(
            order.updated_at.strftime(TIMESTAMP_FORMAT)
            if order.updated_at is not None
            else None
        ),
    )
