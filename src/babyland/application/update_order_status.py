"""Application service: Update Order Status use case."""

from __future__ import annotations

import logging

from babyland.domain.exceptions import EntityNotFoundError
from babyland.domain.model.order import OrderStatus
from babyland.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: str) -> OrderStatus:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.change_status(new_status)
        self._order_repo.save(order)

        logger.info(
            "Order #%s status %s -> %s", order_id, previous.value, new_status.value
        )
        return new_status
