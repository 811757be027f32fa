"""Application service: List Orders use case (query)."""

from __future__ import annotations

from babyland.application.dto import OrderSummaryDTO
from babyland.application.show_order import TIMESTAMP_FORMAT
from babyland.domain.model.order import OrderStatus
from babyland.domain.repository.customer_repository import CustomerRepository
from babyland.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo

    def handle(self, status: OrderStatus | None = None) -> list[OrderSummaryDTO]:
        """Return orders newest first, optionally only those in *status*."""
        summaries: list[OrderSummaryDTO] = []
        for order in self._order_repo.list_all(status=status):
            customer = self._customer_repo.get_by_id(order.customer_id)
            summaries.append(
                OrderSummaryDTO(
                    id=order.id,  # type: ignore[arg-type]
                    customer_name=customer.name if customer is not None else "Unknown",
                    status=order.status.value,
                    total=str(order.total_amount),
                    created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
                )
            )
        return summaries
