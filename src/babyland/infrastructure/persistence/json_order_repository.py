"""JSON-file-backed implementations of OrderRepository and OrderItemRepository.

Order rows and item rows live in separate files, the same way the
checkout writes them as separate steps.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from babyland.domain.model.order import Order, OrderItem, OrderStatus
from babyland.domain.model.value_objects import Money, Quantity
from babyland.domain.repository.order_repository import (
    OrderItemRepository,
    OrderRepository,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        _ensure_file(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = _load_raw(self._file_path)
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in _load_raw(self._file_path):
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self, status: OrderStatus | None = None) -> list[Order]:
        orders = [self._to_domain(raw) for raw in _load_raw(self._file_path)]
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def save(self, order: Order) -> None:
        orders = _load_raw(self._file_path)

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        _persist_raw(self._file_path, orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "total_amount": str(order.total_amount.amount),
            "deposit_amount": (
                str(order.deposit_amount.amount)
                if order.deposit_amount is not None
                else None
            ),
            "currency": order.total_amount.currency,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat() if order.updated_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        deposit = raw.get("deposit_amount")
        updated_at = raw.get("updated_at")
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            deposit_amount=Money(Decimal(deposit), currency) if deposit is not None else None,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )


class JsonOrderItemRepository(OrderItemRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        _ensure_file(file_path)

    # --- OrderItemRepository interface ----------------------------------------

    def list_for_order(self, order_id: int) -> list[OrderItem]:
        return [
            self._to_domain(raw)
            for raw in _load_raw(self._file_path)
            if raw["order_id"] == order_id
        ]

    def add_all(self, order_id: int, items: list[OrderItem]) -> None:
        records = _load_raw(self._file_path)
        for item in items:
            item.order_id = order_id
            records.append(self._to_raw(item))
        _persist_raw(self._file_path, records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: OrderItem) -> dict:
        return {
            "order_id": item.order_id,
            "product_id": item.product_id,
            "product_code": item.product_code,
            "product_name": item.product_name,
            "unit_price": str(item.unit_price.amount),
            "currency": item.unit_price.currency,
            "quantity": item.quantity.value,
            "subtotal": str(item.subtotal.amount),
        }

    @staticmethod
    def _to_domain(raw: dict) -> OrderItem:
        return OrderItem(
            order_id=raw["order_id"],
            product_id=raw["product_id"],
            product_code=raw["product_code"],
            product_name=raw["product_name"],
            unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "USD")),
            quantity=Quantity(raw["quantity"]),
        )


# --- File helpers -------------------------------------------------------------


def _load_raw(file_path: Path) -> list[dict]:
    return json.loads(file_path.read_text(encoding="utf-8"))


def _persist_raw(file_path: Path, records: list[dict]) -> None:
    file_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")


def _ensure_file(file_path: Path) -> None:
    if not file_path.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("[]", encoding="utf-8")
