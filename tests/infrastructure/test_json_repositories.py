"""Tests for the JSON-file product, customer and order repositories."""

from datetime import datetime, timedelta, timezone

from babyland.domain.model.customer import Customer
from babyland.domain.model.order import Order, OrderItem, OrderStatus
from babyland.domain.model.product import Product
from babyland.domain.model.value_objects import Money, Quantity
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


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "data" / "products.json")
        assert repo.list_all() == []
        assert repo.next_id() == "1"

    def test_save_get_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="1", code="BL-001", name="Onesie", price=Money.of("15.00")))
        repo.save(Product(id="2", code="BL-002", name="Bottle", price=Money.of("7.25")))

        assert repo.next_id() == "3"
        assert repo.get_by_code("BL-002").name == "Bottle"
        assert repo.get_by_code("bl-002") is None
        assert repo.get_by_id("1").price == Money.of("15.00")

        repo.delete("1")
        repo.delete("1")
        assert [p.id for p in repo.list_all()] == ["2"]


class TestJsonCustomerRepository:

    def test_assigns_ids(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        a = Customer.create("Ana", "555", "1 Main St", store_name="Little Steps")
        b = Customer.create("Ben", "556", "2 Main St")
        repo.save(a)
        repo.save(b)

        assert (a.id, b.id) == (1, 2)
        loaded = repo.get_by_id(1)
        assert loaded.store_name == "Little Steps"
        assert loaded.email is None
        assert repo.get_by_id(3) is None


class TestJsonOrderRepository:

    def _order(self, customer_id: int = 1, deposit: str | None = None) -> Order:
        item = OrderItem(
            product_id="1",
            product_code="BL-001",
            product_name="Onesie",
            unit_price=Money.of("15.00"),
            quantity=Quantity(2),
        )
        return Order.create(
            customer_id, [item], deposit_amount=Money.of(deposit) if deposit else None
        )

    def test_round_trip(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order(deposit="10")
        repo.save(order)

        loaded = repo.get_by_id(order.id)
        assert loaded.id == 1
        assert loaded.total_amount == Money.of("30.00")
        assert loaded.deposit_amount == Money.of("10")
        assert loaded.status == OrderStatus.PENDING
        assert loaded.created_at == order.created_at
        assert loaded.items == []  # items live in their own file

    def test_upsert_status(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = self._order()
        repo.save(order)
        order.change_status(OrderStatus.CANCELLED)
        repo.save(order)

        assert len(repo.list_all()) == 1
        loaded = repo.get_by_id(1)
        assert loaded.status == OrderStatus.CANCELLED
        assert loaded.updated_at == order.updated_at

    def test_list_newest_first_with_filter(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for hours, status in ((0, OrderStatus.PENDING), (2, OrderStatus.PENDING), (1, OrderStatus.COMPLETED)):
            order = self._order()
            order.created_at = base + timedelta(hours=hours)
            order.status = status
            repo.save(order)

        assert [o.id for o in repo.list_all()] == [2, 3, 1]
        assert [o.id for o in repo.list_all(OrderStatus.PENDING)] == [2, 1]


class TestJsonOrderItemRepository:

    def test_items_grouped_by_order(self, tmp_path):
        repo = JsonOrderItemRepository(tmp_path / "order_items.json")
        item = OrderItem(
            product_id="1",
            product_code="BL-001",
            product_name="Onesie",
            unit_price=Money.of("15.00"),
            quantity=Quantity(3),
        )
        repo.add_all(1, [item])
        repo.add_all(2, [])

        loaded = repo.list_for_order(1)
        assert len(loaded) == 1
        assert loaded[0].order_id == 1
        assert loaded[0].subtotal == Money.of("45.00")
        assert repo.list_for_order(2) == []
