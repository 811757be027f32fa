"""Tests for the JSON local-storage cart repository (file I/O in tmp_path)."""

import json

import pytest

from babyland.application.cart_store import CartStore
from babyland.domain.exceptions import CartDataError
from babyland.domain.model.cart import Cart
from babyland.domain.model.product import Product
from babyland.domain.model.value_objects import Money
from babyland.infrastructure.persistence.json_cart_repository import JsonCartRepository

KEY = "babylandCart"


def _product(pid: str, price: str) -> Product:
    return Product(
        id=pid, code=f"BL-{pid}", name=f"Item {pid}", price=Money.of(price), description="soft"
    )


def _write_storage(path, value) -> None:
    path.write_text(json.dumps({KEY: value}), encoding="utf-8")


class TestJsonCartRepository:

    def test_missing_file_loads_nothing(self, tmp_path):
        assert JsonCartRepository(tmp_path / "local_storage.json").load() is None

    def test_missing_key_loads_nothing(self, tmp_path):
        path = tmp_path / "local_storage.json"
        path.write_text(json.dumps({"otherKey": "x"}), encoding="utf-8")
        assert JsonCartRepository(path).load() is None

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "local_storage.json"
        cart = Cart()
        cart.add(_product("1", "15.00"), 2)
        cart.add(_product("2", "0.99"), 1)
        JsonCartRepository(path).save(cart)

        loaded = JsonCartRepository(path).load()
        assert [(l.product_id, l.quantity.value) for l in loaded.lines] == [("1", 2), ("2", 1)]
        assert loaded.lines[0].product.description == "soft"
        assert loaded.total_amount == Money.of("30.99")

    def test_value_is_stored_as_text(self, tmp_path):
        path = tmp_path / "local_storage.json"
        cart = Cart()
        cart.add(_product("1", "3"), 1)
        JsonCartRepository(path).save(cart)

        storage = json.loads(path.read_text(encoding="utf-8"))
        assert isinstance(storage[KEY], str)
        records = json.loads(storage[KEY])
        assert records[0]["quantity"] == 1
        assert records[0]["product"]["code"] == "BL-1"

    def test_save_keeps_other_keys(self, tmp_path):
        path = tmp_path / "local_storage.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        JsonCartRepository(path).save(Cart())
        storage = json.loads(path.read_text(encoding="utf-8"))
        assert storage["theme"] == "dark"
        assert storage[KEY] == "[]"

    def test_custom_key(self, tmp_path):
        path = tmp_path / "local_storage.json"
        JsonCartRepository(path, key="otherCart").save(Cart())
        assert "otherCart" in json.loads(path.read_text(encoding="utf-8"))

    def test_numeric_prices_are_accepted(self, tmp_path):
        path = tmp_path / "local_storage.json"
        _write_storage(
            path,
            json.dumps(
                [{"product": {"id": "p1", "code": "c", "name": "n", "price": 10}, "quantity": 2}]
            ),
        )
        assert JsonCartRepository(path).load().total_amount == Money.of("20")

    @pytest.mark.parametrize(
        "value",
        [
            "not json at all",
            "{\"product\": 1}",
            "[{\"quantity\": 1}]",
            "[{\"product\": {\"id\": \"p1\", \"code\": \"c\", \"name\": \"n\", \"price\": \"x\"}, \"quantity\": 1}]",
            "[{\"product\": {\"id\": \"p1\", \"code\": \"c\", \"name\": \"n\", \"price\": \"1\"}, \"quantity\": 0}]",
            "[{\"product\": \"p1\", \"quantity\": 1}]",
            "[42]",
            "[{\"product\": {\"id\": \"p1\", \"code\": \"c\", \"name\": \"n\", \"price\": \"1\", \"currency\": \"EUR\"}, \"quantity\": 1}]",
            "[{\"product\": {\"id\": \"p1\", \"code\": \"c\", \"name\": \"n\", \"price\": \"1\", \"currency\": null}, \"quantity\": 1}]",
            "[{\"product\": {\"id\": \"p1\", \"code\": \"c\", \"name\": \"n\", \"price\": \"1\", \"currency\": 5}, \"quantity\": 1}]",
            "[" * 100_000,
        ],
    )
    def test_unreadable_value_raises_cart_data_error(self, tmp_path, value):
        path = tmp_path / "local_storage.json"
        _write_storage(path, value)
        with pytest.raises(CartDataError):
            JsonCartRepository(path).load()

    def test_unreadable_file_raises_cart_data_error(self, tmp_path):
        path = tmp_path / "local_storage.json"
        path.write_text("{{{", encoding="utf-8")
        with pytest.raises(CartDataError):
            JsonCartRepository(path).load()

    def test_deeply_nested_file_raises_cart_data_error(self, tmp_path):
        path = tmp_path / "local_storage.json"
        path.write_text("[" * 100_000, encoding="utf-8")
        with pytest.raises(CartDataError):
            JsonCartRepository(path).load()


class TestCartStoreOnDisk:

    def test_invalid_text_at_load_gives_empty_cart(self, tmp_path):
        path = tmp_path / "local_storage.json"
        _write_storage(path, "}}garbage{{")

        store = CartStore(JsonCartRepository(path))

        assert store.is_empty
        assert store.total_items == 0

    def test_deeply_nested_value_gives_empty_cart(self, tmp_path):
        path = tmp_path / "local_storage.json"
        _write_storage(path, "[" * 100_000)

        store = CartStore(JsonCartRepository(path))

        assert store.is_empty

    def test_foreign_currency_line_gives_empty_cart(self, tmp_path):
        path = tmp_path / "local_storage.json"
        _write_storage(
            path,
            json.dumps(
                [
                    {"product": {"id": "1", "code": "c1", "name": "a", "price": "2"}, "quantity": 1},
                    {
                        "product": {
                            "id": "2", "code": "c2", "name": "b", "price": "3", "currency": "EUR"
                        },
                        "quantity": 1,
                    },
                ]
            ),
        )

        store = CartStore(JsonCartRepository(path))

        assert store.is_empty
        assert store.total_amount == Money.zero()

    def test_recovers_and_overwrites_on_next_mutation(self, tmp_path):
        path = tmp_path / "local_storage.json"
        path.write_text("not even json", encoding="utf-8")

        store = CartStore(JsonCartRepository(path))
        store.add_to_cart(_product("1", "5"), 1)

        reloaded = CartStore(JsonCartRepository(path))
        assert reloaded.total_items == 1

    def test_survives_reload(self, tmp_path):
        path = tmp_path / "local_storage.json"
        store = CartStore(JsonCartRepository(path))
        store.add_to_cart(_product("1", "10"), 2)
        store.add_to_cart(_product("2", "1"), 1)
        store.update_quantity("1", 5)

        reloaded = CartStore(JsonCartRepository(path))
        assert [(l.product_id, l.quantity.value) for l in reloaded.items] == [("1", 5), ("2", 1)]
        assert reloaded.total_amount == Money.of("51")
