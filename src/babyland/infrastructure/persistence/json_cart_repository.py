"""JSON-file-backed implementation of CartRepository.

The file is a small local key/value store: a JSON object mapping string
keys to string values.  The cart occupies one key and its value is
itself JSON *text*, an array of ``{"product": {...}, "quantity": n}``
records.  Other keys in the file are left alone.
"""

from __future__ import annotations

import json
from pathlib import Path

from babyland.domain.exceptions import CartDataError, ValidationError
from babyland.domain.model.cart import CART_CURRENCY, Cart
from babyland.domain.model.product import Product
from babyland.domain.model.value_objects import Money, Quantity
from babyland.domain.repository.cart_repository import CartRepository
from babyland.infrastructure.config import DEFAULT_CART_KEY


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path, key: str = DEFAULT_CART_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart | None:
        if not self._file_path.exists():
            return None

        storage = self._read_storage()
        text = storage.get(self._key)
        if text is None:
            return None

        try:
            return self.decode(text)
        except (
            ValueError, KeyError, TypeError, AttributeError, RecursionError, ValidationError
        ) as exc:
            raise CartDataError(f"Unreadable cart under '{self._key}': {exc}") from exc

    def save(self, cart: Cart) -> None:
        try:
            storage = self._read_storage() if self._file_path.exists() else {}
        except CartDataError:
            storage = {}
        storage[self._key] = self.encode(cart)
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(storage, indent=2) + "\n", encoding="utf-8"
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def encode(cart: Cart) -> str:
        return json.dumps(
            [
                {
                    "product": {
                        "id": line.product.id,
                        "code": line.product.code,
                        "name": line.product.name,
                        "description": line.product.description,
                        "price": str(line.product.price.amount),
                        "currency": line.product.price.currency,
                    },
                    "quantity": line.quantity.value,
                }
                for line in cart.lines
            ]
        )

    @staticmethod
    def decode(text: str) -> Cart:
        records = json.loads(text)
        if not isinstance(records, list):
            raise TypeError(f"expected a list of cart lines, got {type(records).__name__}")

        cart = Cart()
        for record in records:
            raw = record["product"]
            product = Product(
                id=str(raw["id"]),
                code=str(raw["code"]),
                name=str(raw["name"]),
                description=str(raw.get("description") or ""),
                price=Money.of(raw["price"], _cart_currency(raw)),
            )
            # Stored quantities must already be valid; duplicates merge.
            quantity = Quantity(record["quantity"])
            cart.add(product, quantity.value)
        return cart

    # --- File helpers ---------------------------------------------------------

    def _read_storage(self) -> dict[str, str]:
        try:
            storage = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (ValueError, RecursionError) as exc:
            raise CartDataError(f"Unreadable storage file {self._file_path}: {exc}") from exc
        if not isinstance(storage, dict):
            raise CartDataError(f"Storage file {self._file_path} is not a JSON object")
        return storage


def _cart_currency(raw: dict) -> str:
    """Stored prices must be in the currency the cart totals in."""
    currency = raw.get("currency", CART_CURRENCY)
    if currency != CART_CURRENCY:
        raise ValidationError(
            f"Cart line priced in {currency!r}, expected {CART_CURRENCY!r}"
        )
    return currency
