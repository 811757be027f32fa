"""Application service: the session Cart Store.

Owns the one Cart of a shopping session and keeps its durable copy in
step.  Create one per session (see ``bootstrap.cart_store``) and pass it
to every consumer that reads or changes the cart.

Restoring happens once, in ``__init__``.  A snapshot that cannot be read
back resets the session to an empty cart instead of failing.  Every
mutation then writes a fresh snapshot; a failed write is logged and the
in-memory cart stays authoritative.
"""

from __future__ import annotations

import logging

from babyland.domain.exceptions import CartDataError
from babyland.domain.model.cart import Cart, CartLine
from babyland.domain.model.product import Product
from babyland.domain.model.value_objects import Money
from babyland.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CartStore:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo
        self._cart = self._restore()

    # --- Mutations ------------------------------------------------------------

    def add_to_cart(self, product: Product, quantity: int) -> None:
        self._cart.add(product, quantity)
        self._persist()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        self._cart.update_quantity(product_id, quantity)
        self._persist()

    def remove_item(self, product_id: str) -> None:
        self._cart.remove(product_id)
        self._persist()

    def clear_cart(self) -> None:
        self._cart.clear()
        self._persist()

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> list[CartLine]:
        """Current lines in insertion order (a copy of the list)."""
        return list(self._cart.lines)

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    @property
    def total_items(self) -> int:
        return self._cart.total_items

    @property
    def total_amount(self) -> Money:
        return self._cart.total_amount

    def find_by_code(self, code: str) -> CartLine | None:
        for line in self._cart.lines:
            if line.product.code == code:
                return line
        return None

    # --- Persistence ----------------------------------------------------------

    def _restore(self) -> Cart:
        try:
            cart = self._cart_repo.load()
        except (CartDataError, OSError) as exc:
            logger.warning("Failed to restore saved cart, starting empty: %s", exc)
            return Cart()
        return cart if cart is not None else Cart()

    def _persist(self) -> None:
        try:
            self._cart_repo.save(self._cart)
        except OSError as exc:
            logger.warning("Failed to save cart snapshot: %s", exc)
