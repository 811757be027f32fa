"""Cart aggregate: the shopper's in-progress order.

The cart is an ordered list of lines, one per distinct product id.
Lines keep the position they were first added at; quantity changes
never reorder them.

Quantities are clamped rather than rejected: every mutating method
turns anything below 1 into 1, so none of them can fail on a valid
integer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from babyland.domain.model.product import Product
from babyland.domain.model.value_objects import Money, Quantity

CART_CURRENCY = "USD"


@dataclass
class CartLine:
    """One product's presence in the cart.

    ``product`` is an embedded snapshot taken when the line was created,
    so the cart can show name, code and price without a catalog lookup.
    """

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> None:
        """Add *quantity* of *product*, merging into an existing line.

        A merge only bumps the quantity; the line keeps the product
        snapshot it was created with.
        """
        qty = Quantity.clamped(quantity)
        line = self.find(product.id)
        if line is not None:
            line.quantity = line.quantity + qty
        else:
            self.lines.append(CartLine(product=product, quantity=qty))

    def update_quantity(self, product_id: str, quantity: int) -> None:
        line = self.find(product_id)
        if line is None:
            return
        line.quantity = Quantity.clamped(quantity)

    def remove(self, product_id: str) -> None:
        self.lines = [line for line in self.lines if line.product_id != product_id]

    def clear(self) -> None:
        self.lines = []

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    @property
    def total_amount(self) -> Money:
        result = Money.zero(CART_CURRENCY)
        for line in self.lines:
            result = result + line.subtotal
        return result

    # --- Lookup ---------------------------------------------------------------

    def find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None
