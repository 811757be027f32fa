"""Product aggregate.

Products live independently of carts and orders. Both of those keep
their own snapshot of the product fields they need, so editing or
deleting a product never rewrites a cart line or a historical order.
"""

from __future__ import annotations

from dataclasses import dataclass

from babyland.domain.exceptions import ValidationError
from babyland.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is the surrogate key used by carts and order items;
    ``code`` is the unique business key printed in the product QR code.
    """

    id: str
    code: str
    name: str
    price: Money
    description: str = ""

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing orders and cart lines keep the price they captured.
        """
        self.price = new_price

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name is required")
        self.name = new_name.strip()

    def describe(self, description: str) -> None:
        self.description = description.strip()


def qr_payload(code: str) -> str:
    """Return the text encoded in a product's QR code.

    The payload is the bare product code; scanners hand it straight
    to the catalog lookup.
    """
    return code.strip()
