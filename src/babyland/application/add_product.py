"""Application service: Add Product use case."""

from __future__ import annotations

from babyland.domain.exceptions import ValidationError
from babyland.domain.model.product import Product
from babyland.domain.model.value_objects import Money
from babyland.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        code: str,
        name: str,
        price: str,
        description: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not code or not code.strip():
            raise ValidationError("Product code is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not price or not str(price).strip():
            raise ValidationError("Product price is required")

        code = code.strip()
        if self._product_repo.get_by_code(code) is not None:
            raise ValidationError("A product with this code already exists")

        product = Product(
            id=self._product_repo.next_id(),
            code=code,
            name=name.strip(),
            price=Money.of(price),
            description=description.strip(),
        )
        self._product_repo.save(product)
        return product
