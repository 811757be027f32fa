"""Application service: Update Product use case."""

from __future__ import annotations

from babyland.domain.exceptions import EntityNotFoundError, ValidationError
from babyland.domain.model.product import Product
from babyland.domain.model.value_objects import Money
from babyland.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        price: str | None = None,
        name: str | None = None,
        description: str | None = None,
    ) -> Product:
        """Update a product's price, name and/or description.

        This does NOT affect any existing orders or cart lines; they
        captured a snapshot of the product when they were created.
        """
        if price is None and name is None and description is None:
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if price is not None:
            product.update_price(Money.of(price))
        if name is not None:
            product.rename(name)
        if description is not None:
            product.describe(description)

        self._product_repo.save(product)
        return product
