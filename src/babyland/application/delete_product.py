"""Application service: Delete Product use case."""

from __future__ import annotations

from babyland.domain.exceptions import EntityNotFoundError
from babyland.domain.model.product import Product
from babyland.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # Orders keep their item snapshots; nothing else to clean up.
        self._product_repo.delete(product_id)
        return product
