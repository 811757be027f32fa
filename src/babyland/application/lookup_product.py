"""Application service: Catalog Lookup (query).

Resolves a scanned or typed product code to a catalog Product.  This
runs before every add-to-cart.
"""

from __future__ import annotations

from babyland.domain.exceptions import EntityNotFoundError, ValidationError
from babyland.domain.model.product import Product
from babyland.domain.repository.product_repository import ProductRepository


class LookupProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, code: str) -> Product:
        if not code or not code.strip():
            raise ValidationError("Product code is required")

        product = self._product_repo.get_by_code(code.strip())
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{code.strip()}'")
        return product
