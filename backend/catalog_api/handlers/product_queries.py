"""Read-only product queries."""

from __future__ import annotations

from catalog_api.api.schemas.product import ProductRead
from catalog_api.repositories.product_repository import ProductRepository


class GetProductByIdHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def handle(self, product_id: int) -> ProductRead | None:
        product = self.repository.get_by_id(product_id)
        if product is None:
            return None
        return ProductRead.model_validate(product)


class ListProductsHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def handle(self, category_id: int | None = None) -> list[ProductRead]:
        """Return every product, or only those in the given category."""
        products = self.repository.get_all(category_id=category_id)
        return [ProductRead.model_validate(p) for p in products]
