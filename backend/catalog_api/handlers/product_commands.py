"""Command handlers that mutate products."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy.exc import IntegrityError

from catalog_api.api.schemas.product import (
    ProductCreate,
    ProductPatch,
    ProductRead,
    ProductUpdate,
)
from catalog_api.core.clock import Clock
from catalog_api.core.exceptions import DomainValidationError
from catalog_api.db.models.product import Product
from catalog_api.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

NON_POSITIVE_PRICE = "El precio debe ser mayor a cero."
DUPLICATE_CODE = "Ya existe un producto con ese código."

# Fields the patch payload may leave out but never set to null
NON_NULLABLE_FIELDS = (
    "code",
    "name",
    "price",
    "category_id",
    "stock_quantity",
    "active",
)


def ensure_positive_price(price: Decimal) -> None:
    if price <= 0:
        raise DomainValidationError(NON_POSITIVE_PRICE)


def ensure_unique_code(
    repository: ProductRepository, code: str, exclude_id: int | None = None
) -> None:
    if repository.exists_by_code(code, exclude_id=exclude_id):
        raise DomainValidationError(DUPLICATE_CODE)


class CreateProductHandler:
    """Validate and insert a new product, stamped active at the clock's now."""

    def __init__(self, repository: ProductRepository, clock: Clock):
        self.repository = repository
        self.clock = clock

    def handle(self, command: ProductCreate) -> ProductRead:
        ensure_positive_price(command.price)
        ensure_unique_code(self.repository, command.code)

        product = Product(
            code=command.code,
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            stock_quantity=command.stock_quantity,
            active=True,
            created_at=self.clock.now(),
        )
        try:
            self.repository.add(product)
        except IntegrityError as e:
            # A concurrent insert won the race past the existence check
            raise DomainValidationError(DUPLICATE_CODE) from e

        logger.info(f"Created product {product.id} with code {product.code}")
        return ProductRead.model_validate(product)


class UpdateProductHandler:
    """Replace every mutable field of an existing product."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def handle(self, command: ProductUpdate) -> ProductRead | None:
        product = self.repository.get_by_id(command.id)
        if product is None:
            return None

        ensure_positive_price(command.price)
        ensure_unique_code(self.repository, command.code, exclude_id=product.id)

        product.code = command.code
        product.name = command.name
        product.description = command.description
        product.price = command.price
        product.category_id = command.category_id
        product.stock_quantity = command.stock_quantity
        product.active = command.active
        _save(self.repository, product)

        logger.info(f"Updated product {product.id}")
        return ProductRead.model_validate(product)


class PatchProductHandler:
    """Apply only the fields present in the payload to an existing product."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def handle(self, command: ProductPatch) -> ProductRead | None:
        product = self.repository.get_by_id(command.id)
        if product is None:
            return None

        changes: dict[str, Any] = command.model_dump(exclude_unset=True, exclude={"id"})
        for field in NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                raise DomainValidationError(f"El campo {field} no puede ser nulo.")
        if "price" in changes:
            ensure_positive_price(changes["price"])
        if "code" in changes:
            ensure_unique_code(self.repository, changes["code"], exclude_id=product.id)

        for field, value in changes.items():
            setattr(product, field, value)
        _save(self.repository, product)

        logger.info(f"Patched product {product.id} fields {sorted(changes)}")
        return ProductRead.model_validate(product)


class DeleteProductHandler:
    """Permanently remove a product; False when nothing matched."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def handle(self, product_id: int) -> bool:
        product = self.repository.get_by_id(product_id)
        if product is None:
            return False

        self.repository.delete(product)
        logger.info(f"Deleted product {product_id}")
        return True


def _save(repository: ProductRepository, product: Product) -> None:
    try:
        repository.save(product)
    except IntegrityError as e:
        raise DomainValidationError(DUPLICATE_CODE) from e
