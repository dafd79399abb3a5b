"""Persistence gateway for the products table."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_api.db.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """Sole owner of product reads and writes.

    Every method maps to one statement; writes commit immediately. On a
    storage failure the session is rolled back and the error re-raised.
    """

    def __init__(self, session: Session):
        self.session = session

    def exists_by_code(self, code: str, exclude_id: int | None = None) -> bool:
        query = select(Product.id).where(Product.code == code)
        if exclude_id is not None:
            query = query.where(Product.id != exclude_id)
        return bool(self.session.scalar(select(query.exists())))

    def get_by_id(self, product_id: int) -> Product | None:
        return self.session.get(Product, product_id)

    def get_all(self, category_id: int | None = None) -> list[Product]:
        query = select(Product)
        if category_id is not None:
            query = query.where(Product.category_id == category_id)
        return list(self.session.scalars(query.order_by(Product.id)).all())

    def add(self, product: Product) -> Product:
        self.session.add(product)
        self._commit()
        self.session.refresh(product)
        return product

    def save(self, product: Product) -> Product:
        """Commit in-place changes made to a loaded product."""
        self._commit()
        self.session.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        self.session.delete(product)
        self._commit()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
