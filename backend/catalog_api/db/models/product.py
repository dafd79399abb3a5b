"""SQLAlchemy model for product records."""

from sqlalchemy import Boolean, Column, Integer, Numeric, String, Text
from sqlalchemy.types import DateTime

from catalog_api.db.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    code = Column(String(64), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(12, 2), nullable=False)
    category_id = Column(Integer, nullable=False, index=True)
    stock_quantity = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True)
    # Stamped by the create handler's clock, never updated afterwards
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<Product id={self.id} code={self.code!r}>"
