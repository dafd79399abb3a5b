"""Database models package."""
from catalog_api.db.models.product import Product

__all__ = ["Product"]
