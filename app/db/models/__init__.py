# app/db/models/__init__.py
from db.models.category import Category
from db.models.product import Product

__all__ = ["Category", "Product"]
