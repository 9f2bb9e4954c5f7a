"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .category import DEFAULT_CATEGORY_NAME, Category
from .product import Product

__all__ = [
    "DEFAULT_CATEGORY_NAME",
    "Category",
    "Product",
]
