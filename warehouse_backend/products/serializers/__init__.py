from .product import (
    ProductCreateSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
)

__all__ = [
    "ProductCreateSerializer",
    "ProductSerializer",
    "ProductUpdateSerializer",
]
