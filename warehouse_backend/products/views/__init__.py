from .product import ProductAddView, ProductListView, ProductUpdateView

__all__ = [
    "ProductAddView",
    "ProductListView",
    "ProductUpdateView",
]
