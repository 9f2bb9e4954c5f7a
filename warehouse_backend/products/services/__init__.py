from .exceptions import (
    DuplicateSkuError,
    ImmutableSkuError,
    ProductError,
    ProductNotFoundError,
)

__all__ = [
    "DuplicateSkuError",
    "ImmutableSkuError",
    "ProductError",
    "ProductNotFoundError",
]
