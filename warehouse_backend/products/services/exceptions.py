# products/services/exceptions.py


class ProductError(Exception):
    """Base class for product catalog errors."""


class ProductNotFoundError(ProductError):
    pass


class DuplicateSkuError(ProductError):
    pass


class ImmutableSkuError(ProductError):
    pass
